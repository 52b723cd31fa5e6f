"""Mistral AI LLM provider.

Uses Mistral AI API for content-based file categorization.
"""

import os

from mistralai import Mistral

from utils.retry import retry_on_transient_error
from .base import LLM, LLMError, is_retryable

MODEL = "mistral-small-latest"


class MistralLLM(LLM):
    """Mistral AI implementation for file categorization.
    
    Uses:
    - mistral-small-latest for all answers
    - File upload API for PDFs (OCR)
    """
    
    def __init__(self) -> None:
        """Initialize Mistral client.
        
        Raises:
            KeyError: If MISTRAL_API_KEY environment variable is not set
        """
        api_key = os.environ["MISTRAL_API_KEY"]
        self.client = Mistral(api_key=api_key)
    
    @property
    def name(self) -> str:
        return "mistral"
    
    @retry_on_transient_error(is_retryable=is_retryable, max_retries=3)
    def _complete(self, messages: list) -> str:
        response = self.client.chat.complete(model=MODEL, messages=messages)
        return response.choices[0].message.content
    
    def _ask(self, messages: list) -> str:
        try:
            response_text = self._complete(messages)
        except Exception as e:
            raise LLMError(f"Mistral API error: {e}")
        return self._parse_category(response_text)
    
    def categorize_text(self, content: str, filename: str = "") -> str:
        """Categorize text content with a single chat completion."""
        prompt = self._build_text_prompt(content, filename)
        return self._ask([{"role": "user", "content": prompt}])
    
    def categorize_document(self, pdf_path: str) -> str:
        """Categorize a PDF using Mistral's file upload API."""
        self._check_file_size(pdf_path)
        
        try:
            with open(pdf_path, 'rb') as file:
                upload_response = self.client.files.upload(
                    file={
                        "file_name": os.path.basename(pdf_path),
                        "content": file,
                    },
                    purpose="ocr"
                )
            signed_url = self.client.files.get_signed_url(file_id=upload_response.id)
        except Exception as e:
            raise LLMError(f"Failed to upload document to Mistral: {e}")
        
        prompt = self._build_document_prompt(os.path.basename(pdf_path))
        return self._ask([
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": prompt},
                    {"type": "document_url", "document_url": signed_url.url}
                ]
            }
        ])
