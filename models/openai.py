"""OpenAI LLM provider.

Uses OpenAI API for content-based file categorization.
"""

import base64
import os

from openai import OpenAI

from utils.retry import retry_on_transient_error
from .base import LLM, LLMError, is_retryable

MODEL = "gpt-4o"


class OpenAILLM(LLM):
    """OpenAI implementation for file categorization.
    
    Uses:
    - gpt-4o for all answers
    - Base64 encoding for PDF documents
    """
    
    def __init__(self) -> None:
        """Initialize OpenAI client.
        
        Uses OPENAI_API_KEY environment variable automatically.
        """
        self.client = OpenAI()
    
    @property
    def name(self) -> str:
        return "openai"
    
    @retry_on_transient_error(is_retryable=is_retryable, max_retries=3)
    def _complete(self, messages: list) -> str:
        response = self.client.chat.completions.create(model=MODEL, messages=messages)
        return response.choices[0].message.content
    
    def _ask(self, messages: list) -> str:
        try:
            response_text = self._complete(messages)
        except Exception as e:
            raise LLMError(f"OpenAI API error: {e}")
        return self._parse_category(response_text)
    
    def categorize_text(self, content: str, filename: str = "") -> str:
        """Categorize text content with a single chat completion."""
        prompt = self._build_text_prompt(content, filename)
        return self._ask([{"role": "user", "content": prompt}])
    
    def categorize_document(self, pdf_path: str) -> str:
        """Categorize a PDF sent inline as a base64 file part."""
        self._check_file_size(pdf_path)
        
        try:
            with open(pdf_path, "rb") as f:
                base64_pdf = base64.b64encode(f.read()).decode("utf-8")
        except OSError as e:
            raise LLMError(f"Failed to read PDF file: {e}")
        
        filename = os.path.basename(pdf_path)
        return self._ask([
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": self._build_document_prompt(filename)},
                    {
                        "type": "file",
                        "file": {
                            "filename": filename,
                            "file_data": f"data:application/pdf;base64,{base64_pdf}"
                        }
                    }
                ]
            }
        ])
