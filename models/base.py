"""Base classes for LLM providers.

This module defines the abstract interface that all LLM backends must implement.
"""

import os
from abc import ABC, abstractmethod
from typing import Optional

from utils.retry import TRANSIENT_HTTP_STATUS_CODES, is_transient_network_error


class LLMError(Exception):
    """Base exception for LLM operations."""
    pass


# Maximum file size for document categorization (20MB)
MAX_FILE_SIZE_MB = 20

# Labels longer than this are treated as a malformed answer
MAX_CATEGORY_LENGTH = 60


CATEGORIZE_PROMPT = """You are a file categorization assistant. Decide what the file below is based on its ACTUAL CONTENT, not its file type.

Return ONLY ONE specific category name, with no explanation or other text.

Examples of content-based categories:
- Invoice
- Receipt
- Resume/CV
- Cover Letter
- Contract
- Business Report
- Financial Statement
- Meeting Notes
- Tutorial
- Research Paper
- Personal Letter
- Product Description
- API Documentation
- User Manual
- Creative Story
- Source Code (specify language if clear)
- Dataset
- Configuration File
- Log File
- Marketing Copy
- Legal Document

If none of these fit, make up a short descriptive category for the content.
Do NOT answer with generic categories like "Document" or "Text File" unless the content really is generic.
"""


def is_retryable(exc: Exception) -> bool:
    """Check if an LLM API error is worth retrying.
    
    Both the Mistral and OpenAI SDKs attach `status_code` to HTTP errors.
    """
    if getattr(exc, "status_code", None) in TRANSIENT_HTTP_STATUS_CODES:
        return True
    return is_transient_network_error(exc)


class LLM(ABC):
    """Abstract base class for LLM providers.
    
    All LLM providers (Mistral, OpenAI) implement this interface for
    content-based file categorization.
    """
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name (e.g., 'mistral', 'openai')."""
        pass
    
    @abstractmethod
    def categorize_text(self, content: str, filename: str = "") -> str:
        """Return a category label for a piece of text content.
        
        Args:
            content: File content (already truncated by the caller)
            filename: Optional filename for context
            
        Returns:
            Category label as returned by the model
            
        Raises:
            LLMError: If the API call fails or the answer is unusable
        """
        pass
    
    @abstractmethod
    def categorize_document(self, pdf_path: str) -> str:
        """Return a category label for a PDF document.
        
        Raises:
            LLMError: If the API call fails or the answer is unusable
            ValueError: If the file is too large
        """
        pass
    
    # =========================================================================
    # Helper methods (shared by all implementations)
    # =========================================================================
    
    def _check_file_size(self, path: str) -> None:
        """Validate file size is under the limit.
        
        Raises:
            ValueError: If the file exceeds the size limit
        """
        file_size = os.path.getsize(path)
        if file_size > MAX_FILE_SIZE_MB * 1024 * 1024:
            raise ValueError(
                f"File exceeds {MAX_FILE_SIZE_MB}MB limit "
                f"({file_size / 1024 / 1024:.1f}MB)"
            )
    
    def _build_text_prompt(self, content: str, filename: str = "") -> str:
        """Build the full prompt for text categorization."""
        prompt = CATEGORIZE_PROMPT
        if filename:
            prompt += f"\nFilename: {filename}\n"
        prompt += f"\nContent:\n{content}"
        return prompt
    
    def _build_document_prompt(self, filename: str) -> str:
        """Build the prompt that accompanies an attached document."""
        return CATEGORIZE_PROMPT + f"\nFilename: {filename}\nThe document is attached."
    
    def _parse_category(self, response: Optional[str]) -> str:
        """Clean up the model's answer into a single label.
        
        Takes the first non-empty line and strips list markers, quotes and a
        leading "Category:" prefix.
        
        Raises:
            LLMError: If no usable label is found
        """
        for line in (response or "").strip().split('\n'):
            line = line.strip().lstrip('-*').strip()
            if not line:
                continue
            if line.lower().startswith('category:'):
                line = line.split(':', 1)[1].strip()
            line = line.strip('"\'`').strip()
            if line and len(line) <= MAX_CATEGORY_LENGTH:
                return line
            break
        raise LLMError(f"Unusable category answer: {response!r}")
