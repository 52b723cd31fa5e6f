"""LLM provider abstraction for archivesort.

Provides a uniform interface for content-based categorization across providers:
- MistralLLM: Mistral AI (default)
- OpenAILLM: OpenAI GPT-4o

Usage:
    from models import create_llm
    
    llm = create_llm("mistral")
    label = llm.categorize_text(content, filename="notes.txt")
    label = llm.categorize_document("scan.pdf")
"""

from .base import LLM, LLMError, CATEGORIZE_PROMPT
from .mistral import MistralLLM
from .openai import OpenAILLM


def create_llm(provider: str = "mistral") -> LLM:
    """Create an LLM instance for the specified provider.
    
    Args:
        provider: LLM provider name ("mistral" or "openai")
        
    Raises:
        ValueError: If provider is not recognized
    """
    provider = provider.lower()
    
    if provider == "mistral":
        return MistralLLM()
    elif provider == "openai":
        return OpenAILLM()
    else:
        raise ValueError(
            f"Unknown LLM provider: {provider}. "
            "Must be 'mistral' or 'openai'"
        )


__all__ = [
    'LLM',
    'LLMError',
    'CATEGORIZE_PROMPT',
    'MistralLLM',
    'OpenAILLM',
    'create_llm',
]
