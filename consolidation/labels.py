"""Label normalization and significant-word extraction.

Raw labels come straight from a classifier and are never validated, so both
functions here are total over any string (empty, punctuation-only, Unicode).
"""

import re
from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

# Anything that is not a letter, digit or whitespace. Underscore is a word
# character for the regex engine but a separator for labels.
_NON_WORD_RE = re.compile(r'[^\w\s]|_')
_WHITESPACE_RE = re.compile(r'\s+')

# Tokens of this length or shorter are noise ("a", "of", "Q1").
MIN_WORD_LENGTH = 3


def normalize_label(label: str) -> str:
    """Normalize a raw category label for comparison.
    
    Lowercases, spells out '&' as 'and', replaces punctuation with spaces
    and collapses whitespace. Normalizing twice gives the same result.
    
    Example:
        >>> normalize_label("  Bills & Receipts_2024!")
        'bills and receipts 2024'
    """
    text = label.lower().replace('&', ' and ')
    text = _NON_WORD_RE.sub(' ', text)
    return _WHITESPACE_RE.sub(' ', text).strip()


def significant_words(normalized: str) -> FrozenSet[str]:
    """Return the set of tokens longer than two characters."""
    return frozenset(w for w in normalized.split() if len(w) >= MIN_WORD_LENGTH)


@dataclass(frozen=True)
class RawCategoryEntry:
    """One distinct label produced upstream and the files that got it.
    
    Attributes:
        label: The label exactly as the classifier returned it
        paths: File paths in the order they were classified
        normalized: Normalized form of the label (derived)
        words: Significant words of the normalized label (derived)
    """
    label: str
    paths: Tuple[str, ...]
    normalized: str = field(init=False, repr=False, compare=False)
    words: FrozenSet[str] = field(init=False, repr=False, compare=False)
    
    def __post_init__(self) -> None:
        normalized = normalize_label(self.label)
        object.__setattr__(self, 'normalized', normalized)
        object.__setattr__(self, 'words', significant_words(normalized))
