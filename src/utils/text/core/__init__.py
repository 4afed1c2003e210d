"""Core text processing (cleaning, tokenization)."""

from .cleaning import normalize_text, sanitize_text
from .tokenize import tokenize_keywords, tokenize_words, word_ngrams

__all__ = [
    "normalize_text",
    "sanitize_text",
    "tokenize_keywords",
    "tokenize_words",
    "word_ngrams",
]
