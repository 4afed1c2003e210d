"""Text utilities (modularized).

Public API is organized under:
- core/           normalization + tokenization
- normalization/  synonym map / expansion
- matching/       attribute extraction, fuzzy similarity, TF-IDF
"""

from .core.cleaning import normalize_text, sanitize_text
from .core.tokenize import tokenize_keywords, tokenize_words, word_ngrams
from .normalization import canonicalize_token, expand_synonyms, get_synonym_map

__all__ = [
    # core
    "normalize_text",
    "sanitize_text",
    "tokenize_keywords",
    "tokenize_words",
    "word_ngrams",
    # normalization
    "canonicalize_token",
    "expand_synonyms",
    "get_synonym_map",
]
