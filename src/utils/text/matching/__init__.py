"""Matching package (attribute signals, fuzzy similarity, TF-IDF)."""

from .signals import (
    AttributeDictionary,
    ExtractedAttributes,
    attribute_cache_info,
    clear_attribute_cache,
    extract_attributes,
    extract_model_codes,
    get_attribute_dictionary,
)
from .similarity import (
    edit_distance,
    find_best_match,
    fuzzy_score,
    fuzzy_similarity,
    is_similar,
    jaccard_similarity,
)
from .tfidf import CorpusIndex, analyze, build_index

__all__ = [
    "AttributeDictionary",
    "ExtractedAttributes",
    "attribute_cache_info",
    "clear_attribute_cache",
    "extract_attributes",
    "extract_model_codes",
    "get_attribute_dictionary",
    "edit_distance",
    "find_best_match",
    "fuzzy_score",
    "fuzzy_similarity",
    "is_similar",
    "jaccard_similarity",
    "CorpusIndex",
    "analyze",
    "build_index",
]
