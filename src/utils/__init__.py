"""Utilities package

- hash_utils: cache keys / corpus fingerprints
- resource_loader: YAML dictionaries under resources/
- text/: normalization, synonyms, matching signals
"""

from .hash_utils import hash_string, generate_attribute_cache_key, generate_corpus_fingerprint

__all__ = [
    "hash_string",
    "generate_attribute_cache_key",
    "generate_corpus_fingerprint",
]
