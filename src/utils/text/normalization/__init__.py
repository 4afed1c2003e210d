"""Normalization package (synonym map + expansion)."""

from .synonyms import (
    SynonymMap,
    build_canonical_lookup,
    build_synonym_map,
    canonicalize_token,
    expand_synonyms,
    get_canonical_lookup,
    get_synonym_map,
)

__all__ = [
    "SynonymMap",
    "build_canonical_lookup",
    "build_synonym_map",
    "canonicalize_token",
    "expand_synonyms",
    "get_canonical_lookup",
    "get_synonym_map",
]
