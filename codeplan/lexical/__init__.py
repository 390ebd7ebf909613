"""Lexical analysis package."""

from .analyzer import analyze
from .entities import extract_entities, find_numbers, find_technologies
from .tagger import tag
from .tokenizer import tokenize
from .types import EntityBuckets, EntityCategory, LexicalAnalysis

__all__ = [
    "analyze",
    "extract_entities",
    "find_numbers",
    "find_technologies",
    "tag",
    "tokenize",
    "EntityBuckets",
    "EntityCategory",
    "LexicalAnalysis",
]
