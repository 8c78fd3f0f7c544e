from adapters.library.details import RegexDetailExtractor, extract_tags
from adapters.library.listing import extract_identifiers, filter_identifiers

__all__ = [
    "RegexDetailExtractor",
    "extract_identifiers",
    "extract_tags",
    "filter_identifiers",
]
