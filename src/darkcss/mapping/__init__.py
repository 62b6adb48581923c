from darkcss.mapping.builder import expand_mappings, expand_pseudo
from darkcss.mapping.model import IMPORTANT_SUFFIX, MappingEntry, MappingTable

__all__ = [
    "expand_mappings",
    "expand_pseudo",
    "IMPORTANT_SUFFIX",
    "MappingEntry",
    "MappingTable",
]
