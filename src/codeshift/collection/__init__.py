"""Collection and capability surface exports."""

from codeshift.collection.collection import GENERIC_KIND, Collection
from codeshift.collection.methods import MethodRegistry, MethodSpec

__all__ = [
    "GENERIC_KIND",
    "Collection",
    "MethodRegistry",
    "MethodSpec",
]
