from __future__ import annotations
from typing import List
from .base import BaseLookup, REGISTRY, register

from . import api  # noqa: F401
from . import local  # noqa: F401
from .api import DictionaryApiLookup
from .local import WordSetLookup


def create_lookup(lookup_id: str, **kwargs) -> BaseLookup:
    """
    Factory: instantiate a registered lookup by id.
    """
    try:
        cls = REGISTRY[lookup_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown lookup id: {lookup_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_lookup_ids() -> List[str]:
    """
    Return all registered lookup ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "BaseLookup", "REGISTRY", "register", "create_lookup", "get_lookup_ids",
    "DictionaryApiLookup", "WordSetLookup",
]
