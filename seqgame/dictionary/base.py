from __future__ import annotations

from typing import Dict, Type

# ---- Global lookup registry ----
REGISTRY: Dict[str, Type["BaseLookup"]] = {}


def register(cls: Type["BaseLookup"]) -> Type["BaseLookup"]:
    """
    Decorator: @register on a lookup class adds it to REGISTRY by its `id`.
    """
    lid = getattr(cls, "id", None)
    if not lid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if lid in REGISTRY:
        raise ValueError(f"Duplicate lookup id: {lid}")
    REGISTRY[lid] = cls
    return cls


# ---- Base class that lookups inherit ----
class BaseLookup:
    id = "base"
    name = "Base"

    def exists(self, word: str) -> bool:
        """True if `word` is a recognized English word."""
        raise NotImplementedError("Override in subclass")
