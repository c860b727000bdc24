from __future__ import annotations
from typing import List
from .base import BaseDictionary, REGISTRY, register

from . import wordlist  # noqa: F401
from .wordlist import WordListDictionary


def create_dictionary(dictionary_id: str, **kwargs) -> BaseDictionary:
    """
    Factory: instantiate a registered dictionary checker by id.
    """
    try:
        cls = REGISTRY[dictionary_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown dictionary id: {dictionary_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_dictionary_ids() -> List[str]:
    """
    Return all registered dictionary ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "BaseDictionary",
    "REGISTRY",
    "register",
    "WordListDictionary",
    "create_dictionary",
    "get_dictionary_ids",
]
