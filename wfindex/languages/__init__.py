"""Workflow language implementations and the registry that selects them."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Sequence, Set

from .base import ConventionLanguage, LanguagePolicy, WorkflowLanguage
from .snakemake import SnakemakeLanguage
from .swl import SillyWorkflowLanguage

LanguageFactory = Callable[[], WorkflowLanguage]

_BUILTIN_FACTORIES: Dict[str, LanguageFactory] = {
    "snakemake": SnakemakeLanguage,
    "swl": SillyWorkflowLanguage,
}

_registry: Dict[str, LanguageFactory] = dict(_BUILTIN_FACTORIES)


class UnknownLanguageError(ValueError):
    """Raised when no enabled language recognises a descriptor path."""


def register_language(name: str, factory: LanguageFactory) -> None:
    """Make ``factory`` available under ``name`` for later discovery."""
    key = name.lower()
    if key in _registry:
        raise ValueError(f"Language '{name}' is already registered")
    _registry[key] = factory


def unregister_language(name: str) -> None:
    """Remove a previously registered language; built-ins cannot be removed."""
    key = name.lower()
    if key in _BUILTIN_FACTORIES:
        raise ValueError(f"Built-in language '{name}' cannot be unregistered")
    _registry.pop(key, None)


def available_languages() -> List[str]:
    return list(_registry)


def get_language(name: str) -> WorkflowLanguage:
    """Instantiate the language registered as ``name``."""
    factory = _registry.get(name.lower())
    if factory is None:
        raise ValueError(f"Unknown language requested: {name}")
    return _instantiate(name, factory)


def load_languages(enabled: Sequence[str] | None = None) -> Dict[str, WorkflowLanguage]:
    """Return instantiated languages keyed by registry name, in registration order."""

    enabled_set: Set[str] | None = None
    if enabled is not None:
        enabled_set = {name.lower() for name in enabled}
        unknown = enabled_set.difference(_registry)
        if unknown:
            missing = ", ".join(sorted(unknown))
            raise ValueError(f"Unknown languages requested: {missing}")

    return {
        name: _instantiate(name, factory)
        for name, factory in _registry.items()
        if enabled_set is None or name in enabled_set
    }


def discover_languages(enabled: Sequence[str] | None = None) -> List[WorkflowLanguage]:
    """Return instantiated languages, honoring optional enabled names."""
    return list(load_languages(enabled).values())


def detect_language(initial_path: str, languages: Iterable[WorkflowLanguage]) -> WorkflowLanguage:
    """Return the first language whose primary-path pattern matches ``initial_path``."""
    for language in languages:
        if language.matches_initial_path(initial_path):
            return language
    raise UnknownLanguageError(f"No enabled language recognises {initial_path}")


def _instantiate(name: str, factory: LanguageFactory) -> WorkflowLanguage:
    instance = factory()
    if not isinstance(instance, WorkflowLanguage):
        raise TypeError(f"Language factory for '{name}' did not return a WorkflowLanguage instance")
    return instance


__all__ = [
    "ConventionLanguage",
    "LanguagePolicy",
    "SillyWorkflowLanguage",
    "SnakemakeLanguage",
    "UnknownLanguageError",
    "WorkflowLanguage",
    "available_languages",
    "detect_language",
    "discover_languages",
    "get_language",
    "load_languages",
    "register_language",
    "unregister_language",
]
