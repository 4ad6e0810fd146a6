"""
Sync entity registry.

Maps entity types to their model classes, normalizers, natural keys and
named state transitions.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from apps.sync.exceptions import UnknownEntityTypeError

if TYPE_CHECKING:
    from apps.sync.models import SyncableModel
    from apps.sync.normalizers import EntityNormalizer


@dataclass(frozen=True)
class Transition:
    """
    A named state transition on a workflow entity.

    Attributes:
        name: Operation kind that triggers it (e.g. 'approve')
        source_states: States the record must be in
        target_state: State written on success
        apply: Optional hook setting transition-specific fields from the payload
    """

    name: str
    source_states: tuple[str, ...]
    target_state: str
    apply: Callable[[SyncableModel, dict], dict[str, Any]] | None = None
    state_field: str = "status"


@dataclass(frozen=True)
class EntityConfig:
    """Everything the engine needs to know about one entity type."""

    entity_type: str
    model: type[SyncableModel]
    normalizer: EntityNormalizer
    natural_key: str | None = None
    transitions: dict[str, Transition] = field(default_factory=dict)
    aliases: tuple[str, ...] = ()

    def get_transition(self, name: str) -> Transition | None:
        return self.transitions.get(name)


class SyncRegistry:
    """
    Registry of syncable entity types and their configurations.

    The set of entity types is closed: each member of the domain's entity enum
    registers exactly once at app startup, and missing() lets startup fail
    loudly when one is forgotten.
    """

    _configs: dict[str, EntityConfig] = {}
    _aliases: dict[str, str] = {}

    @classmethod
    def register(cls, config: EntityConfig) -> None:
        """
        Register a syncable entity type.

        Args:
            config: The entity configuration; its aliases resolve to it too
        """
        cls._configs[config.entity_type] = config
        for alias in config.aliases:
            cls._aliases[alias] = config.entity_type

    @classmethod
    def canonical_name(cls, entity_type: str) -> str:
        """Resolve an alias to its canonical entity type."""
        return cls._aliases.get(entity_type, entity_type)

    @classmethod
    def get_config(cls, entity_type: str) -> EntityConfig:
        """
        Get the configuration for an entity type or alias.

        Raises:
            UnknownEntityTypeError: If entity type is not registered
        """
        name = cls.canonical_name(entity_type)
        if name not in cls._configs:
            raise UnknownEntityTypeError(f"Unknown entity type: {entity_type}")
        return cls._configs[name]

    @classmethod
    def get_model(cls, entity_type: str) -> type[SyncableModel]:
        """Get the model class for an entity type."""
        return cls.get_config(entity_type).model

    @classmethod
    def get_all_entity_types(cls) -> list[str]:
        """Get list of all registered canonical entity types."""
        return list(cls._configs.keys())

    @classmethod
    def is_registered(cls, entity_type: str) -> bool:
        """Check if an entity type or alias is registered."""
        return cls.canonical_name(entity_type) in cls._configs

    @classmethod
    def missing(cls, entity_types: Iterable[str]) -> list[str]:
        """Return the given entity types that have no registration."""
        return [t for t in entity_types if t not in cls._configs]

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations. Useful for testing."""
        cls._configs.clear()
        cls._aliases.clear()
