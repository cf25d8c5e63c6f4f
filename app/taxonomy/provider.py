from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class RoleProfile:
    title: str
    required: tuple[str, ...]
    optional: tuple[str, ...]


@dataclass(frozen=True)
class SkillCatalog:
    """Read-only vocabularies and role profiles shared by every request."""

    technical_skills: tuple[str, ...]
    soft_skills: tuple[str, ...]
    action_verbs: frozenset[str]
    role_profiles: tuple[RoleProfile, ...]


class TaxonomyProvider(Protocol):
    def load_catalog(self) -> SkillCatalog:
        """Return the immutable skill catalog."""
