from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .provider import RoleProfile, SkillCatalog, TaxonomyProvider


class LocalTaxonomy(TaxonomyProvider):
    def __init__(self, catalog_path: str | Path | None = None) -> None:
        self._path = Path(catalog_path) if catalog_path else Path(__file__).with_name("catalog.json")

    def load_catalog(self) -> SkillCatalog:
        with self._path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        if not isinstance(raw, dict):
            raise ValueError(f"Catalog '{self._path}' must contain a JSON object.")
        return build_catalog(raw)


def _string_tuple(raw: Any, field: str) -> tuple[str, ...]:
    if not isinstance(raw, list):
        raise ValueError(f"Catalog field '{field}' must be a list.")
    values: list[str] = []
    seen: set[str] = set()
    for item in raw:
        value = str(item).strip()
        if not value or value.lower() in seen:
            continue
        seen.add(value.lower())
        values.append(value)
    return tuple(values)


def _role_profile(raw: Any) -> RoleProfile:
    if not isinstance(raw, dict):
        raise ValueError("Each role profile must be a JSON object.")
    title = str(raw.get("title") or "").strip()
    if not title:
        raise ValueError("Role profile is missing a title.")
    required = _string_tuple(raw.get("required"), f"{title}.required")
    optional = _string_tuple(raw.get("optional"), f"{title}.optional")
    if not required or not optional:
        raise ValueError(f"Role profile '{title}' needs at least one required and one optional skill.")
    return RoleProfile(title=title, required=required, optional=optional)


def build_catalog(raw: dict[str, Any]) -> SkillCatalog:
    technical = _string_tuple(raw.get("technical_skills"), "technical_skills")
    soft = _string_tuple(raw.get("soft_skills"), "soft_skills")

    overlap = {skill.lower() for skill in technical} & {skill.lower() for skill in soft}
    if overlap:
        raise ValueError(f"Technical and soft skill vocabularies overlap: {sorted(overlap)}")

    verbs = frozenset(verb.lower() for verb in _string_tuple(raw.get("action_verbs"), "action_verbs"))
    roles = tuple(_role_profile(item) for item in raw.get("role_profiles") or [])

    return SkillCatalog(
        technical_skills=technical,
        soft_skills=soft,
        action_verbs=verbs,
        role_profiles=roles,
    )
