from functools import lru_cache

from .local_taxonomy import LocalTaxonomy, build_catalog
from .provider import RoleProfile, SkillCatalog, TaxonomyProvider


@lru_cache(maxsize=1)
def get_default_taxonomy() -> SkillCatalog:
    return LocalTaxonomy().load_catalog()


__all__ = [
    "TaxonomyProvider",
    "LocalTaxonomy",
    "RoleProfile",
    "SkillCatalog",
    "build_catalog",
    "get_default_taxonomy",
]
