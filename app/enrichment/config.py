import os
from dataclasses import dataclass


@dataclass(frozen=True)
class EnrichmentConfig:
    provider: str
    model: str
    timeout_s: float


def load_enrichment_config() -> EnrichmentConfig:
    provider = (os.getenv("ENRICHMENT_PROVIDER") or "none").strip().lower()
    model = (os.getenv("ENRICHMENT_MODEL") or "gpt-4o-mini").strip()
    try:
        timeout_s = float(os.getenv("ENRICHMENT_TIMEOUT_S") or "15")
    except ValueError:
        timeout_s = 15.0
    return EnrichmentConfig(provider=provider, model=model, timeout_s=timeout_s)
