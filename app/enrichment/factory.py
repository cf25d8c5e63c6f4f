from app.enrichment.config import load_enrichment_config
from app.enrichment.types import EnrichmentProvider

from app.enrichment.providers.openai_provider import OpenAIEnrichmentProvider


def get_enrichment_provider() -> EnrichmentProvider | None:
    cfg = load_enrichment_config()

    if cfg.provider in {"", "none", "off", "disabled"}:
        return None

    if cfg.provider == "openai":
        return OpenAIEnrichmentProvider(model=cfg.model, timeout_s=cfg.timeout_s)

    raise ValueError(f"Unsupported ENRICHMENT_PROVIDER='{cfg.provider}'")
