from .factory import get_enrichment_provider
from .types import EnrichmentError, EnrichmentPayload, EnrichmentProvider, EnrichmentResult

__all__ = [
    "EnrichmentError",
    "EnrichmentPayload",
    "EnrichmentProvider",
    "EnrichmentResult",
    "get_enrichment_provider",
]
