from contextlib import asynccontextmanager
import logging

from app.core.config.scoring import get_scoring_config
from app.enrichment import get_enrichment_provider
from app.taxonomy import get_default_taxonomy

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    get_scoring_config()
    catalog = get_default_taxonomy()
    try:
        provider = get_enrichment_provider()
    except RuntimeError as exc:
        logger.warning("resume_enrichment_disabled: %s", exc)
        provider = None

    app.state.catalog = catalog
    app.state.enrichment_provider = provider
    logger.info(
        "resume_analyzer_ready technical=%s soft=%s roles=%s enrichment=%s",
        len(catalog.technical_skills),
        len(catalog.soft_skills),
        len(catalog.role_profiles),
        provider.name if provider else "none",
    )
    yield
