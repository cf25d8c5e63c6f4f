from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the health status of the application.")
async def health_check(request: Request):
    provider = getattr(request.app.state, "enrichment_provider", None)
    return {"status": "healthy", "enrichment_provider": provider.name if provider else "none"}
