from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from pydantic import BaseModel, Field

from app.schemas.analysis import EnrichmentStatus, Entity, KeyPhrase, SentimentLabel


class EnrichmentError(RuntimeError):
    def __init__(self, message: str, *, code: str = "enrichment_unavailable"):
        super().__init__(message)
        self.code = code


class EnrichmentPayload(BaseModel):
    key_phrases: list[KeyPhrase] = Field(default_factory=list)
    entities: list[Entity] = Field(default_factory=list)
    sentiment: SentimentLabel = "NEUTRAL"


@dataclass(frozen=True)
class EnrichmentResult:
    """Outcome of the best-effort enrichment call; never raises downstream."""

    status: EnrichmentStatus
    payload: EnrichmentPayload = field(default_factory=EnrichmentPayload)
    error_code: str | None = None

    @classmethod
    def ok(cls, payload: EnrichmentPayload) -> "EnrichmentResult":
        return cls(status="ok", payload=payload)

    @classmethod
    def failed(cls, code: str) -> "EnrichmentResult":
        return cls(status="failed", error_code=code)

    @classmethod
    def skipped(cls) -> "EnrichmentResult":
        return cls(status="skipped")


class EnrichmentProvider(Protocol):
    name: str

    async def enrich(self, text: str) -> EnrichmentPayload: ...
