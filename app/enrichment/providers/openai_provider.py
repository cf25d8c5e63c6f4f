from __future__ import annotations

import asyncio
import json
import os
from typing import Optional

from openai import AsyncOpenAI
from pydantic import ValidationError

from app.enrichment.types import EnrichmentError, EnrichmentPayload

_SYSTEM_PROMPT = (
    "You annotate resume text. Reply with a JSON object with keys "
    '"key_phrases" (list of {"text", "score"}), '
    '"entities" (list of {"text", "type", "score"}; type is one of PERSON, LOCATION, '
    "ORGANIZATION, COMMERCIAL_ITEM, EVENT, DATE, QUANTITY, TITLE, OTHER) and "
    '"sentiment" (one of POSITIVE, NEGATIVE, NEUTRAL, MIXED). '
    "Scores are confidences between 0 and 1. Use only phrases present in the text."
)


class OpenAIEnrichmentProvider:
    name = "openai"

    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 15.0,
        max_retries: int = 1,
        max_output_tokens: int = 900,
    ):
        self._model = model
        self._timeout_s = timeout_s
        self._max_output_tokens = max_output_tokens
        key = (api_key or os.getenv("OPENAI_API_KEY") or "").strip()
        if not key:
            raise RuntimeError("OPENAI_API_KEY is missing")

        self._client = AsyncOpenAI(
            api_key=key,
            base_url=(base_url or os.getenv("OPENAI_BASE_URL") or None),
            timeout=timeout_s,
            max_retries=int(os.getenv("OPENAI_MAX_RETRIES", str(max_retries))),
        )

    async def enrich(self, text: str) -> EnrichmentPayload:
        try:
            response = await asyncio.wait_for(
                self._client.chat.completions.create(
                    model=self._model,
                    messages=[
                        {"role": "system", "content": _SYSTEM_PROMPT},
                        {"role": "user", "content": text},
                    ],
                    temperature=0.0,
                    response_format={"type": "json_object"},
                    max_tokens=self._max_output_tokens,
                ),
                timeout=self._timeout_s,
            )
        except asyncio.TimeoutError as exc:
            raise EnrichmentError("Enrichment request timed out.", code="enrichment_timeout") from exc
        except Exception as exc:  # noqa: BLE001 - SDK errors share no useful base here
            raise EnrichmentError(f"Enrichment request failed: {exc}", code="enrichment_request_failed") from exc

        content = response.choices[0].message.content if response.choices else ""
        if not content:
            raise EnrichmentError("Enrichment response was empty.", code="enrichment_empty")

        try:
            return EnrichmentPayload.model_validate(json.loads(content))
        except (json.JSONDecodeError, ValidationError) as exc:
            raise EnrichmentError(f"Enrichment response was invalid: {exc}", code="enrichment_invalid") from exc
