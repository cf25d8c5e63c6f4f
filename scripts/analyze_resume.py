from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.enrichment import get_enrichment_provider  # noqa: E402
from app.parsing import UnsupportedDocumentError, parse_document  # noqa: E402
from app.schemas.analysis import AnalysisRequest  # noqa: E402
from app.services.analysis_service import AnalysisInputError, analyze_resume  # noqa: E402
from app.taxonomy import get_default_taxonomy  # noqa: E402

logger = logging.getLogger("analyze_resume")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Analyze a resume (PDF, DOCX or TXT) and print JSON.")
    parser.add_argument("resume", help="Path to the resume document")
    parser.add_argument("--job-description", help="Path to a plain-text job description")
    parser.add_argument(
        "--strategy",
        choices=("skills", "keywords"),
        default="skills",
        help="ATS scoring strategy",
    )
    parser.add_argument(
        "--no-enrichment",
        action="store_true",
        help="Skip the external phrase/entity/sentiment enrichment call.",
    )
    parser.add_argument("--out", help="Write JSON to this file instead of stdout")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        parsed = parse_document(args.resume)
    except (OSError, UnsupportedDocumentError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    for warning in parsed.parsing_warnings:
        logger.warning("resume_parse_warning doc_id=%s: %s", parsed.doc_id, warning)

    job_description = None
    if args.job_description:
        try:
            job_description = Path(args.job_description).read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            print(f"error: cannot read job description: {exc}", file=sys.stderr)
            return 2

    provider = None
    if not args.no_enrichment:
        try:
            provider = get_enrichment_provider()
        except RuntimeError as exc:
            logger.warning("resume_enrichment_disabled: %s", exc)

    try:
        request = AnalysisRequest(
            resume_text=parsed.text,
            job_description=job_description,
            ats_strategy=args.strategy,
            include_enrichment=not args.no_enrichment,
        )
    except ValidationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    try:
        result = asyncio.run(analyze_resume(request, catalog=get_default_taxonomy(), provider=provider))
    except AnalysisInputError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    output = json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False)
    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(output + "\n", encoding="utf-8")
    else:
        print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
