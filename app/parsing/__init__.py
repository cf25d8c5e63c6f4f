from .models import ParsedDoc
from .parse import UnsupportedDocumentError, extract_text, parse_document

__all__ = ["ParsedDoc", "UnsupportedDocumentError", "extract_text", "parse_document"]
