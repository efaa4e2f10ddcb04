from .document import load_document
from .entries import EntryFragment, locate_entries
from .fields import FIELD_EXTRACTORS, ExtractionContext, extract_entries
from .payload import PayloadIndex, find_payload_records
from .total_count import extract_total_count
from .detail import parse_company_info
from .industry_codes import parse_industry_codes

__all__ = [
    "load_document",
    "EntryFragment",
    "locate_entries",
    "FIELD_EXTRACTORS",
    "ExtractionContext",
    "extract_entries",
    "PayloadIndex",
    "find_payload_records",
    "extract_total_count",
    "parse_company_info",
    "parse_industry_codes",
]
