from .search_params import SearchParams, SORT_OPTIONS
from .company_entry import CompanyEntry, ORG_NUMBER_MISSING
from .search_response import SearchResponse
from .company_info import CompanyInfo
from .company_search_result import CompanySearchResult
from .industry_code import IndustryCode

__all__ = [
    "SearchParams",
    "SORT_OPTIONS",
    "CompanyEntry",
    "ORG_NUMBER_MISSING",
    "SearchResponse",
    "CompanyInfo",
    "CompanySearchResult",
    "IndustryCode",
]
