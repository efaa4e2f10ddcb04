# Namespace for pipeline steps
from .validate_params import ValidateParams  # noqa: F401
from .build_url import BuildSegmentationUrl  # noqa: F401
from .fetch_page import FetchPage  # noqa: F401
from .parse_document import ParseDocument  # noqa: F401
from .extract_total_count import ExtractTotalCount  # noqa: F401
from .extract_entries import ExtractEntries  # noqa: F401
from .filter_ranges import FilterByRange  # noqa: F401
