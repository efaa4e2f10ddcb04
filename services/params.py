from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from models.search_params import SORT_OPTIONS, SearchParams
from services.errors import InvalidParameter


ParamsInput = Union[SearchParams, Mapping[str, Any], None]


def coerce_params(params: ParamsInput) -> SearchParams:
    """Accept a SearchParams or a plain mapping (camelCase or snake_case keys)."""
    if isinstance(params, SearchParams):
        return params
    if params is None:
        return SearchParams()
    try:
        return SearchParams.model_validate(dict(params))
    except ValidationError as exc:
        first = exc.errors()[0]
        name = ".".join(str(p) for p in first.get("loc", ())) or "params"
        raise InvalidParameter(
            name,
            first.get("input"),
            f"Invalid {name} parameter: {first.get('msg')}",
        ) from exc


def validate_sort(sort: Optional[str]) -> None:
    if sort is None:
        return
    if sort not in SORT_OPTIONS:
        raise InvalidParameter(
            "sort",
            sort,
            f"Invalid sort parameter: {sort!r}. Expected one of: {', '.join(SORT_OPTIONS)}",
        )


def validate_params(params: ParamsInput) -> SearchParams:
    """Coerce and validate; numeric ranges are deliberately not cross-checked."""
    parsed = coerce_params(params)
    validate_sort(parsed.sort)
    return parsed
