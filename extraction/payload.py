"""
Structured payload fast path.

Pages rendered by the registry's front end embed their data as JSON (a __NEXT_DATA__ script or
another application/json block). When such a block holds a list of company records, those
records supply fields directly and the label heuristics only fill what they leave out.
"""
from __future__ import annotations

import json
import logging
import re
from datetime import date, datetime
from typing import Any, Dict, Iterator, List, Optional
from urllib.parse import unquote, urlparse

from bs4 import Tag

from config.settings import Settings
from services.url_builder import absolute_link
from utils.number_parsing import parse_grouped_int


logger = logging.getLogger(__name__)

NAME_KEYS = ("name", "companyName", "legalName")
ORG_KEYS = ("orgnr", "orgNr", "orgNumber", "organisationNumber", "organizationNumber")
LINK_KEYS = ("link", "url", "href", "path")
LOCATION_KEYS = ("location", "city", "postPlace", "municipality")
EMPLOYEE_KEYS = ("employees", "numEmployees", "numberOfEmployees")
REVENUE_KEYS = ("revenue", "turnover")
PROFIT_KEYS = ("profit", "result")
REGISTRATION_KEYS = ("registrationDate", "registeredDate", "foundationDate")
INDUSTRY_KEYS = ("industries", "industry")

_ORG_RE = re.compile(r"^(\d{6})-?(\d{4})$")


def normalize_org_number(value: Any) -> Optional[str]:
    if value is None:
        return None
    m = _ORG_RE.match(str(value).strip())
    if not m:
        return None
    return f"{m.group(1)}-{m.group(2)}"


def _first(record: Dict[str, Any], keys) -> Any:
    for key in keys:
        value = record.get(key)
        if value not in (None, "", [], {}):
            return value
    return None


def _is_company(record: Any) -> bool:
    return isinstance(record, dict) and _first(record, NAME_KEYS) is not None and _first(record, ORG_KEYS) is not None


def _company_lists(node: Any) -> Iterator[List[Dict[str, Any]]]:
    if isinstance(node, list):
        companies = [item for item in node if _is_company(item)]
        if companies:
            yield companies
        for item in node:
            yield from _company_lists(item)
    elif isinstance(node, dict):
        for value in node.values():
            yield from _company_lists(value)


def _payload_scripts(document: Tag) -> Iterator[Tag]:
    for script in document.find_all("script"):
        if script.get("id") == "__NEXT_DATA__" or script.get("type") == "application/json":
            yield script


def find_payload_records(document: Tag) -> List[Dict[str, Any]]:
    """Largest list of company-like records embedded in the page, or [] when there is none."""
    best: List[Dict[str, Any]] = []
    for script in _payload_scripts(document):
        raw = script.string or script.get_text()
        try:
            data = json.loads(raw)
        except ValueError:
            logger.debug("Skipping unparsable JSON payload block")
            continue
        for companies in _company_lists(data):
            if len(companies) > len(best):
                best = companies
    return best


def _amount_and_year(value: Any, record: Dict[str, Any], year_key: str):
    year = record.get(year_key)
    if isinstance(value, dict):
        year = value.get("year", year)
        value = value.get("amount", value.get("value"))
    amount = parse_grouped_int(value)
    year_text = str(year) if year is not None and re.fullmatch(r"\d{4}", str(year)) else None
    return amount, year_text


def _location(value: Any) -> Optional[str]:
    if isinstance(value, dict):
        value = _first(value, ("municipality", "city", "postPlace", "county"))
    return str(value).strip() if value else None


def _date(value: Any) -> Optional[date]:
    if not value:
        return None
    try:
        return datetime.strptime(str(value)[:10], "%Y-%m-%d").date()
    except ValueError:
        return None


def _industries(value: Any) -> Optional[List[str]]:
    if isinstance(value, (str, dict)):
        value = [value]
    if not isinstance(value, list):
        return None
    names: List[str] = []
    for item in value:
        name = item.get("name") if isinstance(item, dict) else item
        if isinstance(name, str) and name.strip() and name.strip() not in names:
            names.append(name.strip())
    return names or None


def map_payload_record(record: Dict[str, Any], settings: Settings) -> Dict[str, Any]:
    """Field values the record supplies, keyed like CompanyEntry attributes. Missing fields are left out."""
    revenue, revenue_year = _amount_and_year(_first(record, REVENUE_KEYS), record, "revenueYear")
    profit, profit_year = _amount_and_year(_first(record, PROFIT_KEYS), record, "profitYear")
    link = _first(record, LINK_KEYS)
    name = _first(record, NAME_KEYS)
    fields = {
        "name": name.strip() if isinstance(name, str) and name.strip() else None,
        "org_number": normalize_org_number(_first(record, ORG_KEYS)),
        "link": absolute_link(str(link), settings) if link else None,
        "location": _location(_first(record, LOCATION_KEYS)),
        "employees": parse_grouped_int(_first(record, EMPLOYEE_KEYS)),
        "revenue": revenue,
        "revenue_year": revenue_year,
        "profit": profit,
        "profit_year": profit_year,
        "registration_date": _date(_first(record, REGISTRATION_KEYS)),
        "industry": _industries(_first(record, INDUSTRY_KEYS)),
    }
    return {key: value for key, value in fields.items() if value is not None}


class PayloadIndex:
    """Looks up mapped payload records by org number, link path or name."""

    def __init__(self, records: List[Dict[str, Any]], settings: Settings):
        self.mapped = [map_payload_record(r, settings) for r in records]
        self._by_key: Dict[str, Dict[str, Any]] = {}
        for fields in self.mapped:
            for key in self._keys(fields.get("org_number"), fields.get("link"), fields.get("name")):
                self._by_key.setdefault(key, fields)

    @staticmethod
    def _keys(org_number: Optional[str], link: Optional[str], name: Optional[str]) -> List[str]:
        keys = []
        if org_number:
            keys.append(f"org:{org_number}")
        if link:
            keys.append(f"link:{unquote(urlparse(link).path).rstrip('/').lower()}")
        if name:
            keys.append(f"name:{' '.join(name.split()).lower()}")
        return keys

    def __bool__(self) -> bool:
        return bool(self.mapped)

    def lookup(self, *, org_number: Optional[str] = None, link: Optional[str] = None, name: Optional[str] = None) -> Optional[Dict[str, Any]]:
        for key in self._keys(org_number, link, name):
            if key in self._by_key:
                return self._by_key[key]
        return None
