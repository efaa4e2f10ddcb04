import argparse
import json
import sys
from pathlib import Path

from config.settings import get_settings
from extraction.industry_codes import parse_industry_codes
from pipelines.company_info import get_company_info
from pipelines.search_companies import search_companies
from pipelines.segmentation_search import assemble_response, run_segmentation
from services.errors import RegistryError
from services.reporting import print_summary
from utils.logging_setup import init_logging


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _dump(model):
    return model.model_dump(mode="json", by_alias=True)


def cmd_segment(args):
    params = {
        "industryCode": args.industry_code,
        "location": args.location,
        "companyType": args.company_type,
        "revenueFrom": args.revenue_from,
        "revenueTo": args.revenue_to,
        "employeesFrom": args.employees_from,
        "employeesTo": args.employees_to,
        "sort": args.sort,
        "page": args.page,
    }
    ctx = run_segmentation({k: v for k, v in params.items() if v is not None})
    if not args.quiet:
        print_summary(ctx)
    _print_json(_dump(assemble_response(ctx)))


def cmd_search(args):
    results = search_companies(args.query)
    _print_json([_dump(r) for r in results])


def cmd_company(args):
    _print_json(_dump(get_company_info(args.path)))


def cmd_industry_codes(args):
    html = Path(args.input).read_text(encoding="utf-8")
    _print_json([_dump(c) for c in parse_industry_codes(html)])


def main():
    settings = get_settings()
    parser = argparse.ArgumentParser(description="allabolag.se company registry CLI")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (default from settings)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_seg = sub.add_parser("segment", help="Run a segmentation search (filtered company listing)")
    p_seg.add_argument("--industry-code", help="Industry code (proffIndustryCode)")
    p_seg.add_argument("--location", help="Municipality or city, e.g. Umeå")
    p_seg.add_argument("--company-type", help="Company type code, e.g. AB")
    p_seg.add_argument("--revenue-from", type=int, default=None, help="Minimum revenue (thousand SEK)")
    p_seg.add_argument("--revenue-to", type=int, default=None, help="Maximum revenue (thousand SEK)")
    p_seg.add_argument("--employees-from", type=int, default=None, help="Minimum number of employees")
    p_seg.add_argument("--employees-to", type=int, default=None, help="Maximum number of employees")
    p_seg.add_argument("--sort", default=None, help="Sort order, e.g. revenueDesc")
    p_seg.add_argument("--page", type=int, default=None, help="Result page (1-based)")
    p_seg.add_argument("--quiet", action="store_true", help="Skip the summary on stderr")
    p_seg.set_defaults(func=cmd_segment)

    p_search = sub.add_parser("search", help="Free-text company search")
    p_search.add_argument("query", help="Company name or keyword")
    p_search.set_defaults(func=cmd_search)

    p_comp = sub.add_parser("company", help="Company details by link path (/foretag/...)")
    p_comp.add_argument("path", help="Detail link path from a search result")
    p_comp.set_defaults(func=cmd_company)

    p_ind = sub.add_parser("industry-codes", help="Parse industry codes from a saved HTML page")
    p_ind.add_argument("--input", required=True, help="Path to the saved HTML file")
    p_ind.set_defaults(func=cmd_industry_codes)

    args = parser.parse_args()
    init_logging(args.log_level)
    try:
        args.func(args)
    except (RegistryError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
