"""Terminal client for searching a JSON catalog with the in-process engine."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Iterable

from catalog_search.autocomplete import autocomplete
from catalog_search.catalog import CatalogError, load_catalog
from catalog_search.config import settings
from catalog_search.models import Catalog
from catalog_search.search import search_with_correction

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
GREEN = "\033[92m"
RED = "\033[91m"
RESET = "\033[0m"

logger = logging.getLogger("cli_search")


def configure_logging(level: str) -> None:
    logging.basicConfig(level=logging.getLevelName(level.upper()), format=LOG_FORMAT, force=True)


def perform_query(catalog: Catalog, query: str, scope: str = "") -> dict:
    started = perf_counter()
    outcome = search_with_correction(catalog.products, query, categories=catalog.categories, scope_token=scope)
    took_ms = (perf_counter() - started) * 1000
    logger.info("search q=%r scope=%r hits=%s took=%.2fms", query, scope, len(outcome.items), took_ms)
    return {"outcome": outcome, "took_ms": took_ms}


def perform_autocomplete(catalog: Catalog, query: str, scope: str = "") -> dict:
    started = perf_counter()
    payload = autocomplete(
        query=query,
        items=catalog.products,
        categories=catalog.categories,
        scope_token=scope,
        query_limit=settings.query_limit,
        product_limit=settings.product_limit,
    )
    took_ms = (perf_counter() - started) * 1000
    logger.info("autocomplete q=%r scope=%r took=%.2fms", query, scope, took_ms)
    return {"payload": payload, "took_ms": took_ms}


def _eta_label(took_ms: float) -> str:
    color = GREEN if took_ms < 50 else RED
    return f"{color}{took_ms:.1f} ms{RESET}"


def pretty_print_response(query: str, response: dict) -> None:
    outcome = response["outcome"]
    results = outcome.items
    print(f"Query: {query} | results: {len(results)} | ETA: {_eta_label(response['took_ms'])}")
    if outcome.correctionApplied:
        print(f"  showing results for: {outcome.appliedQuery}")
    for idx, item in enumerate(results[: settings.max_results], start=1):
        print(f"  {idx:02d}. {item.id} | {item.name}")


def pretty_print_suggestions(query: str, response: dict) -> None:
    payload = response["payload"]
    print(f"Query: {query} | ETA: {_eta_label(response['took_ms'])}")
    if payload.hasCorrection:
        print(f"  did you mean: {payload.correctedQuery}")
    for entry in payload.suggestedQueries:
        scope = f" [{entry.scopeToken}]" if entry.scopeToken else ""
        print(f"  ? {entry.label}{scope}")
    for item in payload.productSuggestions:
        print(f"  * {item.id} | {item.name}")


def run_query(catalog: Catalog, query: str, scope: str, suggest: bool) -> None:
    if suggest:
        pretty_print_suggestions(query, perform_autocomplete(catalog, query, scope))
    else:
        pretty_print_response(query, perform_query(catalog, query, scope))


def interactive_shell(catalog: Catalog, scope: str, suggest: bool) -> None:
    print("Interactive catalog search. Type 'exit' to quit.")
    while True:
        try:
            query = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if not query:
            continue
        if query.lower() in {"exit", "quit"}:
            return
        run_query(catalog, query, scope, suggest)


def batch_mode(catalog: Catalog, file_path: Path, scope: str, suggest: bool) -> None:
    with file_path.open("r", encoding="utf-8") as fh:
        for line in fh:
            query = line.strip()
            if not query:
                continue
            run_query(catalog, query, scope, suggest)


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Search a product catalog from the terminal")
    parser.add_argument("query", nargs="?", help="Query string. If omitted, starts REPL mode.")
    parser.add_argument("--catalog", type=Path, default=Path(settings.catalog_path), help="Catalog JSON file")
    parser.add_argument("--batch", type=Path, help="File with queries to execute line by line")
    parser.add_argument("--scope", default="", help="Restrict results to a category slug or id")
    parser.add_argument("--autocomplete", action="store_true", help="Print search-box suggestions instead")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    args = parser.parse_args(list(argv) if argv is not None else None)

    configure_logging(args.log_level)
    try:
        catalog = load_catalog(args.catalog)
    except CatalogError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.batch:
        batch_mode(catalog, args.batch, args.scope, args.autocomplete)
        return 0
    if args.query:
        run_query(catalog, args.query, args.scope, args.autocomplete)
        return 0
    interactive_shell(catalog, args.scope, args.autocomplete)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
