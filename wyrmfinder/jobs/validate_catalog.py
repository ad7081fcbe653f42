"""
Validate the card catalog.

Loads the dataset, builds the text index and runs the default query. A
malformed catalog fails loudly here instead of as missing search results.
"""

import argparse
import logging
from pathlib import Path

from wyrmfinder.config import settings
from wyrmfinder.models.failure import KnownError
from wyrmfinder.models.query import SearchQuery
from wyrmfinder.services.catalog import load_catalog
from wyrmfinder.services.search import run_search
from wyrmfinder.services.statistics import statistics_for
from wyrmfinder.services.text_index import TextIndex

logger = logging.getLogger(__name__)


def run_validation(path: Path | None = None) -> dict[str, int]:
    """
    Load and index the catalog, then count the default result by category.

    Returns:
        Dict mapping category name to number of cards in the default result
    """
    logger.info("Validating %s card catalog...", settings.app_name)

    try:
        catalog = load_catalog(path)
    except Exception as e:
        logger.error("Failed to load card catalog: %s", e)
        raise

    index = TextIndex.from_catalog(catalog)
    result = run_search(catalog, index, SearchQuery.default())
    stats = statistics_for(result, catalog)

    by_type = stats.dimension("type")
    logger.info(
        "Catalog OK: %d cards, %d in default result (%s)",
        len(catalog),
        stats.total,
        ", ".join(f"{name}={count}" for name, count in by_type.items()),
    )
    return by_type


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Validate the Wyrmfinder card catalog")
    parser.add_argument("path", nargs="?", type=Path, help="Card dataset (JSON array)")
    args = parser.parse_args()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        run_validation(args.path)
    except KnownError as e:
        logger.error("Catalog validation failed: %s", e.to_detail().model_dump_json())
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()
