"""Command-line entry point for the priority funding engine.

Loads configuration, the region catalog and the initial weights, applies
any weight overrides from the command line, then prints the ranked funding
table for the selected country.

    python -m priority_funding.main --country Algeria --weight lum=0.3
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import Config, load_config
from .regions import (
    SAMPLE_CATALOG,
    FileRegionSource,
    HttpRegionSource,
    RegionCatalog,
    RegionSourceError,
    StaticRegionSource,
)
from .reporter import render_table
from .scorer import WeightVectorManager, load_weights
from .session import FundingSession

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


def build_catalog(config: Config) -> RegionCatalog:
    """Load the region catalog: REGIONS_FILE, then REGIONS_URL, then the bundled sample."""
    if config.regions_file:
        source = FileRegionSource(config.regions_file)
    elif config.regions_url:
        source = HttpRegionSource(config.regions_url)
    else:
        source = StaticRegionSource(SAMPLE_CATALOG)
    return source.load()


def build_session(config: Config, country: Optional[str] = None) -> FundingSession:
    """Assemble a FundingSession from configuration."""
    catalog = build_catalog(config)
    manager = WeightVectorManager(
        initial=load_weights(config.weights_file),
        strict=config.strict_weights,
    )
    return FundingSession(
        catalog=catalog,
        total_pool=config.total_funding_pool,
        manager=manager,
        country=country or config.default_country,
        strict_allocation=config.strict_allocation,
    )


def _parse_weight(text: str) -> tuple[str, float]:
    dimension, sep, value = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"Expected DIMENSION=VALUE, got {text!r}")
    try:
        return dimension.strip(), float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Weight value must be a number, got {value!r}") from None


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="priority-funding",
        description="Rank regions by priority score and split a funding pool.",
    )
    parser.add_argument("--country", help="Country whose regions to rank (default: DEFAULT_COUNTRY)")
    parser.add_argument(
        "--weight",
        action="append",
        default=[],
        type=_parse_weight,
        metavar="DIM=VALUE",
        help="Override one weight (ld, wealth, pop, lum); repeatable",
    )
    parser.add_argument("--pool", type=float, help="Total funding pool (default: TOTAL_FUNDING_POOL)")
    return parser.parse_args(argv)


def run(argv: Optional[Sequence[str]] = None) -> int:
    """Run one ranking pass and print the table. Returns a process exit code."""
    args = parse_args(argv)

    try:
        config = load_config()
        if args.pool is not None:
            # Re-validate so the override passes the same pool checks as the env var
            config = Config.model_validate({**config.model_dump(), "total_funding_pool": args.pool})
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 2

    logging.getLogger().setLevel(config.log_level)

    try:
        session = build_session(config, country=args.country)
        for dimension, value in args.weight:
            session.set_weight(dimension, value)
        snapshot = session.snapshot()
    except (RegionSourceError, KeyError, ValueError, FileNotFoundError) as e:
        logger.error(f"Funding run failed: {e}")
        return 1

    print(render_table(snapshot))
    return 0


if __name__ == "__main__":
    sys.exit(run())
