"""
Build the opening reference data from the lichess chess-openings dataset.

Steps:
1. Download the five ECO volumes (A-E)
2. Replay every line to get its final position and UCI moves
3. Build the lookup tables (by position, ECO code, volume, plus flat lists)
4. Write each table as JSON into the data directory

Usage:
    generate-data [--data-dir DIR] [-v]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

from openingbook.lookup import LookupBuilder
from openingbook.records import process_rows

from .config import DATA_DIR, configure_logging
from .fetch_openings import fetch_openings
from .write_data import write_lookups

logger = logging.getLogger(__name__)


def generate_data(data_dir: Union[str, Path] = DATA_DIR, progress: bool = True) -> LookupBuilder:
    """
    Run the whole build. Any failure aborts it.

    Returns:
        The builder holding the tables that were written
    """
    rows = fetch_openings()

    builder = LookupBuilder()
    builder.extend(process_rows(rows, progress=progress))
    logger.info(
        f"Built {len(builder.opening_list)} openings, {len(builder.epd_lookup)} positions, "
        f"{len(builder.eco_lookup)} ECO codes"
    )

    write_lookups(builder.outputs(), data_dir)
    return builder


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Build opening lookup tables from the lichess chess-openings dataset."
    )
    parser.add_argument(
        "--data-dir", type=Path, default=DATA_DIR, help=f"Output directory. Default: {DATA_DIR}"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        generate_data(args.data_dir)
    except Exception as e:
        logger.error(f"Error in main process: {e}", exc_info=True)
        return 1

    logger.info("All data has been processed and saved successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
