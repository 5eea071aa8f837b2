"""Command line tool that resolves repository locations and prints their names."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from locations.config import LocationSettings
from locations.convert import convert_strings_to_locations
from locations.errors import InvalidLocationError
from locations.registrar import NameRegistrar

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the location resolver from the command line.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = argparse.ArgumentParser(
        description="Resolve repository paths and git URLs into unique names"
    )
    parser.add_argument(
        "locations", nargs="+",
        help="Local repository paths or git URLs ending in .git"
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print the resolved locations as JSON"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable verbose output"
    )

    args = parser.parse_args(argv)

    try:
        settings = LocationSettings()
    except ValidationError as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 2

    log_level = logging.DEBUG if args.verbose else settings.log_level
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        resolved = convert_strings_to_locations(
            args.locations, NameRegistrar(), settings
        )
    except InvalidLocationError as e:
        logger.error(str(e))
        return 1

    if args.json:
        print(json.dumps(
            [
                {"location": loc.raw, "name": loc.name, "organization": loc.organization}
                for loc in resolved
            ],
            indent=2,
        ))
    else:
        for loc in resolved:
            organization = loc.organization or "-"
            print(f"{loc.name}\t{organization}\t{loc.raw}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
