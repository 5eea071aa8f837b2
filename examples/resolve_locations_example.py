#!/usr/bin/env python
"""Example of resolving a mix of local and remote repository locations."""
from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from locations import InvalidLocationError, NameRegistrar, convert_strings_to_locations

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


def main() -> None:
    """Run the location resolution example."""
    with tempfile.TemporaryDirectory() as tmp:
        # Two local checkouts that share a directory name
        local_a = Path(tmp) / "team-a" / "black"
        local_b = Path(tmp) / "team-b" / "black"
        local_a.mkdir(parents=True)
        local_b.mkdir(parents=True)

        raws = [
            "https://github.com/psf/black.git",
            str(local_a),
            str(local_b),
            "https://gitlab.com/group/black.git",
        ]

        registrar = NameRegistrar()
        try:
            locations = convert_strings_to_locations(raws, registrar)
        except InvalidLocationError as e:
            print(f"Error: {e}")
            return

        print(f"Resolved {len(locations)} locations:")
        for location in locations:
            print(f"  - {location.name} ({location.organization or 'unknown'}): {location}")


if __name__ == "__main__":
    main()
