"""
Print synthetic availability for a campground, optionally for given labels.

Usage:
    python scripts/check_availability.py demo-camp-1 2024-01-15
    python scripts/check_availability.py demo-camp-1 2024-01-15 --label "Tent Site" --label Cabin
"""

import argparse
import json
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.adapters.factory import create_availability_gateway
from src.config import load_settings
from src.domain.errors import QueryValidationError
from src.domain.stay_dates import parse_stay


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("entity_id")
    parser.add_argument("check_in")
    parser.add_argument("check_out", nargs="?")
    parser.add_argument("--label", action="append", default=[])
    args = parser.parse_args()

    try:
        check_in, check_out = parse_stay(args.check_in, args.check_out)
    except QueryValidationError as exc:
        print(f"ERROR: {exc.error} — {exc.message}", file=sys.stderr)
        sys.exit(1)

    gateway = create_availability_gateway(load_settings())
    record = gateway.get_availability(
        args.entity_id, labels=args.label or None, check_in=check_in, check_out=check_out
    )
    print(json.dumps(record.to_dict(), indent=2))


if __name__ == "__main__":
    main()
