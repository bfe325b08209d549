"""wandr CLI: split a trip's nights across its cities."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from wandr.domain.enums import AllocationPolicy, TransportMode, TripPace
from wandr.domain.exceptions import DomainError
from wandr.domain.models import CityAllocation, TripSkeleton
from wandr.planner.allocation import allocate
from wandr.planner.recommended import allocate_recommended


def _parse_hints(values: Sequence[str], flag: str) -> dict[str, int]:
    hints: dict[str, int] = {}
    for raw in values:
        city, sep, nights = raw.rpartition("=")
        if not sep or not city.strip():
            raise argparse.ArgumentTypeError(f"{flag} expects CITY=NIGHTS, got {raw!r}")
        try:
            hints[city.strip()] = int(nights)
        except ValueError:
            raise argparse.ArgumentTypeError(f"{flag} expects an integer night count, got {raw!r}") from None
    return hints


def _parse_leg(value: str) -> Optional[TransportMode]:
    if value in ("", "-", "none"):
        return None
    return TransportMode(value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wandr-allocate", description="Split trip nights across cities.")
    parser.add_argument("cities", nargs="+", help="Cities in visiting order")
    parser.add_argument("--nights", type=int, required=True, help="Total nights for the trip")
    parser.add_argument("--start", default=None, help="Trip start date, YYYY-MM-DD")
    parser.add_argument("--min", dest="min_nights", action="append", default=[], help="CITY=NIGHTS minimum")
    parser.add_argument("--max", dest="max_nights", action="append", default=[], help="CITY=NIGHTS maximum")
    parser.add_argument(
        "--leg",
        dest="legs",
        action="append",
        default=[],
        help="Transport of each leg in order (flight/train/bus/car/ferry/other, '-' for unknown)",
    )
    parser.add_argument(
        "--policy",
        choices=[p.value for p in AllocationPolicy],
        default=AllocationPolicy.EQUAL.value,
    )
    parser.add_argument("--pace", choices=[p.value for p in TripPace], default=TripPace.BALANCED.value)
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")
    return parser


def format_allocations(allocations: Sequence[CityAllocation]) -> str:
    lines: list[str] = []
    for item in allocations:
        line = f"{item.city:<20} {item.nights:>3} nights  day {item.start_day}-{item.end_day}"
        if item.start_date:
            line += f"  {item.start_date} -> {item.end_date}"
        if item.transport_to_next:
            line += f"  then {item.transport_to_next.value}"
        lines.append(line)
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        skeleton = TripSkeleton(
            cities=tuple(args.cities),
            total_nights=args.nights,
            start_date=args.start,
            min_nights=_parse_hints(args.min_nights, "--min"),
            max_nights=_parse_hints(args.max_nights, "--max"),
            legs=tuple(_parse_leg(leg) for leg in args.legs),
        )
    except (argparse.ArgumentTypeError, ValueError) as exc:
        parser.error(str(exc))

    try:
        if args.policy == AllocationPolicy.RECOMMENDED.value:
            allocations = allocate_recommended(skeleton, TripPace(args.pace))
        else:
            allocations = allocate(skeleton)
    except DomainError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps([a.model_dump(mode="json") for a in allocations], ensure_ascii=False, indent=2))
    else:
        print(format_allocations(allocations))
    return 0


if __name__ == "__main__":
    sys.exit(main())
