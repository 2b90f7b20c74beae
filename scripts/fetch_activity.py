#!/usr/bin/env python3
import argparse
import asyncio
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from boredapi.client.bored import BoredApiClient
from boredapi.client.errors import BoredApiError
from boredapi.core.config import settings
from boredapi.models.activity import ActivityType
from boredapi.query import criteria
from boredapi.query.selection import CriteriaSelection
from boredapi.schemas.activity import ActivityRead

# argparse dest -> criterion
CRITERION_FLAGS = {
    "type": criteria.TYPE,
    "participants": criteria.PARTICIPANTS,
    "key": criteria.KEY,
    "accessibility": criteria.EXACT_ACCESSIBILITY,
    "min_accessibility": criteria.MIN_ACCESSIBILITY,
    "max_accessibility": criteria.MAX_ACCESSIBILITY,
    "price": criteria.EXACT_PRICE,
    "min_price": criteria.MIN_PRICE,
    "max_price": criteria.MAX_PRICE,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fetch one activity suggestion. Without criteria a random activity is returned."
    )
    parser.add_argument("--url", default=settings.bored_api_url)
    parser.add_argument("--type", type=ActivityType, choices=list(ActivityType), default=None)
    parser.add_argument("--participants", type=int, default=None)
    parser.add_argument("--key", type=int, default=None)
    parser.add_argument("--accessibility", type=float, default=None)
    parser.add_argument("--min-accessibility", type=float, default=None)
    parser.add_argument("--max-accessibility", type=float, default=None)
    parser.add_argument("--price", type=float, default=None)
    parser.add_argument("--min-price", type=float, default=None)
    parser.add_argument("--max-price", type=float, default=None)
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Send criteria as given and let the service reject out-of-range values.",
    )
    parser.add_argument("--json", action="store_true", help="Print the activity as JSON.")
    return parser


def requested_criteria(args: argparse.Namespace) -> list[tuple[criteria.ActivityCriterion, object]]:
    return [
        (criterion, getattr(args, dest))
        for dest, criterion in CRITERION_FLAGS.items()
        if getattr(args, dest) is not None
    ]


def apply_criteria(selection: CriteriaSelection, requested: list[tuple[criteria.ActivityCriterion, object]]) -> CriteriaSelection:
    for criterion, value in requested:
        selection = selection.set(criterion, value)
    return selection


async def main() -> int:
    args = build_parser().parse_args()
    logging.basicConfig(level=settings.log_level_resolved)

    client = BoredApiClient(args.url, validate_criteria=not args.no_validate)
    requested = requested_criteria(args)
    try:
        if requested:
            activity = await client.by_criteria(lambda selection: apply_criteria(selection, requested))
        else:
            activity = await client.random()
    except BoredApiError as exc:
        print(f"ERROR: {exc}")
        return 1

    if args.json:
        print(ActivityRead.model_validate(activity).model_dump_json())
    else:
        print(activity)
    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
