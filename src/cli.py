"""Answer the stat requests of a transit document: JSON in, JSON out."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from src.adapters.persistence import JsonCatalogueRepository
from src.app.services.request_handler import RequestHandler
from src.domain.exceptions import CatalogueError

logger = logging.getLogger("transit.cli")


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="transit-catalogue",
        description="Answer bus, stop and route queries over a transit network",
    )
    parser.add_argument(
        "-i", "--input", help="Input JSON document (default: stdin)", default=None
    )
    parser.add_argument(
        "-o", "--output", help="Output JSON file (default: stdout)", default=None
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    if args.input:
        repository = JsonCatalogueRepository(path=args.input)
    else:
        repository = JsonCatalogueRepository(text=sys.stdin.read())

    try:
        handler = RequestHandler.from_repository(repository)
        answers = handler.answer(repository.load_stat_requests())
    except (CatalogueError, ValidationError, OSError) as exc:
        logger.error("Cannot answer requests: %s", exc)
        return 1

    out = json.dumps(answers, ensure_ascii=False, indent=4)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as fp:
            fp.write(out + "\n")
    else:
        sys.stdout.write(out + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
