#!/usr/bin/env python3
"""Command line entry point: render a row of cards as chat text."""

import argparse
import logging
import sys
from typing import Iterable, Optional

from dotenv import load_dotenv

from pokerdisplay.cards import parse_slot
from pokerdisplay.config import Config
from pokerdisplay.icons import PokerDisplayError
from pokerdisplay.renderer import CardGridRenderer

logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=logging.INFO
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render playing cards as two rows of chat emoji."
    )
    parser.add_argument(
        "cards",
        nargs="*",
        help='cards such as "A♠", "10h" or "Td"; use "??" for a face-down card',
    )
    parser.add_argument(
        "--split",
        type=int,
        default=None,
        help="insert a gap before this position",
    )
    parser.add_argument(
        "--fill",
        type=int,
        default=0,
        help="pad the row with face-down cards up to this many slots",
    )
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Parse arguments, render the cards and print the result."""
    # Pick up POKERDISPLAY_* settings from a local .env file when present.
    load_dotenv()

    args = build_parser().parse_args(argv)

    try:
        cfg = Config()
        cfg.validate()
        logging.getLogger().setLevel(cfg.log_level)
        renderer = CardGridRenderer.from_config(cfg)
        slots = [parse_slot(text) for text in args.cards]
        output = renderer.render(slots, args.split, args.fill)
    except (PokerDisplayError, ValueError) as exc:
        logger.error("Cannot render cards: %s", exc)
        return 1

    logger.debug("Rendered %d slots for %s", max(len(slots), args.fill), cfg.PLATFORM)
    print(output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
