from __future__ import annotations

import argparse
import json
import random
from dataclasses import asdict
from typing import Sequence

from character_generator.generator import generate_characters


def configure_parser(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--count", type=int, default=1, help="Number of characters to generate")
    parser.add_argument("--start-id", type=int, default=1, help="Id of the first generated character")
    parser.add_argument("--seed", type=int, default=None, help="Seed for repeatable output")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (0 for compact)")


def main_from_parsed(opts: argparse.Namespace) -> str:
    if opts.count < 0:
        raise SystemExit("--count must be zero or greater")
    rng = random.Random(opts.seed)
    characters = generate_characters(opts.count, opts.start_id, rng)
    output = json.dumps([asdict(c) for c in characters], indent=opts.indent or None)
    print(output)
    return output


def main(args: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Generate random roster characters as JSON.")
    configure_parser(parser)
    opts = parser.parse_args(args)
    main_from_parsed(opts)


if __name__ == "__main__":
    main()
