#!/usr/bin/env python3
"""Normalize a stored dataset payload.

Developer-facing helper: loads a dataset payload from a JSON or YAML file,
restores it through `chartconfig.codec.decode_dataset` (which rejects unknown
properties and out-of-domain style tokens), and prints the payload exactly as
`encode_dataset` would emit it for Chart.js.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

import yaml

from chartconfig.codec import decode_dataset, dumps_dataset
from chartconfig.color import COLOR_FORMATS
from chartconfig.exceptions import ConfigurationError, DatasetDecodeError
from chartconfig.logging_config import configure_logging
from chartconfig.registry import DEFAULT_REGISTRY

logger = logging.getLogger("chartconfig.scripts.normalize_dataset")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the normalizer and print the resulting JSON."""

    parser = argparse.ArgumentParser(description="Normalize a stored Chart.js dataset payload.")
    parser.add_argument("payload", help="Path to a JSON or YAML file holding one dataset object.")
    parser.add_argument("--kind", required=True, choices=DEFAULT_REGISTRY.kinds(), help="Dataset kind.")
    parser.add_argument("--color-format", choices=COLOR_FORMATS, default=None, help="Color rendering.")
    parser.add_argument("--indent", type=int, default=None, help="Pretty-print with this indent.")
    args = parser.parse_args(argv)

    try:
        configure_logging()
    except ConfigurationError as exc:
        logger.error("Invalid logging configuration: %s", exc)
        return 1

    # JSON is a subset of YAML, so one loader covers both file types.
    payload = yaml.safe_load(Path(args.payload).read_text(encoding="utf-8")) or {}
    if not isinstance(payload, dict):
        logger.error("Payload in %s is not an object", args.payload)
        return 1

    try:
        dataset = decode_dataset(payload, kind=args.kind)
    except DatasetDecodeError as exc:
        logger.error("Could not decode %s: %s", args.payload, exc)
        return 1

    print(dumps_dataset(dataset, color_format=args.color_format, indent=args.indent))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
