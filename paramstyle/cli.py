"""
Command-line entry point.

Styles a single parameter value and prints the wire text:

    paramstyle color '{R: 100, G: 200}' --style deepObject
    paramstyle id '[3, 4, 5]' --location path --style label --explode

VALUE is parsed as YAML (a superset of JSON), so ISO timestamps become
datetimes and take the RFC 3339 path.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

import yaml
from pydantic import ValidationError

from .errors import StyleParamError
from .models import Style
from .parameters import ParameterSpec
from .settings import config

logger = logging.getLogger(__name__)

EXIT_STYLE_ERROR = 1
EXIT_USAGE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=config.APP_NAME,
        description="Serialize a parameter value using OpenAPI style/explode rules.",
    )
    parser.add_argument("name", help="parameter name, used verbatim")
    parser.add_argument("value", help="parameter value as YAML or JSON")
    parser.add_argument(
        "--style",
        choices=[style.value for style in Style],
        default=None,
        help="serialization style (default: the OpenAPI default for --location)",
    )
    parser.add_argument(
        "--explode",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="explode sequences and records (default: true only for form)",
    )
    parser.add_argument(
        "--location",
        choices=["path", "query", "header", "cookie"],
        default=config.DEFAULT_LOCATION,
        help="parameter location (default: %(default)s)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {config.VERSION}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    config.validate()
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL),
        format=config.LOG_FORMAT,
    )

    args = build_parser().parse_args(argv)

    try:
        value = yaml.safe_load(args.value)
    except yaml.YAMLError as exc:
        logger.error("Could not parse value for '%s': %s", args.name, exc)
        return EXIT_USAGE_ERROR

    try:
        spec = ParameterSpec(
            name=args.name,
            location=args.location,
            style=args.style,
            explode=args.explode,
        )
    except ValidationError as exc:
        logger.error("Invalid parameter declaration: %s", exc)
        return EXIT_USAGE_ERROR

    logger.info(
        "Encoding '%s' in %s with style=%s explode=%s",
        spec.name,
        spec.location,
        spec.style,
        spec.explode,
    )

    try:
        result = spec.encode(value)
    except StyleParamError as exc:
        logger.error("%s", exc)
        return EXIT_STYLE_ERROR

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
