"""
Beacon chain parameters CLI entry point.

Print the parameter profile a node would run with.

Usage::

    python -m beacon_params
    python -m beacon_params --env demo --format json
    BEACON_ENV=demo python -m beacon_params --strict

Options:
    --env        Profile name (overrides the BEACON_ENV environment variable)
    --strict     Reject unknown profile names instead of using "default"
    --format     Output format: yaml (default) or json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from beacon_params.config import CONFIG_REGISTRY
from beacon_params.subspecs.params import (
    ConfigRegistry,
    ParameterProfile,
    set_active_profile_strict,
)
from beacon_params.types import UnknownProfileError

EXIT_UNKNOWN_PROFILE = 2
"""Exit status when `--strict` rejects the requested profile."""

logger = logging.getLogger(__name__)


class ColoredFormatter(logging.Formatter):
    """Logging formatter with ANSI colors for better readability."""

    # ANSI color codes
    GREY = "\x1b[38;5;244m"
    BLUE = "\x1b[38;5;39m"
    GREEN = "\x1b[38;5;40m"
    YELLOW = "\x1b[38;5;220m"
    RED = "\x1b[38;5;196m"
    BOLD_RED = "\x1b[38;5;196;1m"
    CYAN = "\x1b[38;5;51m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        timestamp = f"{self.CYAN}{self.formatTime(record, self.datefmt)}{self.RESET}"
        levelname = f"{color}{record.levelname:8}{self.RESET}"
        name = f"{self.BLUE}{record.name}{self.RESET}"
        return f"{timestamp} {levelname} {name}: {record.getMessage()}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """Configure logging on stderr, keeping stdout for the profile itself."""
    level = logging.DEBUG if verbose else logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if no_color:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = ColoredFormatter(datefmt="%Y-%m-%d %H:%M:%S")

    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def render_profile(profile: ParameterProfile, output_format: str) -> str:
    """
    Render a profile for display.

    JSON uses the camelCase field aliases; YAML uses the UPPERCASE
    cross-client keys.
    """
    if output_format == "json":
        return json.dumps(profile.model_dump(mode="json", by_alias=True), indent=2)
    return profile.to_yaml()


def select_profile(registry: ConfigRegistry, name: str | None, strict: bool) -> ParameterProfile:
    """
    Apply the requested profile name to `registry` and resolve it.

    Without a name the registry keeps its current selection.

    Raises:
        UnknownProfileError: If `strict` is set and the name is not a built-in profile.
    """
    if strict:
        set_active_profile_strict(registry, registry.active_name if name is None else name)
    elif name is not None:
        registry.set_active_profile(name)
    return registry.get_active_profile()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Beacon chain parameter profiles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--env",
        default=None,
        help="Profile name: default or demo (default: $BEACON_ENV, else default)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on an unknown profile name instead of using the default profile",
    )
    parser.add_argument(
        "--format",
        choices=["yaml", "json"],
        default="yaml",
        dest="output_format",
        help="Output format (default: yaml)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output",
    )

    args = parser.parse_args(argv)

    setup_logging(args.verbose, args.no_color)

    try:
        profile = select_profile(CONFIG_REGISTRY, args.env, args.strict)
    except UnknownProfileError as e:
        logger.error("%s", e)
        return EXIT_UNKNOWN_PROFILE

    logger.info("Serving parameter profile %r", CONFIG_REGISTRY.active_name)
    print(render_profile(profile, args.output_format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
