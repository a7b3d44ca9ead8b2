"""
Command-line interface for the GitHub to Jira conversion tool.
"""

from __future__ import annotations

import argparse
import logging
import sys

from . import github_utils as ghu
from .config import DEFAULT_CONFIG_PATH, load_config
from .converter import run
from .github_loader import GithubDataLoader
from .utils import setup_logging

DEFAULT_OUTPUT_FILENAME = "output.json"


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Convert GitHub issues and comments to a Jira JSON import file"
    )

    _ = parser.add_argument(
        "--config", "-c", default=DEFAULT_CONFIG_PATH, help=f"YAML configuration file (default: {DEFAULT_CONFIG_PATH})"
    )

    _ = parser.add_argument(
        "--output", "-o", default=DEFAULT_OUTPUT_FILENAME, help=f"Jira import file to write (default: {DEFAULT_OUTPUT_FILENAME})"
    )

    _ = parser.add_argument(
        "--raw-output", help="Also write the raw GitHub issues and comments to this file (for diagnostics)"
    )

    _ = parser.add_argument(
        "--github-pass-token", help="Path for GitHub token in pass utility (default: github/cli/token)"
    )

    _ = parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Increase console verbosity (-v for INFO, -vv for DEBUG)",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_arguments(argv)

    verbosity: int = args.verbose
    setup_logging(verbosity=verbosity)
    logger = logging.getLogger(__name__)

    try:
        config = load_config(args.config)

        token = ghu.get_token(args.github_pass_token, config.token)
        loader = GithubDataLoader(ghu.get_client(token), config.owner, config.repo, config.state)

        result = run(config, loader, args.output, raw_output_path=args.raw_output)

        stats = result.stats
        print(f"Converted {stats.issues_converted} issues and {stats.comments_converted} comments to {args.output}")
        sys.exit(0)

    except Exception:
        logger.exception("Failed to convert issues")
        sys.exit(1)
