"""CLI entrypoint for skillsync."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from skillsync import __version__
from skillsync.config import load_config
from skillsync.constants.branding import CLI_DESCRIPTION
from skillsync.constants.reporting import VALID_OUTPUT_FORMATS
from skillsync.exceptions import ConfigError, SkillSyncError
from skillsync.reporting import StdoutReporter, render_json
from skillsync.sync import sync_readme


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="skillsync",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-r",
        "--root",
        type=Path,
        default=Path.cwd(),
        help="Repository root containing the README (default: current directory)",
    )
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument(
        "-b",
        "--base-ref",
        default=None,
        help="Base branch to diff against (overrides GITHUB_BASE_REF and the event payload; blank means unset)",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Rebuild the block even when no reference file changed",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Report drift without writing the README (exit 1 when out of date)",
    )
    parser.add_argument(
        "--output-format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default="text",
        help="Result output format (default: text)",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show base ref, changed paths and debug logs")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    try:
        config = load_config(args.root, args.config)
        result = sync_readme(
            args.root,
            config,
            base_ref=args.base_ref,
            force=args.force,
            check=args.check,
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except SkillSyncError as exc:
        print(f"Sync error: {exc}", file=sys.stderr)
        return 1

    if args.output_format == "json":
        print(render_json(result))
    else:
        use_color = not args.no_color and sys.stdout.isatty()
        print(StdoutReporter(result, color=use_color, verbose=args.verbose).render())

    return 1 if result.status == "drift" else 0


if __name__ == "__main__":
    raise SystemExit(main())
