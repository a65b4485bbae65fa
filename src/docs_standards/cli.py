"""CLI for parameter documentation checks."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from docs_standards.checkers import ParamDocsDetector
from docs_standards.config import CheckConfig, find_config, load_config
from docs_standards.exceptions import ConfigurationError
from docs_standards.formatters import format_report


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Check that docstring @param tags match callable signatures"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML config file (default: <root>/docs-standards.yml if present)",
    )
    parser.add_argument(
        "--functions", nargs="+", default=None, help="Dotted paths of functions"
    )
    parser.add_argument(
        "--classes",
        nargs="+",
        default=None,
        help="Dotted paths of classes whose methods are checked",
    )
    parser.add_argument(
        "--sigil", default=None, help="Prefix of @param names (default: $)"
    )
    parser.add_argument(
        "--skip-private",
        action="store_true",
        default=None,
        help="Skip single-underscore methods",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument(
        "--root",
        type=Path,
        default=Path.cwd(),
        help="Root path of repository (default: current dir)",
    )

    args = parser.parse_args(argv)

    # Add root to Python path for imports
    sys.path.insert(0, str(args.root))

    config_path = args.config or find_config(args.root)
    try:
        config = load_config(config_path) if config_path else CheckConfig()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    config = config.merged(
        functions=args.functions,
        classes=args.classes,
        sigil=args.sigil,
        skip_private=args.skip_private,
    )

    if not args.json:
        print("Running parameter documentation checks...")

    report = ParamDocsDetector(config).check_all(verbose=args.verbose)

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(format_report(report))

    return 1 if report.has_issues() else 0


if __name__ == "__main__":
    sys.exit(main())
