"""Command-line entry point for converting TypeDoc JSON to render types."""

import argparse
from pathlib import Path

from render_types.run_conversion import run_conversion


def main() -> int:
    """Run the conversion process."""
    ap = argparse.ArgumentParser(
        description=(
            "Convert TypeDoc JSON output into normalized render types for "
            "documentation pages."
        ),
    )
    ap.add_argument(
        "typedoc_json",
        type=Path,
        help="TypeDoc --json output file",
    )
    ap.add_argument(
        "out_file",
        type=Path,
        nargs="?",
        help="Output JSON file (default: stdout)",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--api-root",
        help="Path root for generated reference links (overrides config)",
    )
    ap.add_argument(
        "--strip-prefix",
        help="Namespace prefix dropped from display names (overrides config)",
    )
    ap.add_argument(
        "--only",
        nargs="+",
        metavar="NAME",
        help="Only convert these fully-qualified names",
    )
    ap.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args()
    return run_conversion(args)


if __name__ == "__main__":
    raise SystemExit(main())
