"""Main orchestration script for running TypeDoc and generating render types."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the full render type generation pipeline."""
    parser = argparse.ArgumentParser(
        description="Run TypeDoc over a declaration file and generate render types."
    )
    parser.add_argument(
        "entry_point",
        help="TypeScript declaration file to document (e.g. chrome.d.ts)",
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before generating",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    parser.add_argument(
        "--out",
        default="render_types.json",
        help="Output JSON file (default: render_types.json)",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent
    build_dir = root_dir / "build"
    build_dir.mkdir(exist_ok=True)
    typedoc_json = build_dir / "typedoc.json"

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([sys.executable, str(root_dir / "dev.py"), "--ci"])
        print("\n✅ Development checks passed. Proceeding with generation.\n")

    # 1. Generate declaration JSON using TypeDoc
    print("--- Step 1: Generating TypeDoc JSON ---")
    run_command(["npx", "typedoc", "--json", str(typedoc_json), args.entry_point])

    # 2. Convert declarations to render types
    print("\n--- Step 2: Converting declarations to render types ---")
    cmd = [
        sys.executable,
        "-m",
        "render_types.typedoc_to_render_types",
        str(typedoc_json),
        args.out,
    ]
    if args.config:
        cmd.extend(["--config", args.config])

    run_command(cmd, cwd=root_dir)

    print(f"\nSUCCESS: Render types written to {args.out}")


if __name__ == "__main__":
    main()
