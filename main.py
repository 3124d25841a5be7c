"""Main orchestration script for generating component API reference pages."""

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
    """Run the documentation build, optionally after development checks."""
    parser = argparse.ArgumentParser(
        description="Generate component API reference pages from descriptor tables."
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before generating pages",
    )
    parser.add_argument(
        "--descriptors",
        default="descriptors",
        help="Directory containing descriptor tables (default: descriptors)",
    )
    parser.add_argument(
        "--out",
        default="docs_out",
        help="Output directory (default: docs_out)",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([sys.executable, str(root_dir / "dev.py"), "--ci"])
        print("\nDevelopment checks passed. Proceeding with page generation.\n")

    print("--- Rendering component reference pages ---")
    cmd = [
        sys.executable,
        "-m",
        "component_docs.build_docs",
        str(root_dir / args.descriptors),
        str(root_dir / args.out),
    ]
    if args.config:
        cmd.extend(["--config", args.config])

    run_command(cmd, cwd=root_dir)

    print(f"\nSUCCESS: Documentation generated in {root_dir / args.out}")


if __name__ == "__main__":
    main()
