"""Entry point for the eo CLI.

Usage:
    <command> | python -m output_enhancer [--url=URL]
    <command> | eo [--url=URL]          (after pip install -e .)
"""

from output_enhancer.adapters.cli import run_cli


def main() -> None:
    run_cli()


if __name__ == "__main__":
    main()
