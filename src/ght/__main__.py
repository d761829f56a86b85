"""Run the CLI with `python -m ght`."""

from __future__ import annotations

from ght.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
