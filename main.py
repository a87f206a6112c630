"""CLI entrypoint for codecity when run from a checkout: ``python main.py <command>``."""

from codecity.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
