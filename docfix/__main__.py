"""Entry point for running docfix as a module."""

from docfix.main import main

if __name__ == "__main__":
    raise SystemExit(main())
