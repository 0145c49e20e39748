"""
Main entry point for the docfix CLI.

This module provides the main() function that serves as the entry point
for the ``docfix`` console script.
"""

import sys
from typing import List, Optional


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    from docfix.cli_entry import main as cli_main

    try:
        cli_main(argv)
    except SystemExit as e:
        # argparse and the command handlers exit with a status code
        code = getattr(e, "code", 0)
        if code is None:
            return 0
        return code if isinstance(code, int) else 1
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
