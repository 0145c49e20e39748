"""
Configuration management commands for the docfix CLI (show, init, validate).
"""

import json
import sys

from docfix.config import ConfigurationError, DocFixConfig


def cmd_config(args, config: DocFixConfig) -> None:
    """Handle config command."""
    if args.config_action == "show":
        if args.format == "json":
            print(json.dumps(config.to_dict(), indent=2))
        else:
            print("Current docfix Configuration:")
            print(config.get_config_summary())

    elif args.config_action == "init":
        try:
            DocFixConfig.default().to_file(args.path, args.format)
        except ConfigurationError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"Default configuration file created at {args.path}")
        print("Edit the file to customize your docfix settings.")

    elif args.config_action == "validate":
        try:
            DocFixConfig.load(args.config_file, use_env=False, validate=True)
        except ConfigurationError as e:
            print(f"Error: Configuration file is invalid: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"Configuration file {args.config_file} is valid")
