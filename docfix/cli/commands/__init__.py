"""
CLI command handlers.

Organized by functional domain:
- fix.py: fix and check commands
- plugin.py: build plugin task and descriptor commands
- config.py: configuration commands
"""

from .config import cmd_config
from .fix import cmd_check, cmd_fix
from .plugin import cmd_info, cmd_task

__all__ = [
    "cmd_check",
    "cmd_config",
    "cmd_fix",
    "cmd_info",
    "cmd_task",
]
