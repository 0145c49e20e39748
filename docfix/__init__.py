"""
docfix - Javadoc comment normalizer

Rewrites Javadoc comments in Java source files so they follow the Oracle
"How to Write Doc Comments for the Javadoc Tool" guidelines, and ships a
build plugin that runs the fixer over a project's sources.
"""

__version__ = "1.0.6"
__author__ = "Elliotte Rusty Harold"
__email__ = "elharo@ibiblio.org"


def __getattr__(name):
    """Lazy loading of the main API to keep ``import docfix`` light."""
    if name in {"DocFixer", "FixReport", "FileChange", "fix", "fix_file", "fix_directory"}:
        from . import api

        return getattr(api, name)

    if name in {"DocFixConfig", "load_config"}:
        from . import config

        return getattr(config, name)

    if name in {"DocFixPlugin", "DocFixTask", "Project", "PublicationMetadata"}:
        from . import plugin

        return getattr(plugin, name)

    if name in {"DocComment", "BlockTag", "Kind"}:
        from . import javadoc

        return getattr(javadoc, name)

    raise AttributeError(f"module 'docfix' has no attribute '{name}'")


__all__ = [
    "__version__",
    # Main API
    "DocFixer",
    "FixReport",
    "FileChange",
    "fix",
    "fix_file",
    "fix_directory",
    "DocFixConfig",
    "load_config",
    # Build plugin
    "DocFixPlugin",
    "DocFixTask",
    "Project",
    "PublicationMetadata",
    # Comment model
    "DocComment",
    "BlockTag",
    "Kind",
]
