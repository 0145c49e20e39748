"""
Main API interface for docfix

Fixes Javadoc comments in a source string, a single file, or a directory
tree. ``DocFixer`` is the facade used by the command line and the build
plugin; the module-level functions are the underlying operations.
"""

import difflib
import fnmatch
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from .config import ConfigurationError, DocFixConfig
from .errors import DocFixError
from .javadoc import detect_encoding, fix_source, resolve_encoding

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

DEFAULT_MAX_DEPTH = 63
DEFAULT_EXTENSIONS = (".java",)
DEFAULT_EXCLUDED = (".git", ".svn", ".hg")


@dataclass
class FileChange:
    """A file whose Javadoc comments were (or would be) rewritten."""

    path: Path
    relative_path: str
    changed_lines: List[Tuple[str, str]]
    written: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": str(self.path),
            "relative_path": self.relative_path,
            "changed_lines": [list(pair) for pair in self.changed_lines],
            "written": self.written,
        }


@dataclass
class FixReport:
    """Standardized result of fixing a file or a directory."""

    files_scanned: int = 0
    changes: List[FileChange] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    dryrun: bool = False

    @property
    def success(self) -> bool:
        return not self.errors

    @property
    def files_changed(self) -> int:
        return len(self.changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "dryrun": self.dryrun,
            "files_scanned": self.files_scanned,
            "files_changed": self.files_changed,
            "changes": [change.to_dict() for change in self.changes],
            "errors": list(self.errors),
        }


def fix(code: str) -> str:
    """
    Fix every Javadoc comment in a Java source string.

    Raises:
        JavaParseError: if a doc comment is never closed
    """
    return fix_source(code)


def read_source(path: PathLike, encoding: Optional[str] = None) -> Tuple[str, str]:
    """Read a source file, returning its text and the encoding used."""
    charset = encoding or detect_encoding(path)
    # newline="" keeps CRLF and CR line endings intact
    with open(path, "r", encoding=charset, newline="") as f:
        return f.read(), charset


def write_source(path: PathLike, code: str, encoding: str) -> None:
    with open(path, "w", encoding=encoding, newline="") as f:
        f.write(code)


def fix_file(path: PathLike, encoding: Optional[str] = None) -> bool:
    """
    Fix a Java source file in place.

    Args:
        path: File to fix
        encoding: Charset name, or None to detect it from the file

    Returns:
        True if the file was rewritten
    """
    resolve_encoding(encoding)
    original, charset = read_source(path, encoding)
    fixed = fix_source(original)
    if fixed == original:
        logger.debug("No changes needed: %s", path)
        return False
    write_source(path, fixed, charset)
    logger.info("Fixed: %s", path)
    return True


def changed_lines(original: str, fixed: str) -> List[Tuple[str, str]]:
    """
    Pairs of (old, new) lines that differ between two versions of a file.

    Lines only present on one side are paired with an empty string.
    """
    old_lines = original.splitlines()
    new_lines = fixed.splitlines()
    pairs: List[Tuple[str, str]] = []
    matcher = difflib.SequenceMatcher(None, old_lines, new_lines, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            continue
        old = old_lines[i1:i2]
        new = new_lines[j1:j2]
        for k in range(max(len(old), len(new))):
            pairs.append(
                (old[k] if k < len(old) else "", new[k] if k < len(new) else "")
            )
    return pairs


def iter_source_files(
    root: PathLike,
    max_depth: int = DEFAULT_MAX_DEPTH,
    file_extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    excluded_patterns: Sequence[str] = DEFAULT_EXCLUDED,
    follow_symlinks: bool = False,
) -> List[Path]:
    """
    Regular source files under ``root``, at most ``max_depth`` levels deep.

    Files directly inside ``root`` are one level deep. Symbolic links are
    skipped unless ``follow_symlinks`` is set.
    """
    root = Path(root)
    found: List[Path] = []

    for dirpath, dirnames, filenames in os.walk(root, followlinks=follow_symlinks):
        current = Path(dirpath)
        depth = len(current.relative_to(root).parts)

        dirnames[:] = sorted(
            d
            for d in dirnames
            if depth + 1 < max_depth
            and not _is_excluded(d, excluded_patterns)
            and (follow_symlinks or not (current / d).is_symlink())
        )

        for name in sorted(filenames):
            candidate = current / name
            if not name.endswith(tuple(file_extensions)):
                continue
            if not follow_symlinks and candidate.is_symlink():
                logger.debug("Skipping symbolic link: %s", candidate)
                continue
            if candidate.is_file():
                found.append(candidate)

    return found


def _check_max_depth(max_depth: int) -> None:
    if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 1:
        raise ConfigurationError(f"max_depth must be a positive integer, got {max_depth!r}")


def _is_excluded(name: str, patterns: Sequence[str]) -> bool:
    return any(fnmatch.fnmatch(name, pattern) for pattern in patterns)


def _relative_to(path: Path, base: Optional[PathLike]) -> str:
    base = Path(base) if base is not None else Path.cwd()
    try:
        return os.path.relpath(path.absolute(), base.absolute())
    except ValueError:
        # different drives on Windows
        return str(path)


def process_file(
    path: PathLike,
    report: FixReport,
    dryrun: bool = False,
    encoding: Optional[str] = None,
    base_dir: Optional[PathLike] = None,
) -> Optional[FileChange]:
    """
    Fix one file and record the outcome in ``report``.

    I/O, decoding and parse errors are logged and recorded, never raised.
    """
    path = Path(path)
    report.files_scanned += 1
    try:
        original, charset = read_source(path, encoding)
        fixed = fix_source(original)
        if fixed == original:
            return None
        if not dryrun:
            write_source(path, fixed, charset)
            logger.info("Fixed: %s", path)
    except (OSError, UnicodeError, DocFixError) as e:
        message = f"Failed to fix: {path}, {e}"
        logger.error(message)
        report.errors.append(message)
        return None

    change = FileChange(
        path=path,
        relative_path=_relative_to(path, base_dir),
        changed_lines=changed_lines(original, fixed),
        written=not dryrun,
    )
    report.changes.append(change)
    return change


def fix_directory(
    path: PathLike,
    dryrun: bool = False,
    encoding: Optional[str] = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
    base_dir: Optional[PathLike] = None,
    file_extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    excluded_patterns: Sequence[str] = DEFAULT_EXCLUDED,
    follow_symlinks: bool = False,
) -> FixReport:
    """
    Fix every Java source file in a directory tree.

    Args:
        path: Directory to walk
        dryrun: Only report what would change
        encoding: Charset name for every file, or None to detect per file
        max_depth: Maximum directory depth to descend
        base_dir: Directory that reported paths are relative to; the current
            working directory by default

    Returns:
        FixReport listing changed files and per-file errors
    """
    _check_max_depth(max_depth)
    resolve_encoding(encoding)
    report = FixReport(dryrun=dryrun)
    files = iter_source_files(
        path,
        max_depth=max_depth,
        file_extensions=file_extensions,
        excluded_patterns=excluded_patterns,
        follow_symlinks=follow_symlinks,
    )
    logger.debug("Found %d source files under %s", len(files), path)

    for source_file in files:
        process_file(source_file, report, dryrun=dryrun, encoding=encoding, base_dir=base_dir)

    logger.info(
        "Scanned %d files, %s %d, %d errors",
        report.files_scanned,
        "would fix" if dryrun else "fixed",
        report.files_changed,
        len(report.errors),
    )
    return report


class DocFixer:
    """
    Facade over the fixing operations, driven by a DocFixConfig.

    Explicit arguments to ``fix_path`` win over the configuration.
    """

    def __init__(self, config: Optional[DocFixConfig] = None):
        self.config = config or DocFixConfig.default()

    def fix_code(self, code: str) -> str:
        return fix(code)

    def fix_path(
        self,
        path: PathLike,
        dryrun: Optional[bool] = None,
        encoding: Optional[str] = None,
        max_depth: Optional[int] = None,
        base_dir: Optional[PathLike] = None,
    ) -> FixReport:
        """
        Fix a single file or a directory tree.

        Raises:
            FileNotFoundError: if ``path`` does not exist
            InvalidEncodingError: if ``encoding`` is not a known charset
            ConfigurationError: if ``max_depth`` is not a positive integer
        """
        settings = self.config.fix_settings
        dryrun = settings.dryrun if dryrun is None else dryrun
        encoding = encoding or settings.encoding
        if max_depth is None:
            max_depth = settings.max_depth
        _check_max_depth(max_depth)

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File or directory does not exist: {path}")

        if path.is_dir():
            return fix_directory(
                path,
                dryrun=dryrun,
                encoding=encoding,
                max_depth=max_depth,
                base_dir=base_dir,
                file_extensions=settings.file_extensions,
                excluded_patterns=settings.excluded_patterns,
                follow_symlinks=settings.follow_symlinks,
            )

        resolve_encoding(encoding)
        report = FixReport(dryrun=dryrun)
        process_file(path, report, dryrun=dryrun, encoding=encoding, base_dir=base_dir)
        return report
