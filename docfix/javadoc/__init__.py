"""
Javadoc parsing and normalization.

Parses doc comments out of Java source and rewrites them to follow the
Oracle "How to Write Doc Comments for the Javadoc Tool" guidelines.
"""

from .block_tag import BlockTag
from .doc_comment import DocComment, Kind, SingleLineComment
from .encoding import detect_encoding, resolve_encoding
from .source_scanner import Chunk, ChunkType, extract_chunks, fix_source, infer_kind, scan

__all__ = [
    "BlockTag",
    "DocComment",
    "Kind",
    "SingleLineComment",
    "detect_encoding",
    "resolve_encoding",
    "Chunk",
    "ChunkType",
    "extract_chunks",
    "fix_source",
    "infer_kind",
    "scan",
]
