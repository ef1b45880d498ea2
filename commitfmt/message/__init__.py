"""Commit Message Parsing Package"""

from commitfmt.message.classifier import LineClassifier, RawKind, classify_line, is_blank, is_comment
from commitfmt.message.chunks import Chunk, ChunkKind, assemble_chunks
from commitfmt.message.trailers import TrailerScore, is_trailer_line, reclassify_trailers, score_trailer_lines
from commitfmt.message.wrap import collapse_whitespace, format_chunk_text, format_paragraph, format_subject

__all__ = [
    "LineClassifier",
    "RawKind",
    "classify_line",
    "is_blank",
    "is_comment",
    "Chunk",
    "ChunkKind",
    "assemble_chunks",
    "TrailerScore",
    "is_trailer_line",
    "reclassify_trailers",
    "score_trailer_lines",
    "collapse_whitespace",
    "format_chunk_text",
    "format_paragraph",
    "format_subject",
]
