"""Read-only views over commit message chunks: subject, folding and outline."""

from dataclasses import dataclass
from typing import Iterable, Optional

from commitfmt.formatter import get_chunks
from commitfmt.message import ChunkKind

CHUNK_LABELS = {
    ChunkKind.SUBJECT: "Subject Line",
    ChunkKind.PARAGRAPH: "Paragraph",
    ChunkKind.COMMENT: "Comment",
    ChunkKind.DIFF: "Diff",
    ChunkKind.TRAILERS: "Trailers",
    ChunkKind.BLANK: None,
}

FOLDABLE_KINDS = {ChunkKind.SUBJECT, ChunkKind.PARAGRAPH, ChunkKind.TRAILERS, ChunkKind.COMMENT}


@dataclass(frozen=True)
class LineRange:
    """Inclusive, zero-based range of lines."""
    start_line: int
    end_line: int

    def to_dict(self) -> dict:
        return {"start_line": self.start_line, "end_line": self.end_line}


@dataclass(frozen=True)
class FoldingRange:
    start_line: int
    end_line: int
    kind: Optional[str] = None  # "comment" for comment regions

    def to_dict(self) -> dict:
        return {"start_line": self.start_line, "end_line": self.end_line, "kind": self.kind}


@dataclass(frozen=True)
class OutlineEntry:
    label: str
    range: LineRange
    detail: str

    def to_dict(self) -> dict:
        return {"label": self.label, **self.range.to_dict(), "detail": self.detail}


def chunk_label(kind: ChunkKind) -> Optional[str]:
    """Display label for a chunk kind; None for kinds that are never shown."""
    return CHUNK_LABELS[kind]


def subject_range(lines: list[str], trailer_prefixes: Iterable[str] | None = None) -> Optional[LineRange]:
    """Range of the subject chunk, or the first line when there is none.

    Returns None for a document without lines.
    """
    if not lines:
        return None
    for chunk in get_chunks(lines, trailer_prefixes):
        if chunk.kind is ChunkKind.SUBJECT:
            return LineRange(chunk.start_line, chunk.end_line)
    return LineRange(0, 0)


def folding_ranges(lines: list[str], trailer_prefixes: Iterable[str] | None = None) -> list[FoldingRange]:
    ranges = []
    for chunk in get_chunks(lines, trailer_prefixes):
        if chunk.kind not in FOLDABLE_KINDS:
            continue
        kind = "comment" if chunk.kind is ChunkKind.COMMENT else None
        ranges.append(FoldingRange(chunk.start_line, chunk.end_line, kind))
    return ranges


def outline(lines: list[str], trailer_prefixes: Iterable[str] | None = None) -> list[OutlineEntry]:
    """Labelled entries for every chunk except blank runs."""
    entries = []
    for chunk in get_chunks(lines, trailer_prefixes):
        label = chunk_label(chunk.kind)
        if label is None:
            continue
        entries.append(OutlineEntry(label, LineRange(chunk.start_line, chunk.end_line), chunk.text(lines)))
    return entries
