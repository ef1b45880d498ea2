"""Chunk Assembler - Merge classified lines into typed commit message chunks."""

from dataclasses import dataclass, replace
from enum import Enum

from commitfmt.message.classifier import LineClassifier, RawKind


class ChunkKind(Enum):
    """Semantic kind of a region in a commit message."""
    SUBJECT = "subject"
    PARAGRAPH = "paragraph"
    COMMENT = "comment"
    BLANK = "blank"
    DIFF = "diff"
    TRAILERS = "trailers"


_RAW_TO_CHUNK = {
    RawKind.PARAGRAPH: ChunkKind.PARAGRAPH,
    RawKind.COMMENT: ChunkKind.COMMENT,
    RawKind.BLANK: ChunkKind.BLANK,
    RawKind.DIFF: ChunkKind.DIFF,
}


@dataclass(frozen=True)
class Chunk:
    """A run of lines sharing one kind. Line numbers are zero-based and inclusive."""
    start_line: int
    end_line: int
    kind: ChunkKind

    def __post_init__(self):
        if self.start_line > self.end_line:
            raise ValueError(f"Chunk starts after it ends: {self.start_line} > {self.end_line}")

    @property
    def line_count(self) -> int:
        return self.end_line - self.start_line + 1

    def lines(self, document: list[str]) -> list[str]:
        return document[self.start_line:self.end_line + 1]

    def text(self, document: list[str]) -> str:
        return '\n'.join(self.lines(document))

    def with_kind(self, kind: ChunkKind) -> 'Chunk':
        return replace(self, kind=kind)

    def to_dict(self) -> dict:
        return {"start_line": self.start_line, "end_line": self.end_line, "kind": self.kind.value}


@dataclass
class _OpenChunk:
    raw_kind: RawKind
    kind: ChunkKind
    start_line: int
    end_line: int

    def close(self) -> Chunk:
        return Chunk(self.start_line, self.end_line, self.kind)


def assemble_chunks(lines: list[str]) -> list[Chunk]:
    """Split a document into contiguous chunks of same-kind lines.

    The first paragraph chunk becomes the subject. Trailers are not
    detected here; see reclassify_trailers().
    """
    classifier = LineClassifier()
    chunks: list[Chunk] = []
    current: _OpenChunk | None = None
    had_subject = False

    for index, line in enumerate(lines):
        raw_kind = classifier.classify(line)

        if current is not None and raw_kind is current.raw_kind:
            current.end_line = index
            continue

        if current is not None:
            chunks.append(current.close())

        kind = _RAW_TO_CHUNK[raw_kind]
        if kind is ChunkKind.PARAGRAPH and not had_subject:
            kind = ChunkKind.SUBJECT
            had_subject = True
        current = _OpenChunk(raw_kind, kind, index, index)

    if current is not None:
        chunks.append(current.close())

    return chunks
