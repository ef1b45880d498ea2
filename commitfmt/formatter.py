"""Format Engine - Turn a commit message into formatted text or per-chunk edits."""

from dataclasses import dataclass
from typing import Iterable

from commitfmt import GIT_GENERATED_PREFIXES, WRAP_WIDTH
from commitfmt.message import Chunk, ChunkKind, assemble_chunks, format_chunk_text, reclassify_trailers

# Only these kinds ever change when formatted
EDITABLE_KINDS = {ChunkKind.SUBJECT, ChunkKind.PARAGRAPH, ChunkKind.BLANK}


@dataclass(frozen=True)
class TextEdit:
    """Replace the text of lines start_line..end_line (inclusive) with new_text.

    The line terminator after end_line is not part of the replaced text.
    """
    start_line: int
    end_line: int
    new_text: str

    def to_dict(self) -> dict:
        return {"start_line": self.start_line, "end_line": self.end_line, "new_text": self.new_text}


def split_lines(text: str) -> list[str]:
    return text.split('\n')


def get_chunks(lines: list[str], trailer_prefixes: Iterable[str] | None = None) -> list[Chunk]:
    """Chunk a document and detect its trailer block.

    trailer_prefixes are recognized in addition to the ones git generates.
    """
    prefixes = GIT_GENERATED_PREFIXES + tuple(p for p in (trailer_prefixes or ()) if p)
    return reclassify_trailers(assemble_chunks(lines), lines, prefixes)


def format_edits(lines: list[str], width: int = WRAP_WIDTH,
                 trailer_prefixes: Iterable[str] | None = None) -> list[TextEdit]:
    """Compute one edit per chunk whose formatted text differs from the original."""
    edits = []
    for chunk in get_chunks(lines, trailer_prefixes):
        if chunk.kind not in EDITABLE_KINDS:
            continue
        text = chunk.text(lines)
        new_text = format_chunk_text(chunk.kind, text, width)
        if new_text != text:
            edits.append(TextEdit(chunk.start_line, chunk.end_line, new_text))
    return edits


def apply_edits(lines: list[str], edits: list[TextEdit]) -> str:
    """Apply non-overlapping edits and return the resulting document text."""
    parts = []
    position = 0
    for edit in sorted(edits, key=lambda e: e.start_line):
        if edit.start_line < position:
            raise ValueError(f"Overlapping edit at line {edit.start_line}")
        parts.extend(lines[position:edit.start_line])
        parts.append(edit.new_text)
        position = edit.end_line + 1
    parts.extend(lines[position:])
    return '\n'.join(parts)


def format_message(text: str, width: int = WRAP_WIDTH,
                   trailer_prefixes: Iterable[str] | None = None) -> str:
    """Format a whole commit message.

    Blank runs of any length come out as a single empty line.
    """
    lines = split_lines(text)
    chunks = get_chunks(lines, trailer_prefixes)
    return '\n'.join(format_chunk_text(chunk.kind, chunk.text(lines), width) for chunk in chunks)
