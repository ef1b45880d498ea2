"""Text normalization for each kind of commit message chunk."""

import re
import textwrap

from commitfmt import WRAP_WIDTH
from commitfmt.message.chunks import ChunkKind

WHITESPACE_RE = re.compile(r'\s+')


def collapse_whitespace(text: str) -> str:
    return WHITESPACE_RE.sub(' ', text).strip()


def format_subject(text: str) -> str:
    """Join the subject onto one line with single spaces."""
    return collapse_whitespace(text)


def format_paragraph(text: str, width: int = WRAP_WIDTH) -> str:
    """Reflow a paragraph and wrap it greedily at `width` columns.

    Words are never split, so a token longer than `width` gets a line of
    its own.
    """
    return '\n'.join(textwrap.wrap(
        collapse_whitespace(text),
        width=width,
        break_long_words=False,
        break_on_hyphens=False,
    ))


def format_chunk_text(kind: ChunkKind, text: str, width: int = WRAP_WIDTH) -> str:
    """Return the replacement text for a chunk of the given kind."""
    if kind is ChunkKind.SUBJECT:
        return format_subject(text)
    if kind is ChunkKind.PARAGRAPH:
        return format_paragraph(text, width)
    if kind is ChunkKind.BLANK:
        return ''
    # Comments, trailers and the attached diff are kept verbatim
    return text
