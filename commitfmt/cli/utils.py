"""CLI Utility Functions"""

import json
import sys

from commitfmt.formatter import TextEdit
from commitfmt.message import Chunk
from commitfmt.output import bold, dim, info, colorize_chunk_kind
from commitfmt.views import FoldingRange, LineRange, OutlineEntry

STDIN = '-'


def read_message(path: str) -> str:
    """Read a commit message from a file, or stdin for '-'.

    Line endings are normalized to '\\n' by text mode.
    """
    if path == STDIN:
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def write_message(path: str, text: str) -> None:
    with open(path, 'w', encoding='utf-8') as f:
        f.write(text)


def _line_span(start_line: int, end_line: int) -> str:
    # 1-based for humans, like editors and grep -n
    if start_line == end_line:
        return f"{start_line + 1}"
    return f"{start_line + 1}-{end_line + 1}"


def _preview(text: str, width: int = 50) -> str:
    first = text.split('\n', 1)[0]
    return first if len(first) <= width else first[:width - 3] + '...'


def render_chunks(chunks: list[Chunk], lines: list[str]) -> str:
    rows = []
    for chunk in chunks:
        span = _line_span(chunk.start_line, chunk.end_line)
        kind = chunk.kind.value
        padding = ' ' * (10 - len(kind))
        rows.append(f"{span:>9}  {colorize_chunk_kind(kind)}{padding}{dim(_preview(chunk.text(lines)))}")
    return '\n'.join(rows)


def render_outline(entries: list[OutlineEntry]) -> str:
    return '\n'.join(
        f"{bold(entry.label)} {dim(_line_span(entry.range.start_line, entry.range.end_line))}  {_preview(entry.detail)}"
        for entry in entries
    )


def render_folds(ranges: list[FoldingRange]) -> str:
    return '\n'.join(
        f"{_line_span(r.start_line, r.end_line)}{' ' + info(r.kind) if r.kind else ''}"
        for r in ranges
    )


def render_subject(subject: LineRange | None) -> str:
    if subject is None:
        return ''
    return _line_span(subject.start_line, subject.end_line)


def render_edits(edits: list[TextEdit]) -> str:
    blocks = []
    for edit in edits:
        header = info(f"@@ {_line_span(edit.start_line, edit.end_line)} @@")
        body = edit.new_text if edit.new_text else dim('(delete)')
        blocks.append(f"{header}\n{body}")
    return '\n'.join(blocks)


def to_json(items) -> str:
    """Serialize view objects (or None) as JSON."""
    if items is None:
        return json.dumps(None)
    if isinstance(items, list):
        return json.dumps([item.to_dict() for item in items], indent=2)
    return json.dumps(items.to_dict(), indent=2)
