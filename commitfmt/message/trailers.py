"""Trailer Classifier - Decide whether the closing paragraph is a trailer block.

Git trailers look like ``Key: value`` and sit in the last paragraph of a
message. A paragraph is taken as trailers when every line is a trailer, or
when it opens with a line git itself generates and at least a quarter of
its scored lines are trailers.
"""

import re
from dataclasses import dataclass
from typing import Iterable

from commitfmt import GIT_GENERATED_PREFIXES
from commitfmt.message.chunks import Chunk, ChunkKind

TRAILER_RE = re.compile(r'^[A-Za-z0-9-]+\s?: .+$')
CONTINUATION_RE = re.compile(r'^\s+\S')


def is_trailer_line(line: str) -> bool:
    return TRAILER_RE.match(line) is not None


@dataclass
class TrailerScore:
    """Line counts gathered from a candidate trailer paragraph."""
    trailers: int = 0
    non_trailers: int = 0
    recognized_prefix: bool = False
    rejected: bool = False

    @property
    def is_trailer_block(self) -> bool:
        if self.rejected:
            return False
        if self.non_trailers == 0 and self.trailers > 0:
            return True
        return self.recognized_prefix and 3 * self.trailers >= self.non_trailers


def score_trailer_lines(lines: list[str], prefixes: Iterable[str] = GIT_GENERATED_PREFIXES) -> TrailerScore:
    """Count trailer and non-trailer lines in a paragraph.

    Continuation lines (indented, directly after a trailer or another
    continuation) extend the previous trailer and are not counted.
    Without a recognized prefix the first non-trailer line rejects the
    paragraph.
    """
    score = TrailerScore()
    if not lines:
        return score

    prefixes = tuple(prefixes)
    in_trailer = False
    for index, line in enumerate(lines):
        if index == 0 and prefixes and line.startswith(prefixes):
            score.recognized_prefix = True
            score.trailers += 1
            in_trailer = True
        elif is_trailer_line(line):
            score.trailers += 1
            in_trailer = True
        elif in_trailer and CONTINUATION_RE.match(line):
            continue
        elif score.recognized_prefix:
            score.non_trailers += 1
            in_trailer = False
        else:
            score.rejected = True
            break

    return score


def reclassify_trailers(chunks: list[Chunk], lines: list[str],
                        prefixes: Iterable[str] = GIT_GENERATED_PREFIXES) -> list[Chunk]:
    """Return chunks with the last paragraph turned into TRAILERS if it qualifies."""
    for position in range(len(chunks) - 1, -1, -1):
        if chunks[position].kind is ChunkKind.PARAGRAPH:
            break
    else:
        return list(chunks)

    candidate = chunks[position]
    result = list(chunks)
    if score_trailer_lines(candidate.lines(lines), prefixes).is_trailer_block:
        result[position] = candidate.with_kind(ChunkKind.TRAILERS)
    return result
