"""Line Classifier - Tag each line of a commit message with a raw kind."""

import re
from enum import Enum

from commitfmt import SCISSORS_LINE


class RawKind(Enum):
    """Kind of a single line before lines are merged into chunks."""
    PARAGRAPH = "paragraph"
    COMMENT = "comment"
    BLANK = "blank"
    DIFF = "diff"


BLANK_RE = re.compile(r'^\s*$')
COMMENT_RE = re.compile(r'^\s*(#|$)')


def is_blank(line: str) -> bool:
    return BLANK_RE.match(line) is not None


def is_comment(line: str) -> bool:
    """Comment lines start with '#' after optional indentation.

    Blank lines match too, which matters for when the diff region starts.
    """
    return COMMENT_RE.match(line) is not None


# Checked in order, first match wins
LINE_RULES: list[tuple] = [
    (is_blank, RawKind.BLANK),
    (is_comment, RawKind.COMMENT),
]


def classify_line(line: str, diff_active: bool = False) -> tuple[RawKind, bool]:
    """Classify one line.

    Returns:
        (kind, saw_cut_marker) where saw_cut_marker is True only for the
        exact scissors line
    """
    if diff_active:
        return RawKind.DIFF, False

    for predicate, kind in LINE_RULES:
        if predicate(line):
            return kind, kind is RawKind.COMMENT and line == SCISSORS_LINE
    return RawKind.PARAGRAPH, False


class LineClassifier:
    """Classifies lines in document order, tracking the scissors line.

    Once a scissors line has been seen, the first following line that is
    not a comment (or blank) switches the classifier into diff mode for
    the rest of the document.
    """

    def __init__(self):
        self.cut_marker_seen = False
        self.diff_active = False

    def classify(self, line: str) -> RawKind:
        if self.cut_marker_seen and not is_comment(line):
            self.diff_active = True

        kind, saw_cut_marker = classify_line(line, self.diff_active)
        if saw_cut_marker:
            self.cut_marker_seen = True
        return kind
