"""
Commit Message Formatter

Splits git commit messages into regions and normalizes each one.
"""

__version__ = "1.0.0"

# Body text is wrapped at this column, matching git's own recommendation
WRAP_WIDTH = 72

# Everything below this line is the diff `git commit --verbose` attaches
SCISSORS_LINE = "# ------------------------ >8 ------------------------"

# Prefixes git itself writes into a message footer (see git's trailer.c)
GIT_GENERATED_PREFIXES = (
    "Signed-off-by: ",
    "(cherry picked from commit ",
)
