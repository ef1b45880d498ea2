"""Git Operations Package"""

from commitfmt.git.repo import GitRepository, GitError
from commitfmt.git.hooks import HOOK_NAME, HOOK_SCRIPT, install_commit_msg_hook, is_commitfmt_hook

__all__ = [
    "GitRepository",
    "GitError",
    "HOOK_NAME",
    "HOOK_SCRIPT",
    "install_commit_msg_hook",
    "is_commitfmt_hook",
]
