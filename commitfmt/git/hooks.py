"""Install a commit-msg hook that formats every message git records."""

import os
import stat
from pathlib import Path

from commitfmt.git.repo import GitError, GitRepository

HOOK_NAME = "commit-msg"
HOOK_MARKER = "# installed by commitfmt"

HOOK_SCRIPT = f"""#!/bin/sh
{HOOK_MARKER}
exec commitfmt --in-place "$1"
"""


def is_commitfmt_hook(path: Path) -> bool:
    try:
        return HOOK_MARKER in path.read_text(encoding='utf-8', errors='replace')
    except OSError:
        return False


def install_commit_msg_hook(repo: GitRepository, force: bool = False) -> Path:
    """Write the commit-msg hook and make it executable.

    Raises:
        GitError: if a hook not written by commitfmt exists and force is False
    """
    hooks_dir = repo.hooks_dir
    path = hooks_dir / HOOK_NAME

    if path.exists() and not force and not is_commitfmt_hook(path):
        raise GitError(f"{path} already exists. Re-run with --force to overwrite it.")

    hooks_dir.mkdir(parents=True, exist_ok=True)
    path.write_text(HOOK_SCRIPT, encoding='utf-8')
    mode = os.stat(path).st_mode
    os.chmod(path, mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path
