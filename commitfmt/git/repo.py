"""Git Repository - Locate the repository and the files commitfmt works on."""

import subprocess
from pathlib import Path


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class GitRepository:
    """Thin wrapper over the git CLI for the current working tree."""

    def __init__(self, cwd: Path | None = None):
        self.cwd = cwd
        self._verify_git_available()
        self._verify_in_repo()

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                ['git', *args],
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace',
                cwd=self.cwd,
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr}")
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_git_available(self) -> None:
        """Fail fast if git isn't available."""
        try:
            self._run_git('--version')
        except GitError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_in_repo(self) -> None:
        """Fail fast if we're not in a git repository."""
        try:
            self._run_git('rev-parse', '--git-dir')
        except GitError:
            raise GitError("Not inside a git repository")

    def _resolve(self, output: str) -> Path:
        path = Path(output.strip())
        if not path.is_absolute() and self.cwd is not None:
            path = Path(self.cwd) / path
        return path

    @property
    def hooks_dir(self) -> Path:
        """Hooks directory, honoring core.hooksPath."""
        return self._resolve(self._run_git('rev-parse', '--git-path', 'hooks'))

    @property
    def commit_message_path(self) -> Path:
        """The file git hands to the editor during `git commit`."""
        return self._resolve(self._run_git('rev-parse', '--git-path', 'COMMIT_EDITMSG'))
