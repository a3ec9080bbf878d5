"""VcsContextProvider implementations."""

import subprocess
from pathlib import Path

UNKNOWN = "unknown"


class GitVcsContextProvider:
    """Reads the current commit and branch from git.

    Any failure (git missing, not a repository, detached HEAD printing
    nothing) yields "unknown" so recording never fails on VCS context.
    """

    def __init__(self, repo_dir: Path | None = None) -> None:
        self._repo_dir = repo_dir

    def current_sha(self) -> str:
        return self._git("rev-parse", "--short", "HEAD")

    def current_branch(self) -> str:
        return self._git("branch", "--show-current")

    def _git(self, *args: str) -> str:
        try:
            completed = subprocess.run(
                ["git", *args],
                cwd=self._repo_dir,
                capture_output=True,
                text=True,
                check=False,
                timeout=10,
            )
        except (OSError, subprocess.TimeoutExpired):
            return UNKNOWN
        if completed.returncode != 0:
            return UNKNOWN
        return completed.stdout.strip() or UNKNOWN


class StaticVcsContextProvider:
    """Fixed VCS context, for tests and for running outside a repository."""

    def __init__(self, sha: str = UNKNOWN, branch: str = UNKNOWN) -> None:
        self._sha = sha
        self._branch = branch

    def current_sha(self) -> str:
        return self._sha

    def current_branch(self) -> str:
        return self._branch
