"""Keep the vote state file on a dedicated git branch.

The branch is checked out as a worktree next to the main checkout, so the
state file can be read and committed without touching the working tree the
workflow runs from. On the first run the branch does not exist yet and is
created as an orphan branch containing only the state file.
"""

import logging
import subprocess
from pathlib import Path

from .manager import DEFAULT_STATE_DIR

logger = logging.getLogger(__name__)

DEFAULT_STATE_BRANCH = "vote_state"
DEFAULT_COMMIT_MESSAGE = "Update vote notification state"


class StateBranch:
    """Git worktree of the state branch."""

    def __init__(
        self,
        repo_dir: str | Path = ".",
        branch: str = DEFAULT_STATE_BRANCH,
        worktree_dir: str | Path = DEFAULT_STATE_DIR,
        remote: str = "origin",
        author_name: str = "github-actions[bot]",
        author_email: str = "41898282+github-actions[bot]@users.noreply.github.com",
    ) -> None:
        self.repo_dir = Path(repo_dir)
        self.branch = branch
        self.worktree_dir = Path(worktree_dir)
        self.remote = remote
        self.author_name = author_name
        self.author_email = author_email

    def _git(
        self, *args: str, cwd: Path | None = None, check: bool = True
    ) -> subprocess.CompletedProcess[str]:
        command = [
            "git",
            "-c",
            f"user.name={self.author_name}",
            "-c",
            f"user.email={self.author_email}",
            *args,
        ]
        logger.debug(f"Running {' '.join(command)}")
        return subprocess.run(
            command,
            cwd=cwd or self.repo_dir,
            check=check,
            capture_output=True,
            text=True,
        )

    def _worktree_path(self) -> Path:
        if self.worktree_dir.is_absolute():
            return self.worktree_dir
        return self.repo_dir / self.worktree_dir

    def _fetch_remote_branch(self) -> bool:
        """Fetch the state branch; False when the remote has no such branch."""
        refspec = f"+refs/heads/{self.branch}:refs/remotes/{self.remote}/{self.branch}"
        result = self._git("fetch", self.remote, refspec, check=False)
        if result.returncode != 0:
            logger.info(
                f"State branch {self.branch} not found on {self.remote}: "
                f"{result.stderr.strip()}"
            )
            return False
        return True

    def checkout(self) -> Path:
        """Check out the state branch into the worktree directory.

        Returns:
            Path of the worktree directory
        """
        path = self._worktree_path()
        if (path / ".git").exists():
            logger.info(f"State branch already checked out at {path}")
            return path

        if self._fetch_remote_branch():
            self._git(
                "worktree",
                "add",
                "-B",
                self.branch,
                str(path),
                f"{self.remote}/{self.branch}",
            )
        else:
            self._git("worktree", "add", "--detach", str(path))
            self._git("checkout", "--orphan", self.branch, cwd=path)
            self._git("rm", "-r", "-f", "--quiet", "--ignore-unmatch", ".", cwd=path)

        logger.info(f"Checked out state branch {self.branch} at {path}")
        return path

    def commit_and_push(self, message: str = DEFAULT_COMMIT_MESSAGE) -> bool:
        """Commit any changes in the worktree and push them to the remote.

        Returns:
            True if a commit was pushed, False when there was nothing to commit
        """
        path = self._worktree_path()
        self._git("add", "--all", cwd=path)

        status = self._git("status", "--porcelain", cwd=path)
        if not status.stdout.strip():
            logger.info("Vote state unchanged, nothing to commit")
            return False

        self._git("commit", "--quiet", "-m", message, cwd=path)
        self._git("push", self.remote, f"HEAD:refs/heads/{self.branch}", cwd=path)
        logger.info(f"Pushed vote state to {self.remote}/{self.branch}")
        return True
