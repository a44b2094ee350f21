"""Extract git history via subprocess."""

import subprocess
from pathlib import Path
from typing import Optional

from ..exceptions import GitCommandError, NotAGitRepositoryError
from ..logging_config import get_logger
from .models import Commit
from .parser import LOG_FORMAT, SEPARATOR, parse_raw_log

logger = get_logger(__name__)


class GitExtractor:
    """Run ``git log --numstat`` and parse it into Commit records."""

    def __init__(
        self,
        repo_path: str,
        max_commits: int = 5000,
        since: Optional[str] = None,
        until: Optional[str] = None,
    ):
        self.repo_path = str(Path(repo_path).resolve())
        self.max_commits = max_commits
        self.since = since
        self.until = until

    def extract(self) -> list[Commit]:
        """Return commits newest first.

        Raises:
            NotAGitRepositoryError: If repo_path is not inside a work tree
            GitCommandError: If git is unavailable or ``git log`` fails
        """
        if not Path(self.repo_path).is_dir() or not self._is_git_repo():
            raise NotAGitRepositoryError(self.repo_path)

        raw = self._run_git_log()
        commits = parse_raw_log(raw)
        logger.info("Parsed %d commits from %s", len(commits), self.repo_path)
        return commits

    def build_command(self) -> list[str]:
        cmd = [
            "git",
            "-C",
            self.repo_path,
            "log",
            f"--format={LOG_FORMAT}",
            "--numstat",
            f"--max-count={self.max_commits}",
        ]
        if self.since:
            cmd.append(f"--since={self.since}")
        if self.until:
            cmd.append(f"--until={self.until}")
        return cmd

    def _is_git_repo(self) -> bool:
        try:
            result = subprocess.run(
                ["git", "-C", self.repo_path, "rev-parse", "--is-inside-work-tree"],
                capture_output=True,
                text=True,
                timeout=5,
            )
        except FileNotFoundError:
            raise GitCommandError("git rev-parse", "git executable not found")
        except subprocess.TimeoutExpired:
            raise GitCommandError("git rev-parse", "timed out")
        return result.returncode == 0 and result.stdout.strip() == "true"

    # Maximum git log output size (50MB) to prevent OOM on huge repos
    _MAX_OUTPUT_BYTES = 50 * 1024 * 1024

    def _run_git_log(self) -> str:
        cmd = self.build_command()
        try:
            # Stream stdout so unbounded history never lands in memory at once
            proc = subprocess.Popen(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except FileNotFoundError:
            raise GitCommandError("git log", "git executable not found")

        try:
            chunks = []
            total_size = 0
            truncated = False
            stdout = proc.stdout
            if stdout is None:
                raise GitCommandError("git log", "no output stream")
            while True:
                chunk = stdout.read(1024 * 1024)  # 1MB chunks
                if not chunk:
                    break
                total_size += len(chunk)
                if total_size > self._MAX_OUTPUT_BYTES:
                    logger.warning(
                        "git log output exceeded %dMB limit, truncating",
                        self._MAX_OUTPUT_BYTES // (1024 * 1024),
                    )
                    proc.kill()
                    truncated = True
                    break
                chunks.append(chunk)

            try:
                proc.wait(timeout=30)
            except subprocess.TimeoutExpired:
                proc.kill()
                raise GitCommandError("git log", "timed out")

            if proc.returncode != 0 and not truncated:
                stderr = proc.stderr.read().strip() if proc.stderr else ""
                # A freshly initialised repository has no HEAD yet
                if "does not have any commits" in stderr:
                    logger.info("Repository has no commits yet")
                    return ""
                raise GitCommandError("git log", stderr or f"exit code {proc.returncode}")

            raw = "".join(chunks)
            if truncated:
                # The last record may continue in the discarded chunk
                cut = raw.rfind(SEPARATOR)
                raw = raw[:cut] if cut >= 0 else ""
            return raw
        finally:
            if proc.stdout:
                proc.stdout.close()
            if proc.stderr:
                proc.stderr.close()
