"""Git Repository - Read staged changes and create commits."""

import subprocess
from abc import ABC, abstractmethod
from pathlib import Path


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class VersionControl(ABC):
    """What the commit flow needs from a version-control tool."""

    @abstractmethod
    def staged_diff(self) -> str:
        pass

    @abstractmethod
    def commit(self, message: str, edit: bool = False) -> None:
        pass


class GitRepository(VersionControl):
    """Runs git inside a working directory."""

    def __init__(self, path: str | Path | None = None, git: str = 'git'):
        self.path = Path(path) if path is not None else Path.cwd()
        self.git = git

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout decoded as UTF-8."""
        try:
            result = subprocess.run(
                [self.git, *args],
                cwd=self.path,
                capture_output=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.decode('utf-8', errors='replace').strip() if e.stderr else ""
            raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}")
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")
        except OSError as e:
            raise GitError(f"Could not run git: {e}")

        try:
            return result.stdout.decode('utf-8')
        except UnicodeDecodeError as e:
            raise GitError(f"Output of git {' '.join(args)} is not valid UTF-8: {e}")

    def staged_diff(self) -> str:
        """Diff between the index and HEAD, limited to this directory."""
        return self._run_git('diff', '--staged', '--', '.')

    def commit(self, message: str, edit: bool = False) -> None:
        """Commit staged changes with message.

        With edit=True git opens the editor pre-filled with the message, so
        stdin and stdout stay attached to the terminal.
        """
        args = ['commit']
        if edit:
            args.append('-e')
        args.extend(['-m', message])

        try:
            if edit:
                result = subprocess.run(
                    [self.git, *args],
                    cwd=self.path,
                    stderr=subprocess.PIPE,
                )
            else:
                result = subprocess.run(
                    [self.git, *args],
                    cwd=self.path,
                    capture_output=True,
                )
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")
        except OSError as e:
            raise GitError(f"Could not run git: {e}")

        if result.returncode != 0:
            stderr = result.stderr.decode('utf-8', errors='replace') if result.stderr else ""
            raise GitError(f"Failed to commit: {stderr}")
