"""Git Operations Package"""

from commitgen.git.repository import GitRepository, GitError, VersionControl

__all__ = [
    "GitRepository",
    "GitError",
    "VersionControl",
]
