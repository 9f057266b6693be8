from pathlib import Path
from typing import Optional

from git import Repo


class GitClient:
    """Read remote locators from a local git repository."""

    def __init__(self, repo_path: Optional[Path] = None):
        self.repo_path = repo_path or Path.cwd()
        try:
            self.repo = Repo(self.repo_path, search_parent_directories=True)
        except Exception as e:
            raise ValueError(f"Not a git repository: {self.repo_path}") from e

    def get_remote_url(self, name: str = "origin") -> str:
        try:
            return self.repo.remote(name).url
        except ValueError as e:
            raise ValueError(f"Could not get {name} remote URL") from e

    def list_remotes(self) -> list[tuple[str, str]]:
        return [(remote.name, remote.url) for remote in self.repo.remotes]
