from typing import Optional

from git import GitConfigParser, Repo

DEFAULT_REMOTE = "origin"


def get_git_config(
    section: str, option: str, default: str = "", repo: Optional[Repo] = None
) -> str:
    try:
        # A repository reader also sees the user and system level files
        config = repo.config_reader() if repo is not None else GitConfigParser()
        return str(config.get_value(section, option, default=default))
    except Exception:
        return default


def get_default_remote(repo: Optional[Repo] = None) -> str:
    return get_git_config("hostedinfo", "remote", repo=repo) or DEFAULT_REMOTE
