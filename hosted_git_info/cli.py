import sys
from typing import Optional

from hosted_git_info.clients.git_client import GitClient
from hosted_git_info.config import get_default_remote
from hosted_git_info.errors import ParseError
from hosted_git_info.models import HostedGit
from hosted_git_info.utils import console, display_hosted_git_table, setup_logging


def show_url(url: str, default_only: bool = False) -> None:
    logger = setup_logging()

    try:
        hosted = HostedGit.parse(url)
        _show(url, hosted, default_only)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        sys.exit(1)


def show_remote(remote: Optional[str] = None, default_only: bool = False) -> None:
    logger = setup_logging()

    try:
        git_client = GitClient()
        logger.info("Initialized git client")

        name = remote or get_default_remote(git_client.repo)
        url = git_client.get_remote_url(name)
        logger.info(f"Remote {name}: {url}")

        hosted = HostedGit.parse(url)
        _show(name, hosted, default_only)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        sys.exit(1)


def show_all_remotes() -> None:
    logger = setup_logging()

    try:
        git_client = GitClient()
        logger.info("Initialized git client")

        entries = []
        for name, url in git_client.list_remotes():
            try:
                entries.append((name, HostedGit.parse(url)))
            except ParseError as e:
                logger.warning(f"Skipping remote {name}: {e}")

        display_hosted_git_table(entries)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        sys.exit(1)


def _show(source: str, hosted: HostedGit, default_only: bool) -> None:
    if default_only:
        console.print(hosted.get_default_representation(), markup=False, highlight=False)
    else:
        display_hosted_git_table([(source, hosted)])
