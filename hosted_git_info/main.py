from typing import Optional

import click

from hosted_git_info.cli import show_all_remotes, show_remote, show_url


@click.command()
@click.argument("url", required=False)
@click.option(
    "-r",
    "--remote",
    metavar="NAME",
    help="Read the locator from this remote of the current repository",
)
@click.option(
    "-a",
    "--all",
    "all_remotes",
    is_flag=True,
    help="Show every remote of the current repository",
)
@click.option(
    "-d",
    "--default-representation",
    "default_only",
    is_flag=True,
    help="Only print the default representation",
)
def hosted_git_info(
    url: Optional[str],
    remote: Optional[str],
    all_remotes: bool,
    default_only: bool,
) -> None:
    handle_show(url=url, remote=remote, all_remotes=all_remotes, default_only=default_only)


def handle_show(
    url: Optional[str],
    remote: Optional[str],
    all_remotes: bool,
    default_only: bool,
) -> None:
    if url is not None and (remote is not None or all_remotes):
        raise click.UsageError("URL cannot be used with --remote or --all")

    if all_remotes and remote is not None:
        raise click.UsageError("--remote and --all are mutually exclusive flags")

    if all_remotes and default_only:
        raise click.UsageError("--default-representation cannot be used with --all")

    if url is not None:
        show_url(url, default_only)
    elif all_remotes:
        show_all_remotes()
    else:
        show_remote(remote, default_only)
