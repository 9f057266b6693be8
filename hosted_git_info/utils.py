import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from hosted_git_info.models import HostedGit

console = Console()


def setup_logging() -> logging.Logger:
    logger = logging.getLogger("hosted-git-info")
    logger.setLevel(logging.INFO)

    logger.handlers.clear()

    handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        show_level=True,
        markup=True,
        rich_tracebacks=True,
        omit_repeated_times=False,
    )

    logger.addHandler(handler)
    return logger


def mask_password(password: Optional[str]) -> str:
    if password is None:
        return ""
    return "*" * 8


def display_hosted_git_table(entries: list[tuple[str, HostedGit]]) -> None:
    if not entries:
        console.print("[yellow]No hosted git remotes found[/yellow]")
        return

    table = Table(title="Hosted git remotes", show_header=True, header_style="bold magenta")
    table.add_column("Source", style="cyan")
    table.add_column("Host", style="green")
    table.add_column("User", style="white")
    table.add_column("Password", style="red")
    table.add_column("Project", style="white")
    table.add_column("Committish", style="yellow")
    table.add_column("Protocol", style="blue")
    table.add_column("Default", style="bold blue")

    for source, hosted in entries:
        table.add_row(
            source,
            hosted.host.value,
            hosted.user,
            mask_password(hosted.password),
            hosted.project,
            hosted.committish or "",
            hosted.protocol.value,
            hosted.get_default_representation(),
        )

    console.print(table)
