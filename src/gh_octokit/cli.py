"""Command line access to the read operations.

Handy for checking what a call returns:

    gh-octokit repos octocat
    gh-octokit issue octocat Hello-World 1347
    gh-octokit comments octocat Hello-World --issue 1347
"""

import asyncio
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from gh_octokit import __version__
from gh_octokit.auth import AuthenticationError
from gh_octokit.client import Octokit
from gh_octokit.config import Configuration, load_config
from gh_octokit.logging import setup_logging
from gh_octokit.models import GitHubModel, Issue, IssueComment, Repository, State
from gh_octokit.response import Failure, Response

console = Console()

Call = Callable[[Octokit], Awaitable[Response[Any]]]


def _fetch(ctx: click.Context, call: Call) -> Any:
    """Run one client call and return its value, aborting on failure."""
    configuration: Configuration = ctx.obj["config"]

    async def _run() -> Response[Any]:
        async with Octokit(configuration) as octokit:
            return await call(octokit)

    try:
        response = asyncio.run(_run())
    except AuthenticationError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise click.Abort() from e

    if isinstance(response, Failure):
        console.print(f"[bold red]Error:[/bold red] {response.error}")
        ctx.exit(1)
    return response.unwrap()


def _print_model(model: GitHubModel) -> None:
    console.print_json(data=model.model_dump(mode="json", exclude_none=True))


def _first_line(text: str | None, width: int = 60) -> str:
    lines = (text or "").strip().splitlines()
    line = lines[0] if lines else ""
    return line if len(line) <= width else line[: width - 1] + "…"


@click.group()
@click.version_option(version=__version__, prog_name="gh-octokit")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, default=False, help="Emit logs as JSON lines")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to a YAML configuration file",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, json_logs: bool, config_path: Path | None) -> None:
    """Query the GitHub REST API.

    The token is read from GITHUB_TOKEN unless the configuration file says
    otherwise. Without a token requests are anonymous.
    """
    ctx.ensure_object(dict)
    setup_logging(verbose=verbose, json_format=json_logs)
    ctx.obj["config"] = load_config(config_path) if config_path else Configuration()


@main.command()
@click.argument("owner", required=False)
@click.option("--page", default="1", show_default=True)
@click.option("--per-page", default="100", show_default=True)
@click.pass_context
def repos(ctx: click.Context, owner: str | None, page: str, per_page: str) -> None:
    """List repositories of OWNER, or of the authenticated user."""
    repositories: list[Repository] = _fetch(
        ctx, lambda octokit: octokit.repositories(owner, page, per_page)
    )

    table = Table(title=f"Repositories of {owner or 'authenticated user'}")
    table.add_column("Name", style="cyan")
    table.add_column("Private")
    table.add_column("Fork")
    table.add_column("Description")
    for repo in repositories:
        table.add_row(
            repo.full_name or repo.name or "?",
            "yes" if repo.is_private else "no",
            "yes" if repo.is_fork else "no",
            _first_line(repo.description),
        )
    console.print(table)


@main.command()
@click.argument("owner")
@click.argument("name")
@click.pass_context
def repo(ctx: click.Context, owner: str, name: str) -> None:
    """Show one repository."""
    _print_model(_fetch(ctx, lambda octokit: octokit.repository(owner, name)))


@main.command()
@click.argument("owner")
@click.argument("repository")
@click.option(
    "--state",
    type=click.Choice([s.value for s in State]),
    default=State.OPEN.value,
    show_default=True,
)
@click.pass_context
def issues(ctx: click.Context, owner: str, repository: str, state: str) -> None:
    """List issues of a repository."""
    found: list[Issue] = _fetch(
        ctx, lambda octokit: octokit.issues(owner, repository, state=State(state))
    )

    table = Table(title=f"Issues of {owner}/{repository} ({state})")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("State")
    table.add_column("Title")
    table.add_column("Author")
    for issue in found:
        table.add_row(
            str(issue.number),
            issue.state.value if issue.state else "",
            _first_line(issue.title),
            issue.user.login if issue.user and issue.user.login else "",
        )
    console.print(table)


@main.command()
@click.argument("owner")
@click.argument("repository")
@click.argument("number", type=int)
@click.pass_context
def issue(ctx: click.Context, owner: str, repository: str, number: int) -> None:
    """Show one issue."""
    _print_model(_fetch(ctx, lambda octokit: octokit.issue(owner, repository, number)))


@main.command()
@click.argument("owner")
@click.argument("repository")
@click.option("--issue", "number", type=int, default=None, help="Only comments of this issue")
@click.pass_context
def comments(ctx: click.Context, owner: str, repository: str, number: int | None) -> None:
    """List issue comments of a repository."""
    if number is None:
        found: list[IssueComment] = _fetch(
            ctx, lambda octokit: octokit.comments(owner, repository)
        )
    else:
        found = _fetch(ctx, lambda octokit: octokit.issue_comments(owner, repository, number))

    table = Table(title=f"Comments on {owner}/{repository}")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Author")
    table.add_column("Created")
    table.add_column("Body")
    for item in found:
        table.add_row(
            str(item.id),
            item.user.login if item.user and item.user.login else "",
            item.created_at.isoformat() if item.created_at else "",
            _first_line(item.body),
        )
    console.print(table)


@main.command()
@click.argument("owner")
@click.argument("repository")
@click.argument("comment_id", type=int)
@click.pass_context
def comment(ctx: click.Context, owner: str, repository: str, comment_id: int) -> None:
    """Show one issue comment."""
    _print_model(_fetch(ctx, lambda octokit: octokit.comment(owner, repository, comment_id)))


if __name__ == "__main__":
    main()
