"""Issue operations."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar

from gh_octokit.models.enums import Direction, Sort, State
from gh_octokit.routing.base import HTTPEncoding, HTTPMethod, Router, compact
from gh_octokit.time import format_rfc3339


@dataclass(frozen=True)
class ReadAuthenticatedIssues(Router):
    """Issues assigned to the authenticated user across all repositories."""

    page: str = "1"
    per_page: str = "100"
    state: State = State.OPEN

    @property
    def path(self) -> str:
        return "issues"

    @property
    def params(self) -> dict[str, Any]:
        return compact(page=self.page, per_page=self.per_page, state=self.state)


@dataclass(frozen=True)
class ReadIssue(Router):
    owner: str
    repository: str
    number: int

    @property
    def path(self) -> str:
        return f"repos/{self.owner}/{self.repository}/issues/{self.number}"


@dataclass(frozen=True)
class ReadIssues(Router):
    owner: str
    repository: str
    state: State | None = State.OPEN
    page: int | None = None
    per_page: int | None = None
    since: datetime | None = None
    sort: Sort | None = None
    direction: Direction | None = None

    @property
    def path(self) -> str:
        return f"repos/{self.owner}/{self.repository}/issues"

    @property
    def params(self) -> dict[str, Any]:
        return compact(
            state=self.state,
            page=self.page,
            per_page=self.per_page,
            since=format_rfc3339(self.since) if self.since else None,
            sort=self.sort,
            direction=self.direction,
        )


@dataclass(frozen=True)
class PostIssue(Router):
    method: ClassVar[HTTPMethod] = HTTPMethod.POST
    encoding: ClassVar[HTTPEncoding] = HTTPEncoding.JSON

    owner: str
    repository: str
    title: str
    body: str | None = None
    assignee: str | None = None

    @property
    def path(self) -> str:
        return f"repos/{self.owner}/{self.repository}/issues"

    @property
    def params(self) -> dict[str, Any]:
        return compact(title=self.title, body=self.body, assignee=self.assignee)


@dataclass(frozen=True)
class PatchIssue(Router):
    """Edit an issue. Only the given fields are sent."""

    method: ClassVar[HTTPMethod] = HTTPMethod.PATCH
    encoding: ClassVar[HTTPEncoding] = HTTPEncoding.JSON

    owner: str
    repository: str
    number: int
    title: str | None = None
    body: str | None = None
    assignee: str | None = None
    state: State | None = None

    @property
    def path(self) -> str:
        return f"repos/{self.owner}/{self.repository}/issues/{self.number}"

    @property
    def params(self) -> dict[str, Any]:
        return compact(title=self.title, body=self.body, assignee=self.assignee, state=self.state)
