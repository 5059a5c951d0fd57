"""Issue comment operations."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar

from gh_octokit.models.enums import Direction, Sort
from gh_octokit.routing.base import HTTPEncoding, HTTPMethod, Router, compact
from gh_octokit.time import format_rfc3339


def _comment_path(owner: str, repository: str, comment_id: int) -> str:
    return f"repos/{owner}/{repository}/issues/comments/{comment_id}"


@dataclass(frozen=True)
class ReadComment(Router):
    owner: str
    repository: str
    id: int

    @property
    def path(self) -> str:
        return _comment_path(self.owner, self.repository, self.id)


@dataclass(frozen=True)
class ReadComments(Router):
    """Issue comments across every issue of a repository."""

    owner: str
    repository: str
    page: str = "1"
    per_page: str = "100"
    since: datetime | None = None
    sort: Sort | None = None
    direction: Direction | None = None

    @property
    def path(self) -> str:
        return f"repos/{self.owner}/{self.repository}/issues/comments"

    @property
    def params(self) -> dict[str, Any]:
        return compact(
            page=self.page,
            per_page=self.per_page,
            since=format_rfc3339(self.since) if self.since else None,
            sort=self.sort,
            direction=self.direction,
        )


@dataclass(frozen=True)
class ReadCommitComments(Router):
    """Commit comments across every commit of a repository.

    The payload shares the body, author, URL and timestamp fields of an
    issue comment.
    """

    owner: str
    repository: str
    page: str = "1"
    per_page: str = "100"

    @property
    def path(self) -> str:
        return f"repos/{self.owner}/{self.repository}/comments"

    @property
    def params(self) -> dict[str, Any]:
        return {"page": self.page, "per_page": self.per_page}


@dataclass(frozen=True)
class ReadIssueComments(Router):
    owner: str
    repository: str
    number: int | str
    page: int | None = None
    per_page: int | None = None
    since: datetime | None = None

    @property
    def path(self) -> str:
        return f"repos/{self.owner}/{self.repository}/issues/{self.number}/comments"

    @property
    def params(self) -> dict[str, Any]:
        return compact(
            page=self.page,
            per_page=self.per_page,
            since=format_rfc3339(self.since) if self.since else None,
        )


@dataclass(frozen=True)
class PostComment(Router):
    method: ClassVar[HTTPMethod] = HTTPMethod.POST
    encoding: ClassVar[HTTPEncoding] = HTTPEncoding.JSON

    owner: str
    repository: str
    number: int | str
    body: str

    @property
    def path(self) -> str:
        return f"repos/{self.owner}/{self.repository}/issues/{self.number}/comments"

    @property
    def params(self) -> dict[str, Any]:
        return {"body": self.body}


@dataclass(frozen=True)
class PatchComment(Router):
    method: ClassVar[HTTPMethod] = HTTPMethod.PATCH
    encoding: ClassVar[HTTPEncoding] = HTTPEncoding.JSON

    owner: str
    repository: str
    id: int
    body: str

    @property
    def path(self) -> str:
        return _comment_path(self.owner, self.repository, self.id)

    @property
    def params(self) -> dict[str, Any]:
        return {"body": self.body}


@dataclass(frozen=True)
class DeleteComment(Router):
    method: ClassVar[HTTPMethod] = HTTPMethod.DELETE

    owner: str
    repository: str
    id: int

    @property
    def path(self) -> str:
        return _comment_path(self.owner, self.repository, self.id)
