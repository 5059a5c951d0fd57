"""Octokit client facade.

One method per API operation. Each builds its router, sends it through the
injected :class:`~gh_octokit.http.HTTPSession`, decodes the payload into
models and delivers the result via :func:`~gh_octokit.response.deliver`.

Methods must be called from a running event loop. They return the
in-flight task immediately; ``await`` it for the Response, pass
``completion=`` to be called back, or ``cancel()`` it to abort::

    async with Octokit() as octokit:
        response = await octokit.repository("octocat", "Hello-World")
        match response:
            case Success(repo):
                print(repo.full_name)
            case Failure(error):
                print(f"failed: {error}")
"""

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any, TypeVar

from gh_octokit.auth import GitHubAuth
from gh_octokit.config import Configuration
from gh_octokit.http import HttpxSession, HTTPSession
from gh_octokit.models import (
    Direction,
    Issue,
    IssueComment,
    Repository,
    Sort,
    State,
)
from gh_octokit.response import Completion, Response, deliver
from gh_octokit.routing import (
    DeleteComment,
    PatchComment,
    PatchIssue,
    PostComment,
    PostIssue,
    ReadAuthenticatedIssues,
    ReadAuthenticatedRepositories,
    ReadComment,
    ReadCommitComments,
    ReadComments,
    ReadIssue,
    ReadIssueComments,
    ReadIssues,
    ReadRepositories,
    ReadRepository,
    Router,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _discard(data: Any) -> None:
    return None


class Octokit:
    """GitHub REST API client."""

    def __init__(
        self,
        configuration: Configuration | None = None,
        session: HTTPSession | None = None,
        auth: GitHubAuth | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            configuration: API endpoint, credentials and timeouts. Defaults
                to ``Configuration()``.
            session: Transport. Defaults to an :class:`HttpxSession` owned
                (and closed) by this client.
            auth: Token resolver. Defaults to one built from
                ``configuration.auth``.

        Raises:
            AuthenticationError: If the configured token is malformed.
        """
        self.configuration = configuration or Configuration()
        self._auth = auth or GitHubAuth(
            token=self.configuration.auth.token,
            token_env=self.configuration.auth.token_env,
        )
        self._owns_session = session is None
        self._session: HTTPSession = session or HttpxSession(timeout=self.configuration.timeout)

    def _get_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": self.configuration.api_version,
            "User-Agent": self.configuration.user_agent,
        }
        headers.update(self._auth.get_authorization_header())
        return headers

    def _send(
        self,
        router: Router,
        decode: Callable[[Any], T],
        completion: Completion[T] | None,
    ) -> "asyncio.Task[Response[T]]":
        request = router.build_request(self.configuration, self._get_headers())
        logger.debug(
            "Dispatching %s %s params=%s", request.method.value, request.url, request.params
        )
        call = self._session.send(
            request.method.value,
            request.url,
            params=request.params,
            json=request.json,
            headers=request.headers,
        )
        return deliver(call, decode, completion)

    # Repositories

    def repositories(
        self,
        owner: str | None = None,
        page: str = "1",
        per_page: str = "100",
        *,
        completion: Completion[list[Repository]] | None = None,
    ) -> "asyncio.Task[Response[list[Repository]]]":
        """Fetch the repositories of a user or organization.

        Args:
            owner: Account owning the repositories. None lists the
                repositories of the authenticated user.
            page: Page number.
            per_page: Repositories per page.
            completion: Called once with the outcome.
        """
        router: Router = (
            ReadRepositories(owner, page, per_page)
            if owner is not None
            else ReadAuthenticatedRepositories(page, per_page)
        )
        return self._send(router, Repository.from_json_list, completion)

    def repository(
        self,
        owner: str,
        name: str,
        *,
        completion: Completion[Repository] | None = None,
    ) -> "asyncio.Task[Response[Repository]]":
        """Fetch a single repository."""
        return self._send(ReadRepository(owner, name), Repository.from_json, completion)

    # Issues

    def my_issues(
        self,
        state: State = State.OPEN,
        page: str = "1",
        per_page: str = "100",
        *,
        completion: Completion[list[Issue]] | None = None,
    ) -> "asyncio.Task[Response[list[Issue]]]":
        """Fetch issues assigned to the authenticated user."""
        router = ReadAuthenticatedIssues(page, per_page, state)
        return self._send(router, Issue.from_json_list, completion)

    def issue(
        self,
        owner: str,
        repository: str,
        number: int,
        *,
        completion: Completion[Issue] | None = None,
    ) -> "asyncio.Task[Response[Issue]]":
        return self._send(ReadIssue(owner, repository, number), Issue.from_json, completion)

    def issues(
        self,
        owner: str,
        repository: str,
        state: State | None = State.OPEN,
        page: int | None = None,
        per_page: int | None = None,
        since: datetime | None = None,
        sort: Sort | None = None,
        direction: Direction | None = None,
        *,
        completion: Completion[list[Issue]] | None = None,
    ) -> "asyncio.Task[Response[list[Issue]]]":
        """Fetch the issues of a repository.

        Args:
            owner: Account owning the repository.
            repository: Repository name.
            state: Issue state filter. None leaves it to GitHub (open).
            page: Page number.
            per_page: Issues per page.
            since: Only issues updated at or after this time.
            sort: Sort key.
            direction: Sort direction.
            completion: Called once with the outcome.
        """
        router = ReadIssues(owner, repository, state, page, per_page, since, sort, direction)
        return self._send(router, Issue.from_json_list, completion)

    def post_issue(
        self,
        owner: str,
        repository: str,
        title: str,
        body: str | None = None,
        assignee: str | None = None,
        *,
        completion: Completion[Issue] | None = None,
    ) -> "asyncio.Task[Response[Issue]]":
        """Create an issue.

        ``assignee`` is ignored by GitHub unless the caller has push access.
        """
        router = PostIssue(owner, repository, title, body, assignee)
        return self._send(router, Issue.from_json, completion)

    def patch_issue(
        self,
        owner: str,
        repository: str,
        number: int,
        title: str | None = None,
        body: str | None = None,
        assignee: str | None = None,
        state: State | None = None,
        *,
        completion: Completion[Issue] | None = None,
    ) -> "asyncio.Task[Response[Issue]]":
        """Edit an issue. Fields left as None are not changed."""
        router = PatchIssue(owner, repository, number, title, body, assignee, state)
        return self._send(router, Issue.from_json, completion)

    # Comments

    def comment(
        self,
        owner: str,
        repository: str,
        id: int,
        *,
        completion: Completion[IssueComment] | None = None,
    ) -> "asyncio.Task[Response[IssueComment]]":
        return self._send(
            ReadComment(owner, repository, id), IssueComment.from_json, completion
        )

    def comments(
        self,
        owner: str,
        repository: str,
        page: str = "1",
        per_page: str = "100",
        since: datetime | None = None,
        sort: Sort | None = None,
        direction: Direction | None = None,
        *,
        completion: Completion[list[IssueComment]] | None = None,
    ) -> "asyncio.Task[Response[list[IssueComment]]]":
        """Fetch issue comments across all issues of a repository."""
        router = ReadComments(owner, repository, page, per_page, since, sort, direction)
        return self._send(router, IssueComment.from_json_list, completion)

    def commit_comments(
        self,
        owner: str,
        repository: str,
        page: str = "1",
        per_page: str = "100",
        *,
        completion: Completion[list[IssueComment]] | None = None,
    ) -> "asyncio.Task[Response[list[IssueComment]]]":
        """Fetch commit comments across all commits of a repository."""
        router = ReadCommitComments(owner, repository, page, per_page)
        return self._send(router, IssueComment.from_json_list, completion)

    def issue_comments(
        self,
        owner: str,
        repository: str,
        number: int | str,
        page: int | None = None,
        per_page: int | None = None,
        since: datetime | None = None,
        *,
        completion: Completion[list[IssueComment]] | None = None,
    ) -> "asyncio.Task[Response[list[IssueComment]]]":
        """Fetch the comments of one issue."""
        router = ReadIssueComments(owner, repository, number, page, per_page, since)
        return self._send(router, IssueComment.from_json_list, completion)

    def post_comment(
        self,
        owner: str,
        repository: str,
        number: int | str,
        body: str,
        *,
        completion: Completion[IssueComment] | None = None,
    ) -> "asyncio.Task[Response[IssueComment]]":
        router = PostComment(owner, repository, number, body)
        return self._send(router, IssueComment.from_json, completion)

    def patch_comment(
        self,
        owner: str,
        repository: str,
        id: int,
        body: str,
        *,
        completion: Completion[IssueComment] | None = None,
    ) -> "asyncio.Task[Response[IssueComment]]":
        router = PatchComment(owner, repository, id, body)
        return self._send(router, IssueComment.from_json, completion)

    def delete_comment(
        self,
        owner: str,
        repository: str,
        id: int,
        *,
        completion: Completion[None] | None = None,
    ) -> "asyncio.Task[Response[None]]":
        """Delete a comment. Success carries None."""
        return self._send(DeleteComment(owner, repository, id), _discard, completion)

    async def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session and isinstance(self._session, HttpxSession):
            await self._session.close()

    async def __aenter__(self) -> "Octokit":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
