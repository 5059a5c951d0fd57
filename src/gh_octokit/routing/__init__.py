"""Operation variants mapping API calls to HTTP requests."""

from gh_octokit.routing.base import (
    HTTPEncoding,
    HTTPMethod,
    PreparedRequest,
    Router,
)
from gh_octokit.routing.comments import (
    DeleteComment,
    PatchComment,
    PostComment,
    ReadComment,
    ReadCommitComments,
    ReadComments,
    ReadIssueComments,
)
from gh_octokit.routing.issues import (
    PatchIssue,
    PostIssue,
    ReadAuthenticatedIssues,
    ReadIssue,
    ReadIssues,
)
from gh_octokit.routing.repositories import (
    ReadAuthenticatedRepositories,
    ReadRepositories,
    ReadRepository,
)

__all__ = [
    "DeleteComment",
    "HTTPEncoding",
    "HTTPMethod",
    "PatchComment",
    "PatchIssue",
    "PostComment",
    "PostIssue",
    "PreparedRequest",
    "ReadAuthenticatedIssues",
    "ReadAuthenticatedRepositories",
    "ReadComment",
    "ReadCommitComments",
    "ReadComments",
    "ReadIssue",
    "ReadIssueComments",
    "ReadIssues",
    "ReadRepositories",
    "ReadRepository",
    "Router",
]
