"""Typed async client for the GitHub REST API.

Models for repositories, issues and issue comments, request routers that
map each call to an HTTP request, and a facade that delivers decoded
results through a callback and an awaitable task.
"""

__version__ = "0.1.0"

from gh_octokit.client import Octokit  # noqa: E402
from gh_octokit.config import AuthConfig, Configuration, load_config  # noqa: E402
from gh_octokit.http import (  # noqa: E402
    GitHubHTTPError,
    GitHubResponse,
    GitHubStatusError,
    GitHubTimeoutError,
    HttpxSession,
    HTTPSession,
    RequestCancelled,
)
from gh_octokit.models import (  # noqa: E402
    Direction,
    Issue,
    IssueComment,
    Label,
    Milestone,
    Repository,
    Sort,
    State,
    User,
)
from gh_octokit.response import Failure, Response, Success  # noqa: E402

__all__ = [
    "AuthConfig",
    "Configuration",
    "Direction",
    "Failure",
    "GitHubHTTPError",
    "GitHubResponse",
    "GitHubStatusError",
    "GitHubTimeoutError",
    "HTTPSession",
    "HttpxSession",
    "Issue",
    "IssueComment",
    "Label",
    "Milestone",
    "Octokit",
    "Repository",
    "RequestCancelled",
    "Response",
    "Sort",
    "State",
    "Success",
    "User",
    "__version__",
    "load_config",
]
