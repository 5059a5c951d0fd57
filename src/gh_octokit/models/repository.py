"""Repository model."""

from typing import ClassVar

from pydantic import AnyUrl, Field, StrictBool, StrictInt, StrictStr

from gh_octokit.models.base import GitHubModel, Timestamp
from gh_octokit.models.user import User


class Repository(GitHubModel):
    """Repository as returned by the repos endpoints.

    ``owner`` is always a User; without an identifier it is the sentinel
    user. ``has_issues``, ``is_private`` and ``size`` default to False/0
    rather than None.
    """

    NESTED_FIELDS: ClassVar[tuple[str, ...]] = ("owner",)

    owner: User = Field(default_factory=User)
    name: StrictStr | None = None
    full_name: StrictStr | None = None
    description: StrictStr | None = None
    url: AnyUrl | None = None
    html_url: AnyUrl | None = None
    git_url: AnyUrl | None = None
    # scp-style "git@github.com:owner/repo.git" is not a URL
    ssh_url: StrictStr | None = None
    clone_url: AnyUrl | None = None
    has_issues: StrictBool = False
    is_private: StrictBool = Field(default=False, alias="private")
    is_fork: StrictBool | None = Field(default=None, alias="fork")
    size: StrictInt = 0
    last_push: Timestamp = Field(default=None, alias="pushed_at")
    created_at: Timestamp = None
    updated_at: Timestamp = None
