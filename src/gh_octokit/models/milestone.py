"""Repository milestone."""

from typing import ClassVar

from pydantic import AnyUrl, Field, StrictInt, StrictStr

from gh_octokit.models.base import GitHubModel, Timestamp
from gh_octokit.models.enums import State
from gh_octokit.models.user import User


class Milestone(GitHubModel):
    NESTED_FIELDS: ClassVar[tuple[str, ...]] = ("creator",)

    number: StrictInt | None = None
    url: AnyUrl | None = None
    html_url: AnyUrl | None = None
    labels_url: AnyUrl | None = None
    state: State | None = None
    title: StrictStr | None = None
    description: StrictStr | None = None
    creator: User | None = None
    open_issues: StrictInt | None = None
    closed_issues: StrictInt | None = None
    created_at: Timestamp = None
    updated_at: Timestamp = None
    closed_at: Timestamp = None
    due_on: Timestamp = Field(default=None, description="Due date, midnight UTC on the wire")
