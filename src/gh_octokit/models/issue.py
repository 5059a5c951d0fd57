"""Issue model.

GitHub's issues endpoints also return pull requests; those decode as
ordinary issues here.
"""

from typing import ClassVar

from pydantic import AnyUrl, StrictBool, StrictInt, StrictStr

from gh_octokit.models.base import GitHubModel, Timestamp
from gh_octokit.models.enums import State
from gh_octokit.models.label import Label
from gh_octokit.models.milestone import Milestone
from gh_octokit.models.user import User


class Issue(GitHubModel):
    NESTED_FIELDS: ClassVar[tuple[str, ...]] = ("user", "assignee", "milestone", "closed_by")
    NESTED_LISTS: ClassVar[tuple[str, ...]] = ("labels",)

    url: AnyUrl | None = None
    repository_url: AnyUrl | None = None
    labels_url: AnyUrl | None = None
    comments_url: AnyUrl | None = None
    events_url: AnyUrl | None = None
    html_url: AnyUrl | None = None
    number: StrictInt | None = None
    state: State | None = None
    title: StrictStr | None = None
    body: StrictStr | None = None
    user: User | None = None
    labels: list[Label] | None = None
    assignee: User | None = None
    milestone: Milestone | None = None
    locked: StrictBool | None = None
    comments: StrictInt | None = None
    closed_at: Timestamp = None
    created_at: Timestamp = None
    updated_at: Timestamp = None
    closed_by: User | None = None
