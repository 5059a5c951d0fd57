"""Issue comment model.

Named IssueComment because GitHub also has commit and review comments with
a different shape.
"""

from typing import ClassVar

from pydantic import AnyUrl, StrictStr

from gh_octokit.models.base import GitHubModel, Timestamp
from gh_octokit.models.user import User


class IssueComment(GitHubModel):
    NESTED_FIELDS: ClassVar[tuple[str, ...]] = ("user",)

    body: StrictStr | None = None
    user: User | None = None
    url: AnyUrl | None = None
    html_url: AnyUrl | None = None
    issue_url: AnyUrl | None = None
    created_at: Timestamp = None
    updated_at: Timestamp = None
