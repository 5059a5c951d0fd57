"""Issue label."""

from pydantic import AnyUrl, StrictBool, StrictStr

from gh_octokit.models.base import GitHubModel


class Label(GitHubModel):
    node_id: StrictStr | None = None
    url: AnyUrl | None = None
    name: StrictStr | None = None
    # Hex RGB without the leading "#", e.g. "f29513"
    color: StrictStr | None = None
    description: StrictStr | None = None
    default: StrictBool | None = None
