"""GitHub user (or organization) account."""

from pydantic import AnyUrl, StrictBool, StrictInt, StrictStr

from gh_octokit.models.base import GitHubModel, Timestamp


class User(GitHubModel):
    """User as embedded in issues and comments, or returned by /users.

    Embedded users only carry the summary fields (login, avatar, urls);
    the profile fields are filled only by the full user endpoints.
    """

    login: StrictStr | None = None
    node_id: StrictStr | None = None
    avatar_url: AnyUrl | None = None
    gravatar_id: StrictStr | None = None
    url: AnyUrl | None = None
    html_url: AnyUrl | None = None
    type: StrictStr | None = None
    site_admin: StrictBool | None = None

    name: StrictStr | None = None
    company: StrictStr | None = None
    blog: StrictStr | None = None
    location: StrictStr | None = None
    email: StrictStr | None = None
    bio: StrictStr | None = None
    public_repos: StrictInt | None = None
    public_gists: StrictInt | None = None
    total_private_repos: StrictInt | None = None
    followers: StrictInt | None = None
    following: StrictInt | None = None
    created_at: Timestamp = None
    updated_at: Timestamp = None
