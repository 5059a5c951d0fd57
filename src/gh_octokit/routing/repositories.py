"""Repository operations."""

from dataclasses import dataclass
from typing import Any

from gh_octokit.routing.base import Router


@dataclass(frozen=True)
class ReadRepositories(Router):
    """Public repositories of a user or organization."""

    owner: str
    page: str = "1"
    per_page: str = "100"

    @property
    def path(self) -> str:
        return f"users/{self.owner}/repos"

    @property
    def params(self) -> dict[str, Any]:
        return {"page": self.page, "per_page": self.per_page}


@dataclass(frozen=True)
class ReadAuthenticatedRepositories(Router):
    """Repositories the authenticated user can access."""

    page: str = "1"
    per_page: str = "100"

    @property
    def path(self) -> str:
        return "user/repos"

    @property
    def params(self) -> dict[str, Any]:
        return {"page": self.page, "per_page": self.per_page}


@dataclass(frozen=True)
class ReadRepository(Router):
    owner: str
    name: str

    @property
    def path(self) -> str:
        return f"repos/{self.owner}/{self.name}"
