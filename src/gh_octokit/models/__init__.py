"""Typed models decoded from GitHub REST payloads."""

from gh_octokit.models.base import SENTINEL_ID, GitHubModel
from gh_octokit.models.comment import IssueComment
from gh_octokit.models.enums import Direction, Sort, State
from gh_octokit.models.issue import Issue
from gh_octokit.models.label import Label
from gh_octokit.models.milestone import Milestone
from gh_octokit.models.repository import Repository
from gh_octokit.models.user import User

__all__ = [
    "SENTINEL_ID",
    "Direction",
    "GitHubModel",
    "Issue",
    "IssueComment",
    "Label",
    "Milestone",
    "Repository",
    "Sort",
    "State",
    "User",
]
