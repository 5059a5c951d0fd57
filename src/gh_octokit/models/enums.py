"""Enumerations shared by models and request parameters."""

from enum import Enum


class State(str, Enum):
    """Issue or milestone state. ALL is only meaningful as a filter."""

    OPEN = "open"
    CLOSED = "closed"
    ALL = "all"


class Sort(str, Enum):
    """Sort key for issue and comment listings."""

    CREATED = "created"
    UPDATED = "updated"
    COMMENTS = "comments"


class Direction(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"
