"""Lenient decoding base for GitHub resource models.

GitHub payloads are loosely typed and vary between endpoints, so decoding
never fails as a whole:

- ``id`` must be a JSON integer. Without one the model gets the sentinel
  id ``-1`` and every other field keeps its default.
- Any other field whose key is missing or whose value has the wrong type
  keeps its default.
- Nested objects listed in ``NESTED_FIELDS`` are decoded from an empty
  mapping when absent, producing a sentinel model instead of None.
"""

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Annotated, Any, ClassVar, Self

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    StrictInt,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
    model_validator,
)

from gh_octokit.time import parse_rfc3339

logger = logging.getLogger(__name__)

SENTINEL_ID = -1

Timestamp = Annotated[datetime | None, BeforeValidator(parse_rfc3339)]


def _is_json_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class GitHubModel(BaseModel):
    """Base for all decoded resources."""

    model_config = ConfigDict(frozen=True)

    # Wire keys decoded as nested models, even when absent
    NESTED_FIELDS: ClassVar[tuple[str, ...]] = ()
    # Wire keys holding lists of nested models
    NESTED_LISTS: ClassVar[tuple[str, ...]] = ()

    id: StrictInt = SENTINEL_ID

    @model_validator(mode="before")
    @classmethod
    def prepare_payload(cls, data: Any) -> Any:
        if not isinstance(data, Mapping) or not _is_json_int(data.get("id")):
            return {}

        payload = dict(data)
        for key in cls.NESTED_FIELDS:
            if not isinstance(payload.get(key), Mapping):
                payload[key] = {}
        for key in cls.NESTED_LISTS:
            items = payload.get(key)
            if not isinstance(items, list) or not all(isinstance(i, Mapping) for i in items):
                payload.pop(key, None)
        return payload

    @field_validator("*", mode="wrap")
    @classmethod
    def default_on_mismatch(
        cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> Any:
        try:
            return handler(value)
        except ValidationError:
            logger.debug("%s.%s: ignoring value %r", cls.__name__, info.field_name, value)
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)

    @property
    def is_valid(self) -> bool:
        """False for a sentinel model decoded without an identifier."""
        return self.id != SENTINEL_ID

    @classmethod
    def from_json(cls, data: Any) -> Self:
        """Decode one JSON object. Never raises."""
        return cls.model_validate(data if isinstance(data, Mapping) else {})

    @classmethod
    def from_json_list(cls, data: Any) -> list[Self]:
        """Decode a JSON array element by element.

        A single object is wrapped in a list; an empty payload gives [].
        """
        if not isinstance(data, list):
            data = [data] if data else []
        return [cls.from_json(item) for item in data]
