"""Logging setup for gh-octokit.

Library modules log through ``logging.getLogger(__name__)`` and never
configure handlers themselves. Applications (and the CLI) call
:func:`setup_logging`, which also installs a filter that keeps tokens out
of log output.
"""

import logging
import re
from typing import Any, ClassVar

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
JSON_FORMAT = (
    '{"time": "%(asctime)s", "level": "%(levelname)s", '
    '"name": "%(name)s", "message": "%(message)s"}'
)


class SecretRedactingFilter(logging.Filter):
    """Mask GitHub credentials in log records."""

    SECRET_PATTERNS: ClassVar[list[tuple[re.Pattern[str], str]]] = [
        # ghp_/gho_/ghu_/ghs_/ghr_ tokens
        (re.compile(r"gh[pousr]_[A-Za-z0-9]{20,}"), "[REDACTED_GH_TOKEN]"),
        (re.compile(r"github_pat_[A-Za-z0-9_]+"), "[REDACTED_GH_PAT]"),
        (re.compile(r"Bearer\s+[A-Za-z0-9_\-\.]+"), "Bearer [REDACTED]"),
        (re.compile(r"(Authorization['\"]?:\s*['\"]?)[^'\",}\]]+", re.IGNORECASE), r"\1[REDACTED]"),
        (re.compile(r"(access_token=)[^&\s]+", re.IGNORECASE), r"\1[REDACTED]"),
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = self.redact(str(record.msg))
        if isinstance(record.args, tuple):
            record.args = tuple(self._redact_arg(arg) for arg in record.args)
        elif isinstance(record.args, dict):
            record.args = {key: self._redact_arg(value) for key, value in record.args.items()}
        return True

    def _redact_arg(self, arg: Any) -> Any:
        return self.redact(arg) if isinstance(arg, str) else arg

    @classmethod
    def redact(cls, text: str) -> str:
        """Return text with every known secret pattern masked."""
        for pattern, replacement in cls.SECRET_PATTERNS:
            text = pattern.sub(replacement, text)
        return text


def setup_logging(verbose: bool = False, json_format: bool = False) -> None:
    """Configure root logging for an application using gh-octokit.

    Args:
        verbose: Log at DEBUG instead of INFO.
        json_format: Emit one JSON object per line.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format=JSON_FORMAT if json_format else TEXT_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # basicConfig is a no-op once handlers exist
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    redaction_filter = SecretRedactingFilter()
    for handler in root_logger.handlers:
        if not any(isinstance(f, SecretRedactingFilter) for f in handler.filters):
            handler.addFilter(redaction_filter)

    # httpx logs every request line at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
