"""Classification of certificate backend errors.

Backend errors are inspected structurally: a status code (``status_code``,
``code`` or ``status`` attribute) and a list of detail items under
``errors`` whose ``reason`` may be an attribute or a mapping key. No
exception type is required, so errors from the Compute client, the
Google API client libraries, or test fakes classify the same way.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import StrEnum
from typing import Any

NOT_FOUND_STATUS = 404
FORBIDDEN_STATUS = 403
QUOTA_EXCEEDED_REASON = "quotaExceeded"

_STATUS_ATTRIBUTES = ("status_code", "code", "status")


class ErrorKind(StrEnum):
    """Kind of a backend error, as seen by the lifecycle manager."""

    NONE = "none"
    NOT_FOUND = "not-found"
    QUOTA_EXCEEDED = "quota-exceeded"
    BACKEND_ERROR = "backend-error"


def _status_code(err: BaseException) -> int | None:
    for attr in _STATUS_ATTRIBUTES:
        value = getattr(err, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return None


def _reason(item: Any) -> Any:
    if isinstance(item, Mapping):
        return item.get("reason")
    return getattr(item, "reason", None)


def _reasons(err: BaseException) -> list[Any]:
    items = getattr(err, "errors", None)
    if items is None or isinstance(items, (str, bytes, Mapping)):
        return []
    if not isinstance(items, Iterable):
        return []
    return [_reason(item) for item in items]


def classify(err: BaseException | None) -> ErrorKind:
    """Classify a backend error.

    Args:
        err: The error raised by the backend, or None on success.

    Returns:
        NOT_FOUND for 404, QUOTA_EXCEEDED for 403 with a ``quotaExceeded``
        reason, BACKEND_ERROR for any other error, NONE for None.
    """
    if err is None:
        return ErrorKind.NONE

    status = _status_code(err)
    if status == NOT_FOUND_STATUS:
        return ErrorKind.NOT_FOUND
    if status == FORBIDDEN_STATUS and QUOTA_EXCEEDED_REASON in _reasons(err):
        return ErrorKind.QUOTA_EXCEEDED
    return ErrorKind.BACKEND_ERROR


def is_not_found(err: BaseException | None) -> bool:
    """Whether the backend reported the resource as absent."""
    return classify(err) is ErrorKind.NOT_FOUND


def is_quota_exceeded(err: BaseException | None) -> bool:
    """Whether the backend refused the request for lack of quota."""
    return classify(err) is ErrorKind.QUOTA_EXCEEDED
