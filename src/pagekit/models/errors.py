"""Custom exception classes for pagekit."""

from typing import Any

from pagekit.utils.constants import (
    ERROR_CODE_INVALID_FILTER,
    ERROR_CODE_INVALID_SORT_EXPRESSION,
)


class PagerError(Exception):
    """
    Base exception for all pagekit errors.

    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class FilterError(PagerError):
    """Raised when paging parameters are invalid."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_FILTER,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class SortExpressionError(PagerError):
    """Raised by a source that cannot order by the requested expression."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_SORT_EXPRESSION,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
