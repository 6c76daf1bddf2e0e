"""Request validation utilities."""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from pagekit.models.errors import FilterError
from pagekit.models.pagination import PageFilter

_INTEGER_FIELDS = ("skip_count", "skipCount", "max_result_count", "maxResultCount")


def sanitize_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Sanitize Pydantic validation errors for API responses.

    Removes internal fields like url, ctx and input.
    """
    sanitized: list[dict[str, str]] = []

    for err in errors:
        field = ".".join(str(x) for x in err.get("loc", [])) or "body"
        raw_msg = err.get("msg", "Invalid value")

        # Remove noisy prefixes
        msg = raw_msg.replace("Value error,", "").strip()

        err_type = str(err.get("type", ""))
        if err_type == "greater_than_equal":
            msg = "Must be zero or a positive integer"
        elif err_type.endswith(("_type", "_parsing")):
            msg = "Invalid value type"

        sanitized.append(
            {
                "field": field,
                "message": msg,
            }
        )

    return sanitized


def _coerce_integers(data: Mapping[str, Any]) -> dict[str, Any]:
    """Convert integer-looking strings (e.g. query parameters) to int."""
    coerced = dict(data)

    for name in _INTEGER_FIELDS:
        value = coerced.get(name)
        if isinstance(value, str):
            try:
                coerced[name] = int(value.strip())
            except ValueError:
                pass  # left for pydantic to report

    return coerced


def build_page_filter(data: Mapping[str, Any]) -> PageFilter:
    """Build a PageFilter from raw request data.

    Accepts snake_case or camelCase keys and integer strings.

    Raises:
        FilterError: If the data does not describe a valid filter;
            `details["errors"]` holds the sanitized field errors
    """
    try:
        return PageFilter.model_validate(_coerce_integers(data))

    except ValidationError as exc:
        raise FilterError(
            message="Invalid pagination parameters",
            details={"errors": sanitize_validation_errors(exc.errors())},
        ) from exc
