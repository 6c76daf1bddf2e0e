"""Sort expression parsing."""

from dataclasses import dataclass

from pagekit.models.errors import SortExpressionError
from pagekit.utils.constants import (
    SORT_DIRECTION_DESC,
    SORT_DIRECTIONS,
    SORT_EXPRESSION_SEPARATOR,
)


@dataclass(frozen=True)
class SortKey:
    """A single field of a sort expression."""

    field: str
    descending: bool = False


def parse_sort_expression(expression: str) -> list[SortKey]:
    """Parse a sort expression into sort keys.

    Supported forms:
    - "name"
    - "name asc" / "name DESC"
    - "last_name, first_name desc"

    Raises:
        SortExpressionError: If a clause is empty or has an unknown direction
    """
    keys: list[SortKey] = []

    for clause in expression.split(SORT_EXPRESSION_SEPARATOR):
        parts = clause.split()

        if not parts or len(parts) > 2:
            raise SortExpressionError(
                message=f"Invalid sort clause '{clause.strip()}'",
                details={"sort_expression": expression},
            )

        direction = parts[1].lower() if len(parts) == 2 else None
        if direction is not None and direction not in SORT_DIRECTIONS:
            raise SortExpressionError(
                message=f"Invalid sort direction '{parts[1]}'",
                details={"sort_expression": expression},
            )

        keys.append(
            SortKey(field=parts[0], descending=direction == SORT_DIRECTION_DESC)
        )

    return keys
