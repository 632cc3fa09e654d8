"""Machine-readability checks for column titles."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import TYPE_CHECKING

from tabular_schema.core.logging import get_logger
from tabular_schema.tabular.errors import TitleValidationError

if TYPE_CHECKING:
    from tabular_schema.tabular.columns import Column

logger = get_logger(__name__)

# Variable-name style: letter, underscore or dollar, then also digits
MACHINE_TITLE_PATTERN = re.compile(r"[a-zA-Z_$][a-zA-Z_$0-9]*")


def is_valid_machine_title(title: str) -> bool:
    """Check if a title can be used as a machine-readable column name."""
    return MACHINE_TITLE_PATTERN.fullmatch(title) is not None


def title_problems(columns: Iterable[Column]) -> list[str]:
    """List every title defect in the column set, in column order.

    A column can contribute two problems: one for an invalid name and one
    for repeating a title already seen earlier in the set.
    """
    problems: list[str] = []
    seen: set[str] = set()

    for i, col in enumerate(columns):
        title = col.title
        if not is_valid_machine_title(title):
            problems.append(f"col. {i} name '{title}' is not a valid column name")
        if title in seen:
            problems.append(f"col. {i} name '{title}' is not unique")
        seen.add(title)

    return problems


def validate_machine_titles(columns: Iterable[Column]) -> None:
    """Confirm column titles are valid for machine-readability.

    Titles must parse as proper variable names and be unique across the
    column set. All columns are checked before failing.

    Args:
        columns: Columns to check

    Raises:
        TitleValidationError: With one line per problem
    """
    problems = title_problems(columns)
    if problems:
        logger.debug("column_titles_invalid", problem_count=len(problems))
        raise TitleValidationError(problems)
