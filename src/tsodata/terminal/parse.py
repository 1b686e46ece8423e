# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from tsodata.exceptions import FilterConstructionError
from tsodata.model.order_by import OrderByDirection
from tsodata.query.filter import FilterClause


def parse_filter_clause(clause_text: str) -> FilterClause:
    """
    Build a clause from ``"<property> <operator> <operand>"``.

    The operand is taken verbatim, inner whitespace included, so string
    operands must already carry their quotes: ``Name eq 'Bob Smith'``.
    """
    parts = clause_text.strip().split(" ", 2)
    if len(parts) < 3 or not parts[2].strip():
        raise typer.BadParameter(
            f"Expected '<property> <operator> <operand>', got '{clause_text}'"
        )
    property, operator, operand = (part.strip() for part in parts)
    try:
        return FilterClause(property, operator.lower(), operand)  # type: ignore[arg-type]
    except FilterConstructionError as e:
        raise typer.BadParameter(str(e))


def parse_order_by(order_by_text: str) -> tuple[str, Optional[OrderByDirection]]:
    parts = order_by_text.split()
    if len(parts) == 1:
        return parts[0], None
    if len(parts) == 2 and parts[1].lower() in ("asc", "desc"):
        return parts[0], OrderByDirection(parts[1].lower())
    raise typer.BadParameter(f"Expected '<property> [asc|desc]', got '{order_by_text}'")


def parse_select(select_text: Optional[str]) -> Optional[list[str]]:
    if select_text is None:
        return None
    return [column.strip() for column in select_text.split(",") if column.strip()]
