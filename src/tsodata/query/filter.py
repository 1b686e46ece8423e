# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from copy import deepcopy
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Sequence, Union

from tsodata.exceptions import FilterConstructionError
from tsodata.model.filter import FilterClauseDict, FilterEntryDict, PrecedenceGroupDict
from tsodata.query.literal import Operand, format_operand
from tsodata.query.operator import ComparisonOperator, JoinOperator


class Expression(ABC):
    @abstractmethod
    def render(self) -> str: ...

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class FilterClause(Expression):
    property: str
    operator: ComparisonOperator
    operand: str

    def __post_init__(self) -> None:
        if not self.property or not self.property.strip():
            raise FilterConstructionError("Filter clause property cannot be empty")
        try:
            operator = ComparisonOperator(self.operator)
        except ValueError as e:
            raise FilterConstructionError(
                f"Unknown comparison operator: {self.operator}"
            ) from e
        object.__setattr__(self, "operator", operator)

    def render(self) -> str:
        return f"{self.property} {self.operator} {self.operand}"

    def to_dict(self) -> FilterClauseDict:
        return {
            "property": self.property,
            "operator": str(self.operator),
            "operand": self.operand,
        }


FilterNode = Union[FilterClause, "PrecedenceGroup"]


@dataclass(frozen=True)
class FilterEntry:
    """
    A clause or group together with the operator joining it to the entry
    before it. The first entry of a sequence carries no join.
    """

    clause: FilterNode
    join: Optional[JoinOperator] = None

    def render(self) -> tuple[Optional[JoinOperator], str]:
        return self.join, self.clause.render()

    def to_dict(self) -> FilterEntryDict:
        return {
            "join": None if self.join is None else str(self.join),
            "clause": self.clause.to_dict(),
        }


def join_for_position(
    sequence: Sequence[FilterEntry], join: Optional[JoinOperator]
) -> Optional[JoinOperator]:
    """Join to store for an entry appended to ``sequence``."""
    if join is not None:
        try:
            join = JoinOperator(join)
        except ValueError as e:
            raise FilterConstructionError(f"Unknown join operator: {join}") from e
    if not sequence:
        return None
    if join is None:
        return JoinOperator.AND
    return join


def owned(clause: FilterNode) -> FilterNode:
    """Copy of ``clause`` safe to store in a new sequence; clauses are immutable."""
    if isinstance(clause, PrecedenceGroup):
        return deepcopy(clause)
    return clause


def drop_leading_join(entries: list[FilterEntry]) -> list[FilterEntry]:
    if entries and entries[0].join is not None:
        entries[0] = replace(entries[0], join=None)
    return entries


def render_entries(entries: Iterable[FilterEntry]) -> str:
    parts: list[str] = []
    for entry in entries:
        join, text = entry.render()
        if not parts:
            parts.append(text)
        else:
            parts.append(f"{join} {text}")
    return " ".join(parts)


class PrecedenceGroup(Expression):
    """
    A parenthesized run of clauses and groups.

    Members are copied on insertion, so a group never shares a node with
    another group or filter sequence.

    Nested groups are rendered as they were built, so parentheses in the
    output mirror the construction depth exactly.
    """

    def __init__(self, members: Iterable[FilterEntry]) -> None:
        entries = list(members)
        if not entries:
            raise FilterConstructionError("Precedence group needs at least one member")
        self.members: list[FilterEntry] = []
        for entry in entries:
            join = join_for_position(self.members, entry.join)
            self.members.append(FilterEntry(owned(entry.clause), join))

    @classmethod
    def of(cls, clause: FilterNode) -> "PrecedenceGroup":
        return cls([FilterEntry(clause)])

    def and_filter(self, clause: FilterNode) -> "PrecedenceGroup":
        return self.__add(clause, JoinOperator.AND)

    def or_filter(self, clause: FilterNode) -> "PrecedenceGroup":
        return self.__add(clause, JoinOperator.OR)

    def __add(self, clause: FilterNode, join: JoinOperator) -> "PrecedenceGroup":
        if clause is self:
            raise FilterConstructionError("Precedence group cannot contain itself")
        self.members.append(FilterEntry(owned(clause), join))
        return self

    def depth(self) -> int:
        child_depths = [
            member.clause.depth()
            for member in self.members
            if isinstance(member.clause, PrecedenceGroup)
        ]
        return 1 + max(child_depths, default=0)

    def render(self) -> str:
        return "(" + render_entries(self.members) + ")"

    def to_dict(self) -> PrecedenceGroupDict:
        return {"members": [member.to_dict() for member in self.members]}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrecedenceGroup):
            return NotImplemented
        return self.members == other.members

    def __repr__(self) -> str:
        return f"PrecedenceGroup({self.members!r})"


class PropertyFilter:
    """Builds clauses against one property, e.g. ``where("Age").gt(30)``."""

    def __init__(self, property: str) -> None:
        self.property = property

    def __clause(self, operator: ComparisonOperator, operand: Operand) -> FilterClause:
        return FilterClause(self.property, operator, format_operand(operand))

    def eq(self, operand: Operand) -> FilterClause:
        return self.__clause(ComparisonOperator.EQ, operand)

    def ne(self, operand: Operand) -> FilterClause:
        return self.__clause(ComparisonOperator.NE, operand)

    def gt(self, operand: Operand) -> FilterClause:
        return self.__clause(ComparisonOperator.GT, operand)

    def ge(self, operand: Operand) -> FilterClause:
        return self.__clause(ComparisonOperator.GE, operand)

    def lt(self, operand: Operand) -> FilterClause:
        return self.__clause(ComparisonOperator.LT, operand)

    def le(self, operand: Operand) -> FilterClause:
        return self.__clause(ComparisonOperator.LE, operand)

    def has(self, operand: Operand) -> FilterClause:
        return self.__clause(ComparisonOperator.HAS, operand)

    def in_(self, operands: Iterable[Operand]) -> FilterClause:
        formatted = ",".join(format_operand(operand) for operand in operands)
        return FilterClause(self.property, ComparisonOperator.IN, f"({formatted})")


def where(property: str) -> PropertyFilter:
    return PropertyFilter(property)
