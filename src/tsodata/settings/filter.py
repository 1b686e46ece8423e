# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from tsodata.exceptions import FilterNotSetError
from tsodata.model.filter import FilterSettingsDict
from tsodata.query.filter import (
    FilterClause,
    FilterEntry,
    FilterNode,
    drop_leading_join,
    join_for_position,
    owned,
    render_entries,
)
from tsodata.query.operator import JoinOperator
from tsodata.root_logger import get_logger

logger = get_logger("settings.filter")


class FilterSettings:
    """
    Active, default and captured filter sequences for one query.

    ``defaults`` are never rendered on their own: they only reach the
    output once ``restore_defaults()`` copies them into ``active``.
    """

    def __init__(self) -> None:
        self.active: list[FilterEntry] = []
        self.defaults: list[FilterEntry] = []
        self.captured: list[FilterEntry] = []

    def append(self, clause: FilterNode, join: Optional[JoinOperator] = None) -> None:
        entry = FilterEntry(owned(clause), join_for_position(self.active, join))
        self.active.append(entry)
        logger.debug("Added filter: %s", entry.clause)

    def append_default(
        self, clause: FilterNode, join: Optional[JoinOperator] = None
    ) -> None:
        entry = FilterEntry(owned(clause), join_for_position(self.defaults, join))
        self.defaults.append(entry)
        logger.debug("Added default filter: %s", entry.clause)

    def remove_by_property(self, property: str) -> None:
        survivors = [
            entry
            for entry in self.active
            if not (
                isinstance(entry.clause, FilterClause)
                and entry.clause.property == property
            )
        ]
        removed = len(self.active) - len(survivors)
        self.active = drop_leading_join(survivors)
        logger.debug("Removed %d filter(s) on %s", removed, property)

    def is_set(self) -> bool:
        return len(self.active) > 0

    def reset(self) -> None:
        self.active = []

    def full_reset(self) -> None:
        self.active = []
        self.captured = []

    def capture(self) -> None:
        self.captured = deepcopy(self.active)

    def restore_from_capture(self) -> None:
        self.active = deepcopy(self.captured)

    def restore_defaults(self) -> None:
        self.active = deepcopy(self.defaults)

    def to_dict(self) -> FilterSettingsDict:
        return {
            "active": [entry.to_dict() for entry in self.active],
            "defaults": [entry.to_dict() for entry in self.defaults],
            "captured": [entry.to_dict() for entry in self.captured],
        }

    def __str__(self) -> str:
        if not self.is_set():
            logger.warning("Filter serialized with no active entries")
            raise FilterNotSetError()
        return "$filter=" + render_entries(self.active)
