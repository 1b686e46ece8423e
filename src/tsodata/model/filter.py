# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict


class FilterClauseDict(TypedDict):
    property: str
    operator: str
    operand: str


class PrecedenceGroupDict(TypedDict):
    members: list["FilterEntryDict"]


class FilterEntryDict(TypedDict):
    join: Optional[str]
    clause: FilterClauseDict | PrecedenceGroupDict


class FilterSettingsDict(TypedDict):
    active: list[FilterEntryDict]
    defaults: list[FilterEntryDict]
    captured: list[FilterEntryDict]
