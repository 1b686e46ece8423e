# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional, TypedDict


class OrderByDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


class OrderByClause(TypedDict):
    property: str
    order: Optional[OrderByDirection]
