# SPDX-License-Identifier: MIT

from enum import StrEnum


class ComparisonOperator(StrEnum):
    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GE = "ge"
    LT = "lt"
    LE = "le"
    HAS = "has"
    IN = "in"


class JoinOperator(StrEnum):
    AND = "and"
    OR = "or"
