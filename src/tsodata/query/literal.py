# SPDX-License-Identifier: MIT

import datetime as dt
from decimal import Decimal

from tsodata import time

Number = int | float | Decimal
Operand = str | Number | bool | None


def literal(value: str) -> str:
    """Quote a string operand, doubling embedded single quotes."""
    return "'" + str(value).replace("'", "''") + "'"


def datetime(value: str | dt.datetime) -> str:
    if isinstance(value, dt.datetime):
        value = time.datetime_to_odata_str(time.python_to_pendulum_utc(value))
    return f"datetime'{value}'"


def guid(value: str) -> str:
    return f"guid'{value}'"


def v4guid(value: str) -> str:
    return f"v4guid{value}"


def decimal(value: Number) -> str:
    return f"{value}m"


def double(value: Number) -> str:
    return f"{value}d"


def single(value: Number) -> str:
    return f"{value}f"


def format_operand(value: Operand) -> str:
    """
    Turn a plain Python value into an operand token.

    Strings pass through untouched: they are expected to be pre-formatted
    with one of the helpers above (``literal``, ``guid`` ...) or to be a
    property path or function call.
    """
    match value:
        case None:
            return "null"
        case bool():
            return "true" if value else "false"
        case str():
            return value
        case _:
            return str(value)
