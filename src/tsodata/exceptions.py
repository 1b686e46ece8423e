# SPDX-License-Identifier: MIT


class TsoDataError(Exception):
    """Base class for errors raised by the query builder."""


class FilterConstructionError(TsoDataError, ValueError):
    """Raised when a filter clause or precedence group cannot be built."""


class FilterNotSetError(TsoDataError):
    """
    Raised when the filter fragment is serialized while no filter is active.

    Callers guard serialization with ``FilterSettings.is_set()``.
    """

    def __init__(self, message: str = "No active filter to serialize") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.message}"
