# SPDX-License-Identifier: MIT

from typing import Any, Optional


class SelectSettings:
    def __init__(self) -> None:
        self.select: Optional[list[str]] = None
        self.default_select: Optional[list[str]] = None

    def is_set(self) -> bool:
        return bool(self.select) or bool(self.default_select)

    def reset(self) -> None:
        self.select = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "select": None if self.select is None else list(self.select),
            "default_select": (
                None if self.default_select is None else list(self.default_select)
            ),
        }

    def __str__(self) -> str:
        select = self.select if self.select else self.default_select or []
        return "$select=" + ",".join(select)
