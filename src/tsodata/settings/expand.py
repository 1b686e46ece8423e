# SPDX-License-Identifier: MIT

from typing import Any, Optional


class ExpandSettings:
    def __init__(self) -> None:
        self.expand: Optional[str] = None
        self.default_expand: Optional[str] = None

    def is_set(self) -> bool:
        return bool(self.expand) or bool(self.default_expand)

    def reset(self) -> None:
        self.expand = None

    def to_dict(self) -> dict[str, Any]:
        return {"expand": self.expand, "default_expand": self.default_expand}

    def __str__(self) -> str:
        return f"$expand={self.expand or self.default_expand}"
