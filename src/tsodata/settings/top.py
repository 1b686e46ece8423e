# SPDX-License-Identifier: MIT

from typing import Any, Optional


class TopSettings:
    def __init__(self) -> None:
        self.top: Optional[int] = None
        self.default_top: Optional[int] = None

    def is_set(self) -> bool:
        return self.top is not None or self.default_top is not None

    def reset(self) -> None:
        self.top = None

    def to_dict(self) -> dict[str, Any]:
        return {"top": self.top, "default_top": self.default_top}

    def __str__(self) -> str:
        top = self.top if self.top is not None else self.default_top
        return f"$top={top}"
