# SPDX-License-Identifier: MIT

from typing import Any, Optional


class SkipSettings:
    def __init__(self) -> None:
        self.skip: Optional[int] = None
        self.default_skip: Optional[int] = None

    def is_set(self) -> bool:
        return self.skip is not None or self.default_skip is not None

    def reset(self) -> None:
        self.skip = None

    def to_dict(self) -> dict[str, Any]:
        return {"skip": self.skip, "default_skip": self.default_skip}

    def __str__(self) -> str:
        skip = self.skip if self.skip is not None else self.default_skip
        return f"$skip={skip}"
