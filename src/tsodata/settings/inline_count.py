# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Any, Optional


class InlineCount(StrEnum):
    ALL_PAGES = "allpages"
    NONE = "none"


class InlineCountSettings:
    def __init__(self) -> None:
        self.inline_count: Optional[InlineCount] = None
        self.default_inline_count: Optional[InlineCount] = None

    def is_set(self) -> bool:
        return self.inline_count is not None or self.default_inline_count is not None

    def reset(self) -> None:
        self.inline_count = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "inline_count": self.inline_count,
            "default_inline_count": self.default_inline_count,
        }

    def __str__(self) -> str:
        inline_count = (
            self.inline_count
            if self.inline_count is not None
            else self.default_inline_count
        )
        return f"$inlinecount={inline_count}"
