# SPDX-License-Identifier: MIT

from typing import Any, Optional


class FormatSettings:
    def __init__(self) -> None:
        self.format: Optional[str] = None
        self.default_format: Optional[str] = None

    def is_set(self) -> bool:
        return bool(self.format) or bool(self.default_format)

    def reset(self) -> None:
        self.format = None

    def to_dict(self) -> dict[str, Any]:
        return {"format": self.format, "default_format": self.default_format}

    def __str__(self) -> str:
        return f"$format={self.format or self.default_format}"
