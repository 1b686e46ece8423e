# SPDX-License-Identifier: MIT

from typing import Any, Optional


class SearchSettings:
    def __init__(self) -> None:
        self.search: Optional[str] = None

    def is_set(self) -> bool:
        return self.search is not None

    def reset(self) -> None:
        self.search = None

    def to_dict(self) -> dict[str, Any]:
        return {"search": self.search}

    def __str__(self) -> str:
        return f"$search={self.search}"
