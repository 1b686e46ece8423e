# SPDX-License-Identifier: MIT

from typing import Any


class CountSettings:
    def __init__(self) -> None:
        self.count_exists = False

    def set(self) -> None:
        self.count_exists = True

    def is_set(self) -> bool:
        return self.count_exists

    def reset(self) -> None:
        self.count_exists = False

    def to_dict(self) -> dict[str, Any]:
        return {"count_exists": self.count_exists}

    def __str__(self) -> str:
        return "$count=true"
