# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional
from urllib.parse import quote

from tsodata.model.order_by import OrderByClause, OrderByDirection

# Characters encodeURI leaves alone on top of quote()'s own safe set
URI_SAFE = ";,/?:@&=+$!*'()#"


class OrderBySettings:
    def __init__(self) -> None:
        self.properties: list[OrderByClause] = []
        self.default_property: Optional[OrderByClause] = None

    def find(self, property: str) -> Optional[OrderByClause]:
        for clause in self.properties:
            if clause["property"] == property:
                return clause
        return None

    def is_set(self) -> bool:
        return len(self.properties) > 0 or self.default_property is not None

    def reset(self) -> None:
        self.properties = []

    def to_dict(self) -> dict[str, Any]:
        return {
            "properties": deepcopy(self.properties),
            "default_property": deepcopy(self.default_property),
        }

    def __str__(self) -> str:
        if not self.properties and self.default_property is not None:
            formatted = self.__format_clause(self.default_property)
        else:
            formatted = ",".join(
                self.__format_clause(clause) for clause in self.properties
            )
        return quote(f"$orderby={formatted}", safe=URI_SAFE)

    def __format_clause(self, clause: OrderByClause) -> str:
        order: Optional[OrderByDirection] = clause["order"]
        if order is None:
            return clause["property"]
        return f"{clause['property']} {order}"
