# SPDX-License-Identifier: MIT

import json
from typing import Any, Optional, Protocol

from tsodata.model.order_by import OrderByClause, OrderByDirection
from tsodata.model.query import QuerySnapshot
from tsodata.query import literal as literals
from tsodata.query.filter import FilterClause, FilterNode
from tsodata.query.operator import JoinOperator
from tsodata.root_logger import get_logger
from tsodata.settings.count import CountSettings
from tsodata.settings.expand import ExpandSettings
from tsodata.settings.filter import FilterSettings
from tsodata.settings.format import FormatSettings
from tsodata.settings.inline_count import InlineCount, InlineCountSettings
from tsodata.settings.order_by import OrderBySettings
from tsodata.settings.search import SearchSettings
from tsodata.settings.select import SelectSettings
from tsodata.settings.skip import SkipSettings
from tsodata.settings.top import TopSettings

logger = get_logger("tso")


class QuerySettings(Protocol):
    def is_set(self) -> bool: ...

    def to_dict(self) -> Any: ...


class Tso:
    """
    Fluent OData query builder.

    >>> from tsodata.query.filter import where
    >>> query = Tso("http://test.com/Customers")
    >>> str(query.top(10).filter(where("CustomerId").eq(5)))
    'http://test.com/Customers?$top=10&$filter=CustomerId eq 5'

    Every ``set_*_default`` value is used until the matching setter
    overrides it; ``reset_*`` drops the override and restores the default.
    """

    literal = staticmethod(literals.literal)
    datetime = staticmethod(literals.datetime)
    guid = staticmethod(literals.guid)
    v4guid = staticmethod(literals.v4guid)
    decimal = staticmethod(literals.decimal)
    double = staticmethod(literals.double)
    single = staticmethod(literals.single)

    def __init__(self, base_uri: str) -> None:
        self.base_uri = base_uri
        self.current_hash_route: Optional[str] = None

        self.order_by_settings = OrderBySettings()
        self.top_settings = TopSettings()
        self.skip_settings = SkipSettings()
        self.select_settings = SelectSettings()
        self.filter_settings = FilterSettings()
        self.expand_settings = ExpandSettings()
        self.format_settings = FormatSettings()
        self.inline_count_settings = InlineCountSettings()
        self.count_settings = CountSettings()
        self.search_settings = SearchSettings()

    def update_hash_route(self, hash_route: str) -> None:
        self.current_hash_route = hash_route

    # Order by

    def set_order_by_default(
        self, property: str, order: Optional[OrderByDirection] = None
    ) -> "Tso":
        self.order_by_settings.default_property = {
            "property": property,
            "order": None if order is None else OrderByDirection(order),
        }
        return self

    def order_by(self, property: str) -> "Tso":
        self.order_by_settings.properties.append({"property": property, "order": None})
        return self

    def toggle_order_by(self, property: str) -> "Tso":
        """
        Flip the order of ``property`` between asc and desc, adding it
        in ascending order when it is not ordered yet.
        """
        clause = self.order_by_settings.find(property)
        if clause is None:
            new_clause: OrderByClause = {
                "property": property,
                "order": OrderByDirection.ASC,
            }
            self.order_by_settings.properties.append(new_clause)
        elif clause["order"] is None or clause["order"] == OrderByDirection.ASC:
            clause["order"] = OrderByDirection.DESC
        else:
            clause["order"] = OrderByDirection.ASC
        return self

    def asc(self) -> "Tso":
        """Order the most recent ``order_by`` property ascending."""
        if self.order_by_settings.properties:
            self.order_by_settings.properties[-1]["order"] = OrderByDirection.ASC
        return self

    def desc(self) -> "Tso":
        """Order the most recent ``order_by`` property descending."""
        if self.order_by_settings.properties:
            self.order_by_settings.properties[-1]["order"] = OrderByDirection.DESC
        return self

    def reset_order_by(self) -> "Tso":
        self.order_by_settings.reset()
        return self

    # Top / skip

    def set_top_default(self, top: int) -> "Tso":
        self.top_settings.default_top = top
        return self

    def top(self, top: int) -> "Tso":
        self.top_settings.top = top
        return self

    def reset_top(self) -> "Tso":
        self.top_settings.reset()
        return self

    def set_skip_default(self, skip: int) -> "Tso":
        self.skip_settings.default_skip = skip
        return self

    def skip(self, skip: int) -> "Tso":
        self.skip_settings.skip = skip
        return self

    def reset_skip(self) -> "Tso":
        self.skip_settings.reset()
        return self

    # Select / expand

    def set_select_default(self, select: list[str]) -> "Tso":
        self.select_settings.default_select = list(select)
        return self

    def select(self, select: list[str]) -> "Tso":
        self.select_settings.select = list(select)
        return self

    def reset_select(self) -> "Tso":
        self.select_settings.reset()
        return self

    def set_expand_default(self, expand: str) -> "Tso":
        self.expand_settings.default_expand = expand
        return self

    def expand(self, expand: str) -> "Tso":
        self.expand_settings.expand = expand
        return self

    def reset_expand(self) -> "Tso":
        self.expand_settings.reset()
        return self

    # Format

    def format_atom(self) -> "Tso":
        return self.format_custom("atom")

    def format_json(self) -> "Tso":
        return self.format_custom("json")

    def format_xml(self) -> "Tso":
        return self.format_custom("xml")

    def format_custom(self, value: str) -> "Tso":
        self.format_settings.format = value
        return self

    def format_default_atom(self) -> "Tso":
        return self.format_default_custom("atom")

    def format_default_json(self) -> "Tso":
        return self.format_default_custom("json")

    def format_default_xml(self) -> "Tso":
        return self.format_default_custom("xml")

    def format_default_custom(self, value: str) -> "Tso":
        self.format_settings.default_format = value
        return self

    def reset_format(self) -> "Tso":
        self.format_settings.reset()
        return self

    # Inline count / count / search

    def inline_count_all_pages(self) -> "Tso":
        self.inline_count_settings.inline_count = InlineCount.ALL_PAGES
        return self

    def inline_count_none(self) -> "Tso":
        self.inline_count_settings.inline_count = InlineCount.NONE
        return self

    def inline_count_default_all_pages(self) -> "Tso":
        self.inline_count_settings.default_inline_count = InlineCount.ALL_PAGES
        return self

    def inline_count_default_none(self) -> "Tso":
        self.inline_count_settings.default_inline_count = InlineCount.NONE
        return self

    def reset_inline_count(self) -> "Tso":
        self.inline_count_settings.reset()
        return self

    def count(self) -> "Tso":
        self.count_settings.set()
        return self

    def reset_count(self) -> "Tso":
        self.count_settings.reset()
        return self

    def search(self, search_expression: str) -> "Tso":
        self.search_settings.search = search_expression
        return self

    def reset_search(self) -> "Tso":
        self.search_settings.reset()
        return self

    # Filter

    def filter(self, clause: FilterNode) -> "Tso":
        self.filter_settings.append(clause)
        return self

    def and_filter(self, clause: FilterNode) -> "Tso":
        self.filter_settings.append(clause, JoinOperator.AND)
        return self

    def or_filter(self, clause: FilterNode) -> "Tso":
        self.filter_settings.append(clause, JoinOperator.OR)
        return self

    def remove_filter(self, property: str) -> "Tso":
        if self.filter_settings.is_set():
            self.filter_settings.remove_by_property(property)
        return self

    def capture_filter(self) -> "Tso":
        self.filter_settings.capture()
        return self

    def reset_filter(self) -> "Tso":
        """Drop the active filter and any captured snapshot."""
        self.filter_settings.full_reset()
        return self

    def reset_to_captured_filter(self) -> "Tso":
        self.filter_settings.restore_from_capture()
        return self

    def reset_filter_to_defaults(self) -> "Tso":
        self.filter_settings.restore_defaults()
        return self

    def default_filter(self, clause: FilterClause) -> "Tso":
        self.filter_settings.append_default(clause)
        return self

    def default_and_filter(self, clause: FilterClause) -> "Tso":
        self.filter_settings.append_default(clause, JoinOperator.AND)
        return self

    def default_or_filter(self, clause: FilterClause) -> "Tso":
        self.filter_settings.append_default(clause, JoinOperator.OR)
        return self

    # Output

    def components(self) -> list[str]:
        ordered: list[QuerySettings] = [
            self.order_by_settings,
            self.top_settings,
            self.skip_settings,
            self.select_settings,
            self.filter_settings,
            self.expand_settings,
            self.format_settings,
            self.inline_count_settings,
            self.count_settings,
            self.search_settings,
        ]
        return [str(settings) for settings in ordered if settings.is_set()]

    def __str__(self) -> str:
        components = self.components()
        if not components:
            return self.base_uri
        url = self.base_uri + "?" + "&".join(components)
        logger.debug("Built query %s", url)
        return url

    def snapshot(self) -> QuerySnapshot:
        return {
            "base_uri": self.base_uri,
            "current_hash_route": self.current_hash_route,
            "order_by_settings": self.__settings_dict(self.order_by_settings),
            "top_settings": self.__settings_dict(self.top_settings),
            "skip_settings": self.__settings_dict(self.skip_settings),
            "select_settings": self.__settings_dict(self.select_settings),
            "expand_settings": self.__settings_dict(self.expand_settings),
            "format_settings": self.__settings_dict(self.format_settings),
            "inline_count_settings": self.__settings_dict(self.inline_count_settings),
            "count_settings": self.__settings_dict(self.count_settings),
            "search_settings": self.__settings_dict(self.search_settings),
            "filter_settings": (
                self.filter_settings.to_dict()
                if self.filter_settings.is_set()
                else None
            ),
        }

    def to_json(self) -> str:
        return json.dumps(self.snapshot())

    def __settings_dict(self, settings: "QuerySettings") -> Optional[dict[str, Any]]:
        if not settings.is_set():
            return None
        return settings.to_dict()
