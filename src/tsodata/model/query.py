# SPDX-License-Identifier: MIT

from typing import Any, Optional, TypedDict

from tsodata.model.filter import FilterSettingsDict


class QuerySnapshot(TypedDict):
    base_uri: str
    current_hash_route: Optional[str]
    order_by_settings: Optional[dict[str, Any]]
    top_settings: Optional[dict[str, Any]]
    skip_settings: Optional[dict[str, Any]]
    select_settings: Optional[dict[str, Any]]
    expand_settings: Optional[dict[str, Any]]
    format_settings: Optional[dict[str, Any]]
    inline_count_settings: Optional[dict[str, Any]]
    count_settings: Optional[dict[str, Any]]
    search_settings: Optional[dict[str, Any]]
    filter_settings: Optional[FilterSettingsDict]
