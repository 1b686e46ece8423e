# SPDX-License-Identifier: MIT

from collections import deque
from typing import Annotated, Optional

import typer
from rich.console import Console

from tsodata.model.order_by import OrderByDirection
from tsodata.query.operator import JoinOperator
from tsodata.repository.configuration import CONFIGURATION_REPO
from tsodata.settings.inline_count import InlineCount
from tsodata.terminal.custom_typer import OrderedOptionsCommand
from tsodata.terminal.parse import parse_filter_clause, parse_order_by, parse_select
from tsodata.tso import Tso
from tsodata.view.query import query_report


def build(
    ctx: typer.Context,
    base_uri: Annotated[
        Optional[str],
        typer.Argument(help="Service root, falls back to the configured base_uri"),
    ] = None,
    filters: Annotated[
        Optional[list[str]],
        typer.Option(
            "--filter",
            "-f",
            help="Clause as '<property> <operator> <operand>', joined with and",
        ),
    ] = None,
    and_filters: Annotated[
        Optional[list[str]],
        typer.Option("--and-filter", help="Clause joined to the previous one with and"),
    ] = None,
    or_filters: Annotated[
        Optional[list[str]],
        typer.Option("--or-filter", help="Clause joined to the previous one with or"),
    ] = None,
    remove_filters: Annotated[
        Optional[list[str]],
        typer.Option("--remove-filter", help="Drop clauses on this property"),
    ] = None,
    order_by: Annotated[
        Optional[list[str]],
        typer.Option("--order-by", "-o", help="'<property> [asc|desc]'"),
    ] = None,
    top: Annotated[Optional[int], typer.Option("--top", "-t", min=0)] = None,
    skip: Annotated[Optional[int], typer.Option("--skip", "-s", min=0)] = None,
    select: Annotated[
        Optional[str],
        typer.Option("--select", help="Comma separated list of properties"),
    ] = None,
    expand: Annotated[Optional[str], typer.Option("--expand", "-e")] = None,
    format: Annotated[Optional[str], typer.Option("--format")] = None,
    inline_count: Annotated[
        Optional[InlineCount], typer.Option("--inline-count")
    ] = None,
    count: Annotated[bool, typer.Option("--count", "-c")] = False,
    search: Annotated[Optional[str], typer.Option("--search")] = None,
    json: Annotated[
        bool, typer.Option("--json", help="Print the query settings as JSON")
    ] = False,
    table: Annotated[
        bool, typer.Option("--table", help="Print a breakdown of the query")
    ] = False,
) -> None:
    """Build an OData query URL."""
    config = CONFIGURATION_REPO.get_config()

    if base_uri is None:
        base_uri = config["base_uri"]
    if base_uri is None:
        raise typer.BadParameter(
            "No base URI given and none configured (see 'config set --base-uri')"
        )

    query = Tso(base_uri)
    if config["default_top"] is not None:
        query.set_top_default(config["default_top"])
    if config["default_format"] is not None:
        query.format_default_custom(config["default_format"])

    param_order = ctx.meta.get(OrderedOptionsCommand.PARAM_ORDER_KEY, [])
    given = {"filters": filters, "and_filters": and_filters, "or_filters": or_filters}
    for join, filter_text in ordered_filters(param_order, given):
        clause = parse_filter_clause(filter_text)
        match join:
            case JoinOperator.OR:
                query.or_filter(clause)
            case JoinOperator.AND:
                query.and_filter(clause)
            case _:
                query.filter(clause)
    for property in remove_filters or []:
        query.remove_filter(property)

    for order_by_text in order_by or []:
        property, direction = parse_order_by(order_by_text)
        query.order_by(property)
        if direction == OrderByDirection.ASC:
            query.asc()
        elif direction == OrderByDirection.DESC:
            query.desc()

    if top is not None:
        query.top(top)
    if skip is not None:
        query.skip(skip)
    selected = parse_select(select)
    if selected:
        query.select(selected)
    if expand is not None:
        query.expand(expand)
    if format is not None:
        query.format_custom(format)
    if inline_count == InlineCount.ALL_PAGES:
        query.inline_count_all_pages()
    elif inline_count == InlineCount.NONE:
        query.inline_count_none()
    if count:
        query.count()
    if search is not None:
        query.search(search)

    console = Console()
    if json:
        console.print_json(query.to_json())
    elif table:
        query_report(query)
    else:
        console.print(str(query), markup=False, highlight=False, soft_wrap=True)


FILTER_JOINS: dict[str, Optional[JoinOperator]] = {
    "filters": None,
    "and_filters": JoinOperator.AND,
    "or_filters": JoinOperator.OR,
}


def ordered_filters(
    param_order: list[str], given: dict[str, Optional[list[str]]]
) -> list[tuple[Optional[JoinOperator], str]]:
    """
    Pair each filter option value with its join, in the order the options
    appeared on the command line. Values missing from ``param_order`` keep
    their per-option order and follow the ordered ones.
    """
    pending = {name: deque(given.get(name) or []) for name in FILTER_JOINS}
    ordered: list[tuple[Optional[JoinOperator], str]] = []
    for name in param_order:
        if name in pending and pending[name]:
            ordered.append((FILTER_JOINS[name], pending[name].popleft()))
    for name, values in pending.items():
        ordered.extend((FILTER_JOINS[name], value) for value in values)
    return ordered
