# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from tsodata.query.filter import FilterEntry, PrecedenceGroup
from tsodata.tso import Tso


def query_report(query: Tso) -> None:
    components_table = Table(box=box.SIMPLE)
    components_table.add_column("option", style="cyan")
    components_table.add_column("value", style="magenta")

    for component in query.components():
        option, _, value = component.partition("=")
        components_table.add_row(option, Text(value))

    console = Console()
    console.print(components_table)

    if query.filter_settings.is_set():
        console.print(filter_tree(query.filter_settings.active))

    console.print(Text(str(query)), soft_wrap=True)


def filter_tree(entries: list[FilterEntry], label: str = "$filter") -> Tree:
    tree = Tree(Text(label, style="bold"))
    __add_entries(tree, entries)
    return tree


def __add_entries(tree: Tree, entries: list[FilterEntry]) -> None:
    for entry in entries:
        prefix = "" if entry.join is None else f"{entry.join} "
        if isinstance(entry.clause, PrecedenceGroup):
            branch = tree.add(Text(f"{prefix}( )", style="yellow"))
            __add_entries(branch, entry.clause.members)
        else:
            tree.add(Text(prefix + entry.clause.render()))
