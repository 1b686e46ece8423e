# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core


class AliasedTyperGroup(typer.core.TyperGroup):
    """Custom TyperGroup that supports comma-separated command aliases"""

    _CMD_SPLIT_P = re.compile(r" ?, ?")

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        """Override to resolve aliases to the full command name"""
        cmd_name = self._group_cmd_name(cmd_name)
        return super().get_command(ctx, cmd_name)

    def _group_cmd_name(self, default_name: str) -> str:
        """Find the full command name if default_name is an alias"""
        for cmd in self.commands.values():
            name = cmd.name
            if name and default_name in self._CMD_SPLIT_P.split(name):
                return name
        return default_name

    def list_commands(self, ctx: click.Context) -> list[str]:
        return sorted(self.commands)


class OrderedOptionsCommand(typer.core.TyperCommand):
    """TyperCommand that records the order its parameters were given in"""

    PARAM_ORDER_KEY = "tsodata.param_order"

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        # The parser consumes the list it is given
        parser = self.make_parser(ctx)
        _, _, param_order = parser.parse_args(args=list(args))
        ctx.meta[self.PARAM_ORDER_KEY] = [param.name for param in param_order]
        return super().parse_args(ctx, args)
