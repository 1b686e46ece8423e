# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import typer


def validate_log_level(log_level: Optional[str]) -> Optional[str]:
    if log_level is None:
        return None
    if log_level.upper() not in logging.getLevelNamesMapping():
        raise typer.BadParameter(f"Unknown log level '{log_level}'")
    return log_level.upper()
