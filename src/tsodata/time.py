# SPDX-License-Identifier: MIT

import datetime

import pendulum


def python_to_pendulum_utc(python_value: datetime.datetime) -> pendulum.DateTime:
    pendulum_value = pendulum.instance(python_value, tz="local")
    return pendulum_value.in_tz("UTC")


def datetime_to_odata_str(datetime: pendulum.DateTime) -> str:
    """Format as an OData datetime body in UTC, without offset or fraction."""
    return datetime.in_tz("UTC").format("YYYY-MM-DD[T]HH:mm:ss")
