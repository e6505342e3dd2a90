"""Shared click parameter types."""

from __future__ import annotations

import click


class NumberParamType(click.ParamType):
    """Accepts ints and floats, keeping ints as ints (``3`` not ``3.0``)."""

    name = "number"

    def convert(self, value, param, ctx):
        if isinstance(value, (int, float)):
            return value
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            self.fail(f"{value!r} is not a number", param, ctx)


NUMBER = NumberParamType()
