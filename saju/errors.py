"""
Error taxonomy for the chart engine.

Computation is all-or-nothing: any of these is raised before a partial
chart can be produced.
"""


class SajuError(Exception):
    """Base class for every error raised by the engine."""


class InvalidInput(SajuError, ValueError):
    """Birth fields are non-numeric, out of range, or not a real date."""


class CalendarUnsupported(SajuError):
    """A lunar birth date was given without a lunar-to-solar converter."""
