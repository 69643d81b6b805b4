"""sixtydays: day-numbered Python exercises behind one CLI."""

__version__ = "0.4.0"
