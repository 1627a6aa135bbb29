"""List Shuttle: two observable lists with a selection-transfer command."""

__version__ = "0.1.0"
