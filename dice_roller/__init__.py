"""D&D dice roller: roll engine, preset matching and roll history storage."""

__version__ = "0.1.0"
