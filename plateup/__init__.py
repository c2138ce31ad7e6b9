"""PlateUp static article generator."""

__version__ = "0.1.0"
