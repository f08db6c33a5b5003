"""Data-structure workbench: queue simulation, search structures and minimum cuts."""

__version__ = "0.1.0"