"""SanTree: SAN game text parser and move-tree visualizer."""

__version__ = "0.1.0"
