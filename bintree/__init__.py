"""Binary trees of integers: nodes with traversals and measurements, and ASCII rendering."""

__version__ = "0.1.0"