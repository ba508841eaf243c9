"""tasktray: state and configuration engine of a menu-bar task log."""

__version__ = "0.1.0"
