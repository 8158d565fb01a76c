"""Solutions to classic algorithm exercises, with a small command line front end."""

__version__ = "0.1.0"