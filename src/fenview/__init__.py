"""fenview — FEN parsing and board rendering."""

__version__ = "0.1.0"
