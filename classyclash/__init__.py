"""A top-down action game: a hero, blocking props and enemies that chase him."""

__version__ = "0.1.0"