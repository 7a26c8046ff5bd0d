"""Lines of Action with an alpha-beta machine player."""

__version__ = "0.1.0"
