"""Car rental return validation with pluggable return policies."""

from rental_returns.version import __version__

__all__ = ["__version__"]
