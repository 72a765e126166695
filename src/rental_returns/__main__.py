"""Module entry point for python -m rental_returns."""

from __future__ import annotations

from rental_returns.app import main


if __name__ == "__main__":
    raise SystemExit(main())
