"""Domain models for RentalReturns."""

from rental_returns.domain.models import Location, Vehicle

__all__ = [
    "Location",
    "Vehicle",
]
