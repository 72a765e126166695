"""Rental service for vehicle return rules."""

from __future__ import annotations

from rental_returns.domain.models import Location, Vehicle
from rental_returns.logging_config import get_logger
from rental_returns.services.return_policies import ReturnPolicy


class RentalService:
    """Service bound to one origin branch and one return policy."""

    def __init__(self, origin: Location, policy: ReturnPolicy) -> None:
        self._origin = origin
        self._policy = policy
        self._logger = get_logger(self.__class__.__name__)

    @property
    def origin(self) -> Location:
        return self._origin

    @property
    def policy(self) -> ReturnPolicy:
        return self._policy

    def return_vehicle(self, vehicle: Vehicle, destination: Location) -> bool:
        allowed = self._policy.decide(vehicle, self._origin, destination)
        self._logger.info(
            "Devolução de %s em %s (origem %s, %s): %s",
            vehicle,
            destination,
            self._origin,
            self._policy.__class__.__name__,
            "permitida" if allowed else "recusada",
        )
        return allowed
