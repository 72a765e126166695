"""Return policies deciding where a rented vehicle may be returned.

Each policy answers a single question: given the vehicle, the branch it
was rented from and the branch where the customer is trying to return it,
is the return allowed? Policies hold no state, so one instance can be
shared by any number of rental services.

Policies are selected by key through ``create_return_policy``; register a
new variant by adding it to ``RETURN_POLICIES``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from rental_returns.domain.models import Location, Vehicle
from rental_returns.logging_config import get_logger
from rental_returns.services.errors import UnknownPolicyError


class ReturnPolicy(ABC):
    """Decision rule for vehicle returns."""

    key: str = ""
    description: str = ""

    def __init__(self) -> None:
        self._logger = get_logger(self.__class__.__name__)

    @abstractmethod
    def decide(
        self, vehicle: Vehicle, origin: Location, destination: Location
    ) -> bool:
        """Return True when ``vehicle`` may be returned at ``destination``."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class OriginOnlyPolicy(ReturnPolicy):
    """Vehicles must come back to the branch they were rented from."""

    key = "origin_only"
    description = "Devolução apenas na locadora de origem"

    def decide(
        self, vehicle: Vehicle, origin: Location, destination: Location
    ) -> bool:
        # Exact, case-sensitive match on the branch name.
        allowed = origin.name == destination.name
        self._logger.debug(
            "Origem %r, destino %r: %s", origin.name, destination.name, allowed
        )
        return allowed


class AnyLocationPolicy(ReturnPolicy):
    """Vehicles may be returned at any branch."""

    key = "any_location"
    description = "Devolução em qualquer locadora"

    def decide(
        self, vehicle: Vehicle, origin: Location, destination: Location
    ) -> bool:
        self._logger.debug(
            "Origem %s, destino %s: sempre permitido", origin, destination
        )
        return True


RETURN_POLICIES: dict[str, Callable[[], ReturnPolicy]] = {
    OriginOnlyPolicy.key: OriginOnlyPolicy,
    AnyLocationPolicy.key: AnyLocationPolicy,
}


def available_policies() -> list[str]:
    """Return the registered policy keys in sorted order."""
    return sorted(RETURN_POLICIES)


def create_return_policy(key: str) -> ReturnPolicy:
    """Build the policy registered under ``key``."""
    factory = RETURN_POLICIES.get(key)
    if factory is None:
        raise UnknownPolicyError(key, available_policies())
    return factory()
