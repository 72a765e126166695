import logging

import pytest

from rental_returns.domain.models import Location, Vehicle
from rental_returns.services.rental_service import RentalService
from rental_returns.services.return_policies import (
    AnyLocationPolicy,
    OriginOnlyPolicy,
    ReturnPolicy,
)


class RecordingPolicy(ReturnPolicy):
    key = "recording"

    def __init__(self, verdict):
        super().__init__()
        self.verdict = verdict
        self.calls = []

    def decide(self, vehicle, origin, destination):
        self.calls.append((vehicle, origin, destination))
        return self.verdict


@pytest.mark.parametrize(
    "policy, model, destination, expected",
    [
        (OriginOnlyPolicy(), "Sedan", "Locadora A", True),
        (OriginOnlyPolicy(), "Sedan", "Locadora B", False),
        (AnyLocationPolicy(), "SUV", "Locadora B", True),
        (AnyLocationPolicy(), "SUV", "Locadora A", True),
    ],
)
def test_return_scenarios(policy, model, destination, expected):
    service = RentalService(Location("Locadora A"), policy)
    assert service.return_vehicle(Vehicle(model), Location(destination)) is expected


@pytest.mark.parametrize("verdict", [True, False])
def test_return_vehicle_passes_arguments_through(verdict):
    origin = Location("Locadora A")
    vehicle = Vehicle("Sedan")
    destination = Location("Locadora B")
    policy = RecordingPolicy(verdict)
    service = RentalService(origin, policy)

    assert service.return_vehicle(vehicle, destination) is verdict
    assert len(policy.calls) == 1
    called_vehicle, called_origin, called_destination = policy.calls[0]
    assert called_vehicle is vehicle
    assert called_origin is origin
    assert called_destination is destination


def test_repeated_calls_are_independent():
    service = RentalService(Location("Locadora A"), OriginOnlyPolicy())
    vehicle = Vehicle("Sedan")
    destinations = ["Locadora B", "Locadora A", "Locadora C", "Locadora A"]
    results = [service.return_vehicle(vehicle, Location(name)) for name in destinations]
    assert results == [False, True, False, True]


def test_service_keeps_references():
    origin = Location("Locadora A")
    policy = AnyLocationPolicy()
    service = RentalService(origin, policy)
    assert service.origin is origin
    assert service.policy is policy
    with pytest.raises(AttributeError):
        service.origin = Location("Locadora B")


def test_return_vehicle_logs_decision(caplog):
    service = RentalService(Location("Locadora A"), OriginOnlyPolicy())
    with caplog.at_level(logging.INFO, logger="RentalService"):
        service.return_vehicle(Vehicle("Sedan"), Location("Locadora B"))
    assert "recusada" in caplog.text
    assert "Locadora B" in caplog.text


class Van:
    """Vehicle stand-in without a ``model`` attribute."""


def test_return_vehicle_does_not_inspect_vehicle(caplog):
    service = RentalService(Location("Locadora A"), AnyLocationPolicy())
    with caplog.at_level(logging.INFO, logger="RentalService"):
        assert service.return_vehicle(Van(), Location("Locadora B")) is True
    assert "permitida" in caplog.text
