"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from rental_returns import strings
from rental_returns.config import AppConfig
from rental_returns.domain.models import Location, Vehicle
from rental_returns.logging_config import configure_logging, get_logger
from rental_returns.paths import get_config_path
from rental_returns.services.errors import ServiceError
from rental_returns.services.rental_service import RentalService
from rental_returns.services.return_policies import (
    AnyLocationPolicy,
    OriginOnlyPolicy,
    ReturnPolicy,
    available_policies,
    create_return_policy,
)
from rental_returns.utils.return_settings import (
    load_return_settings,
    require_name,
    save_return_settings,
)
from rental_returns.version import __version__

DEFAULT_VEHICLE_MODEL = "Sedan"
EXIT_CONFIG_ERROR = 2


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rental-returns",
        description="Verifica se um veículo pode ser devolvido em uma locadora.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Registra também as mensagens de depuração no log.",
    )
    parser.add_argument("--origin", help="Locadora de origem do aluguel.")
    parser.add_argument(
        "--policy",
        help=f"Política de devolução ({', '.join(available_policies())}).",
    )
    parser.add_argument(
        "--model",
        help=f"Modelo do veículo devolvido. Padrão: {DEFAULT_VEHICLE_MODEL}.",
    )
    parser.add_argument(
        "--destination",
        help="Locadora de devolução. Padrão: a própria origem.",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Salva origem e política como padrão.",
    )
    modes = parser.add_mutually_exclusive_group()
    modes.add_argument(
        "--demo",
        action="store_true",
        help="Executa os dois exemplos de devolução.",
    )
    modes.add_argument(
        "--list-policies",
        action="store_true",
        help="Lista as políticas de devolução disponíveis.",
    )
    args = parser.parse_args(argv)
    if args.demo or args.list_policies:
        given = [
            option
            for option, value in (
                ("--origin", args.origin),
                ("--policy", args.policy),
                ("--model", args.model),
                ("--destination", args.destination),
                ("--save", args.save or None),
            )
            if value is not None
        ]
        if given:
            mode = "--demo" if args.demo else "--list-policies"
            parser.error(f"{mode} não aceita {', '.join(given)}.")
    if args.model is None:
        args.model = DEFAULT_VEHICLE_MODEL
    return args


def run_demo() -> list[bool]:
    """Run the two illustrated returns, one per policy, and print each verdict."""
    origin = Location("Locadora A")
    runs: list[tuple[ReturnPolicy, Vehicle, Location]] = [
        (OriginOnlyPolicy(), Vehicle("Sedan"), Location("Locadora A")),
        (AnyLocationPolicy(), Vehicle("SUV"), Location("Locadora B")),
    ]
    results = []
    for index, (policy, vehicle, destination) in enumerate(runs, start=1):
        service = RentalService(origin, policy)
        print(strings.DEMO_RUN_HEADER.format(index=index, policy=policy.key))
        allowed = service.return_vehicle(vehicle, destination)
        print(strings.format_verdict(allowed))
        results.append(allowed)
    return results


def _list_policies() -> None:
    print(f"{strings.TITLE_POLICIES}:")
    for key in available_policies():
        policy = create_return_policy(key)
        print(f"  {key}: {policy.description}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the RentalReturns command line."""
    args = _parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    config = AppConfig()
    logger = get_logger(__name__)
    logger.info("Starting %s (%s)", config.app_name, config.organization_name)

    if args.list_policies:
        _list_policies()
        return 0
    if args.demo:
        run_demo()
        return 0

    config_path = get_config_path()
    try:
        settings = load_return_settings(config_path).with_overrides(
            origin_name=args.origin, policy_key=args.policy
        )
        origin_name = require_name(settings.origin_name, "a locadora de origem")
        destination_name = require_name(
            args.destination if args.destination is not None else origin_name,
            "a locadora de devolução",
        )
        model = require_name(args.model, "o modelo do veículo")
        policy = create_return_policy(settings.policy_key)
    except ServiceError as exc:
        logger.error("Configuração inválida: %s", exc)
        print(strings.format_error(str(exc)), file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if args.save:
        save_return_settings(config_path, settings)
        logger.info("Configuração salva em %s", config_path)

    service = RentalService(Location(origin_name), policy)
    allowed = service.return_vehicle(Vehicle(model), Location(destination_name))
    print(strings.format_verdict(allowed))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
