"""Centralized user-facing strings."""

from __future__ import annotations

RETURN_RESULT_LABEL = "Pode devolver: "
TITLE_ERROR = "Erro"
TITLE_POLICIES = "Políticas de devolução disponíveis"
DEMO_RUN_HEADER = "Execução {index}: {policy}"


def format_verdict(allowed: bool) -> str:
    return f"{RETURN_RESULT_LABEL}{allowed}"


def format_error(message: str) -> str:
    return f"{TITLE_ERROR}: {message}"
