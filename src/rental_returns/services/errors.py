"""Custom service layer errors."""


class ServiceError(Exception):
    """Base error for service-layer failures."""


class ValidationError(ServiceError):
    """Raised when a configuration value fails validation."""


class NotFoundError(ServiceError):
    """Raised when an entity is not found."""


class UnknownPolicyError(NotFoundError):
    """Raised when no return policy is registered under a key."""

    def __init__(self, key: str, available: list[str]) -> None:
        self.key = key
        self.available = available
        super().__init__(
            f"Política de devolução desconhecida: {key!r}. "
            f"Opções: {', '.join(available)}."
        )
