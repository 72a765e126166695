"""Version metadata for RentalReturns."""

__version__ = "1.0.0"
__app_name__ = "RentalReturns"
__company__ = "Locadora Exemplo"
