"""Address use cases."""

from app.application.use_cases.addresses.address_operations import AddressService

__all__ = ["AddressService"]
