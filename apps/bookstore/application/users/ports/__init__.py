"""User Ports."""

from bookstore.application.users.ports.profile_gateway import ProfileCommandGateway
from bookstore.application.users.ports.profile_reader import ProfileReader

__all__ = ["ProfileCommandGateway", "ProfileReader"]
