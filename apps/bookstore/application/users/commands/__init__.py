"""User Commands."""

from bookstore.application.users.commands.update_profile import UpdateProfileInteractor

__all__ = ["UpdateProfileInteractor"]
