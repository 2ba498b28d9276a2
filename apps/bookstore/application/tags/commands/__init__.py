"""Tag Commands."""

from bookstore.application.tags.commands.create_tag import CreateTagInteractor

__all__ = ["CreateTagInteractor"]
