"""Tag Ports."""

from bookstore.application.tags.ports.tag_gateway import TagCommandGateway
from bookstore.application.tags.ports.tag_reader import TagReader

__all__ = ["TagCommandGateway", "TagReader"]
