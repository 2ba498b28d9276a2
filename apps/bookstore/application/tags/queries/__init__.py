"""Tag Queries."""

from bookstore.application.tags.queries.list_tags import ListTagsQuery

__all__ = ["ListTagsQuery"]
