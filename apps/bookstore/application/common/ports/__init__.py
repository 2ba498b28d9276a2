"""Common Ports."""

from bookstore.application.common.ports.transaction_manager import TransactionManager

__all__ = ["TransactionManager"]
