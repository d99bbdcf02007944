"""Value objects: immutable domain values compared by structure, not identity."""

from .base import ValueObject
from .kinds import (
    AccountKind,
    AccountType,
    CategoryKind,
    CategoryType,
    ClosedValueObject,
    InvoiceState,
    InvoiceStatus,
    TransactionKind,
    TransactionType,
)
from .money import Money
from .unique_id import UniqueId

__all__ = [
    "AccountKind",
    "AccountType",
    "CategoryKind",
    "CategoryType",
    "ClosedValueObject",
    "InvoiceState",
    "InvoiceStatus",
    "Money",
    "TransactionKind",
    "TransactionType",
    "UniqueId",
    "ValueObject",
]
