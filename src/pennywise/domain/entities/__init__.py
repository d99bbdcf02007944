"""Entities: mutable domain objects with a permanent identity.

Every entity exposes three construction paths (``create`` for new data,
``load`` for persisted state) plus ``update_*`` methods; all of them report
invalid input through a failed `Result` and leave the entity untouched.
"""

from .account import Account, AccountCreateInput, AccountLoadInput, AccountUpdateInput
from .bank import Bank, BankCreateInput, BankLoadInput, BankUpdateInput
from .base import Entity, utc_now
from .card import Card, CardCreateInput, CardLoadInput, CardUpdateInput
from .category import Category, CategoryCreateInput, CategoryLoadInput, CategoryUpdateInput
from .invoice import Invoice, InvoiceCreateInput, InvoiceLoadInput, InvoiceUpdateInput
from .transaction import (
    Transaction,
    TransactionCreateInput,
    TransactionLoadInput,
    TransactionUpdateInput,
)

__all__ = [
    "Account",
    "AccountCreateInput",
    "AccountLoadInput",
    "AccountUpdateInput",
    "Bank",
    "BankCreateInput",
    "BankLoadInput",
    "BankUpdateInput",
    "Card",
    "CardCreateInput",
    "CardLoadInput",
    "CardUpdateInput",
    "Category",
    "CategoryCreateInput",
    "CategoryLoadInput",
    "CategoryUpdateInput",
    "Entity",
    "Invoice",
    "InvoiceCreateInput",
    "InvoiceLoadInput",
    "InvoiceUpdateInput",
    "Transaction",
    "TransactionCreateInput",
    "TransactionLoadInput",
    "TransactionUpdateInput",
    "utc_now",
]
