"""PENNYWISE

Domain layer of a personal-finance tracker. It models bank accounts, banks,
credit cards, categories, invoices and transactions, and reports every
validation problem through explicit results instead of exceptions.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
