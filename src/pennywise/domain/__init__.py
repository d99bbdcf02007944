"""Domain layer for PENNYWISE.

Contains business rules: entities, value objects, the validation framework and
the error taxonomy they report with. This package is deliberately
technology-agnostic.

Dependency rule: do not import from `pennywise.logging` handlers or any outer
layer; modules only obtain loggers via `logging.getLogger(__name__)`.
"""
