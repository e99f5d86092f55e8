"""Receipt rendering: plain-text receipts and beancount ledger export.

Submodules:
- formatter: per-entry receipt line formatting
- ledger_export: bill -> beancount Transaction
"""
