"""Command-line interface for grocerybill.

Usage:
    grocerybill receipt <bill.toml>
    grocerybill receipt <bill.toml> --strict
    grocerybill receipt <bill.toml> --beancount --date 2026-01-31
    grocerybill demo
"""
