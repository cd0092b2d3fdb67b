"""Ride Ledger package.

This package is organized by feature modules (rides, passengers, ledger,
attendance, billing, ...) with a thin Flask controller layer and pure
aggregation functions that never perform I/O.
"""
