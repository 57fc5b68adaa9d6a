"""Jeep Sales Catalog — read-only model/trim lookup service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
