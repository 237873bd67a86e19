"""
CafeOPS package

This package provides the deterministic simulation core of the café
management game.  It separates the domain objects, the scoring and
pricing rules, the customer memory and equipment ledgers, the static
data tables and a thin console layer into distinct subpackages.
"""

__all__ = ["core", "domain", "data", "rules", "ui"]
