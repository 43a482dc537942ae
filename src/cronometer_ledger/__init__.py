"""
Cronometer Ledger - typed records from Cronometer CSV exports.

Parses servings, exercises and biometrics exports into immutable,
timezone-aware record collections.
"""

__version__ = "0.1.0"
