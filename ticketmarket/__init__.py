"""
Ticket marketplace core.

In-memory event registry, ticket lifecycle and resale engine, role-based
authorization and NFT-style query facade.
"""

__version__ = "0.1.0"
