"""
Star Atlas Blockchain Service

A small read-only backend that provides:
- Player profiles with names read from Solana PlayerName accounts
- Crew inventories from the Star Atlas catalog API, normalized
"""

__version__ = "0.1.0"
