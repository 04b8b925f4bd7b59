"""
vapwallet - Wallet helpers for VAP agents.
"""

__version__ = "0.1.0"
