"""
Ornament Ledger - inventory lifecycle and precious-metal price ledger.
"""
__version__ = "0.1.0"
