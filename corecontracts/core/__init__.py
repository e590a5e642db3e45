"""
Core package for corecontracts.

Validation rules and storage models shared by every request kind.
"""
