"""
corecontracts: shared request and response contracts for device services

This is the root package for corecontracts, providing the DTOs, validation
rules and storage-model mapping used between the HTTP boundary and persistence.
"""

__version__ = "2.0.0"
