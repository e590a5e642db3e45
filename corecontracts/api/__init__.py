"""
corecontracts API package.

This package contains the wire-facing DTOs: request envelopes, resource DTOs and responses.
"""

from . import models

__all__ = ["models"]
