"""
Domain Enums

Enumeration types used across domain entities.
"""

from enum import Enum


class AccountStatus(str, Enum):
    """Account status"""

    unverified = "unverified"
    enabled = "enabled"
    disabled = "disabled"
