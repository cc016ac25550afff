"""
Domain Entities

Studies and the accounts that belong to them.
"""

from .enums import AccountStatus
from .study import EmailTemplate, Study
from .account import Account

__all__ = [
    # Enums
    "AccountStatus",
    # Entities
    "Study",
    "Account",
    # Value objects
    "EmailTemplate",
]
