"""
Account Entity

A participant or researcher account scoped to one study.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import generate_uuid
from .enums import AccountStatus


class Account(SQLModel, table=True):
    """
    Account entity - the subject of verification and password reset workflows.

    Business Rules:
    - Email is unique within a study, not globally
    - New accounts start unverified; consuming a verification token enables them
    - Password stored as bcrypt hash (cost factor 12)
    - version is the optimistic lock counter, bumped on every update
    """

    __tablename__ = "accounts"

    id: str = Field(default_factory=generate_uuid, primary_key=True, max_length=36)
    study_id: str = Field(foreign_key="studies.identifier", index=True, max_length=60)
    email: str = Field(max_length=255)
    password_hash: Optional[str] = Field(default=None, max_length=60)

    status: AccountStatus = Field(default=AccountStatus.unverified)
    version: int = Field(default=1)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    modified_on: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_account_study_email", "study_id", "email", unique=True),
        Index("idx_account_status", "status"),
    )
