"""
Study Entity

A study is the tenant boundary: every account belongs to exactly one study,
and the study carries the email templates used by the account workflows.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel
from sqlmodel import Column, DateTime, Field, JSON, SQLModel


class EmailTemplate(BaseModel):
    """Subject and body with ${name} substitution tokens"""

    subject: str = ""
    body: str = ""


DEFAULT_VERIFY_EMAIL_TEMPLATE = {
    "subject": "Verify your email address",
    "body": "Please verify your email for ${studyName} by following this link: ${url}",
}
DEFAULT_RESET_PASSWORD_TEMPLATE = {
    "subject": "Reset your password",
    "body": "Reset your ${studyName} password here: ${url}. "
    "The link expires in ${expirationWindow} hours.",
}
DEFAULT_ACCOUNT_EXISTS_TEMPLATE = {
    "subject": "Account already exists",
    "body": "You already have a ${studyName} account. If you forgot your password, "
    "reset it here: ${url}. The link expires in ${expirationWindow} hours.",
}


class Study(SQLModel, table=True):
    """
    Study entity - tenant and configuration holder for accounts.

    Business Rules:
    - identifier is the public, URL-embedded key of the study
    - Templates are stored as JSON objects with subject/body keys
    """

    __tablename__ = "studies"

    identifier: str = Field(primary_key=True, max_length=60)
    name: str = Field(max_length=255)
    sponsor_name: Optional[str] = Field(default=None, max_length=255)
    support_email: Optional[str] = Field(default=None, max_length=255)

    verify_email_template: dict = Field(
        default_factory=lambda: dict(DEFAULT_VERIFY_EMAIL_TEMPLATE), sa_column=Column(JSON)
    )
    reset_password_template: dict = Field(
        default_factory=lambda: dict(DEFAULT_RESET_PASSWORD_TEMPLATE), sa_column=Column(JSON)
    )
    account_exists_template: dict = Field(
        default_factory=lambda: dict(DEFAULT_ACCOUNT_EXISTS_TEMPLATE), sa_column=Column(JSON)
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    def get_verify_email_template(self) -> EmailTemplate:
        return EmailTemplate.model_validate(self.verify_email_template or {})

    def get_reset_password_template(self) -> EmailTemplate:
        return EmailTemplate.model_validate(self.reset_password_template or {})

    def get_account_exists_template(self) -> EmailTemplate:
        return EmailTemplate.model_validate(self.account_exists_template or {})
