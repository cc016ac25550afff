"""
Token Payloads

The data stored in the TTL store under an issued token. Both payloads share
one encoding: compact JSON with camelCase keys.
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from src.domain.errors import InvalidArgumentError, require_not_blank


class TokenPayload(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    study_id: str = Field(alias="studyId")

    # InvalidArgumentError is not a ValueError, so pydantic lets it propagate
    @field_validator("*", mode="before")
    @classmethod
    def _not_blank(cls, value, info):
        return require_not_blank(value, info.field_name)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, raw: str):
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            raise InvalidArgumentError(f"Stored {cls.__name__} is malformed: {exc}") from exc


class VerificationPayload(TokenPayload):
    """Identifies the account whose email a verification token confirms"""

    subject_id: str = Field(alias="subjectId")


class ResetPayload(TokenPayload):
    """Identifies the account whose password a reset token may change"""

    email: str
