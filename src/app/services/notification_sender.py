from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from string import Template
from types import MappingProxyType
from typing import Mapping, Optional

from src.domain.entities import EmailTemplate


@dataclass(frozen=True)
class Notification:
    """
    A message to deliver: which template, to whom, and the values for its
    ${name} substitution tokens.
    """

    template: EmailTemplate
    recipient: str
    study_name: str
    support_email: Optional[str] = None
    tokens: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "tokens", MappingProxyType(dict(self.tokens)))

    @property
    def substitutions(self) -> dict[str, str]:
        values = {"studyName": self.study_name, "supportEmail": self.support_email or ""}
        values.update(self.tokens)
        return values

    @property
    def subject(self) -> str:
        return Template(self.template.subject).safe_substitute(self.substitutions)

    @property
    def body(self) -> str:
        return Template(self.template.body).safe_substitute(self.substitutions)


class INotificationSender(ABC):
    """Notification channel - fire-and-forget from the workflow's perspective"""

    @abstractmethod
    async def send(self, notification: Notification) -> None:
        pass
