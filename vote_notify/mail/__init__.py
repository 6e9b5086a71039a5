"""Email reminders sent through the Mailjet Send API."""

from .client import MailClient
from .config import MailConfig

__all__ = ["MailClient", "MailConfig"]
