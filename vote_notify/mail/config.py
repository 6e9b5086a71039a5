"""Configuration for Mailjet email delivery."""

import os
from typing import Optional

DEFAULT_FROM_NAME = "TSC Vote Notifications"


class MailConfig:
    """Configuration class for Mailjet API integration."""

    def __init__(self) -> None:
        """Initialize mail configuration from environment variables."""
        self.api_key: Optional[str] = os.getenv("MAILJET_API_KEY")
        self.api_secret: Optional[str] = os.getenv("MAILJET_API_SECRET")
        self.from_email: Optional[str] = os.getenv("MAIL_FROM_EMAIL")
        self.from_name: str = os.getenv("MAIL_FROM_NAME", DEFAULT_FROM_NAME)

    def is_configured(self) -> bool:
        """Check if emails can be sent."""
        return bool(self.api_key and self.api_secret and self.from_email)

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        missing = []
        if not self.api_key:
            missing.append("MAILJET_API_KEY")
        if not self.api_secret:
            missing.append("MAILJET_API_SECRET")
        if not self.from_email:
            missing.append("MAIL_FROM_EMAIL")

        if missing:
            raise ValueError(
                f"Environment variables required for email notifications: {', '.join(missing)}"
            )
