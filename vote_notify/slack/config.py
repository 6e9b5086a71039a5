"""Configuration for Slack integration."""

import os
from typing import Optional


class SlackConfig:
    """Configuration class for Slack API integration."""

    def __init__(self) -> None:
        """Initialize Slack configuration from environment variables."""
        self.bot_token: Optional[str] = os.getenv("SLACK_BOT_TOKEN")
        self.alert_webhook_url: Optional[str] = os.getenv("SLACK_ALERT_WEBHOOK")

    def is_configured(self) -> bool:
        """Check if direct messages can be sent."""
        return bool(self.bot_token)

    def alerts_configured(self) -> bool:
        """Check if the failure alert webhook is set."""
        return bool(self.alert_webhook_url)

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        if not self.bot_token:
            raise ValueError(
                "SLACK_BOT_TOKEN environment variable is required for Slack notifications"
            )
