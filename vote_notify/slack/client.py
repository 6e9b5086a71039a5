"""Slack client for TSC vote reminders."""

import logging
from typing import Any, Dict, List, Optional

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError
from slack_sdk.webhook import WebhookClient

from ..github_client.models import GitHubIssue
from ..voting.models import Reviewer, VoteProgress
from .config import SlackConfig

logger = logging.getLogger(__name__)

ALERT_TITLE = "🚨 Vote notifications couldn't be sent 🚨"


class SlackClient:
    """Client for sending vote reminders as Slack direct messages."""

    def __init__(self, config: Optional[SlackConfig] = None) -> None:
        """Initialize Slack client with configuration."""
        self.config = config or SlackConfig()
        self._bot_client: Optional[WebClient] = None
        self._webhook_client: Optional[WebhookClient] = None

    @property
    def bot_client(self) -> WebClient:
        """Get or create Slack WebClient instance for the bot token."""
        if self._bot_client is None:
            self.config.validate()
            self._bot_client = WebClient(token=self.config.bot_token)
        return self._bot_client

    @property
    def webhook_client(self) -> Optional[WebhookClient]:
        """Get or create the incoming webhook client used for alerts."""
        if self._webhook_client is None and self.config.alert_webhook_url:
            self._webhook_client = WebhookClient(self.config.alert_webhook_url)
        return self._webhook_client

    def send_vote_reminder(
        self, member: Reviewer, issue: GitHubIssue, progress: VoteProgress
    ) -> bool:
        """
        Send a direct message reminding a member to vote.

        Args:
            member: TSC member who has not voted yet
            issue: The issue holding the vote
            progress: Vote progress for the issue

        Returns:
            True if the message was delivered, False otherwise
        """
        if not member.slack:
            logger.warning(f"No Slack id for {member.name}, skipping direct message")
            return False

        try:
            response = self.bot_client.chat_postMessage(
                channel=member.slack,
                blocks=self._format_reminder(member, issue, progress),
                text=f"Your vote is required on #{issue.number}: {issue.title}",
            )
            return bool(response["ok"])

        except SlackApiError as e:
            logger.error(f"Error sending Slack reminder to {member.name}: {e}")
        except Exception as e:
            logger.error(f"Unexpected error sending Slack reminder: {e}")

        return False

    def send_failure_alert(self, failed_ids: List[str]) -> bool:
        """
        Post one alert listing every recipient that could not be notified.

        Args:
            failed_ids: Slack ids and email addresses that failed

        Returns:
            True if the alert was posted, False otherwise
        """
        if not failed_ids:
            return False

        webhook = self.webhook_client
        if webhook is None:
            logger.warning(
                "SLACK_ALERT_WEBHOOK is not configured, skipping failure alert"
            )
            return False

        try:
            response = webhook.send(
                text=f"{ALERT_TITLE}\n{', '.join(failed_ids)}",
                blocks=self._format_failure_alert(failed_ids),
            )
            if response.status_code != 200:
                logger.error(
                    f"Slack alert webhook returned {response.status_code}: "
                    f"{response.body}"
                )
                return False
            return True

        except Exception as e:
            logger.error(f"Unexpected error posting failure alert: {e}")

        return False

    def _format_reminder(
        self, member: Reviewer, issue: GitHubIssue, progress: VoteProgress
    ) -> List[Dict[str, Any]]:
        """
        Format a vote reminder into Slack Block Kit format.

        Returns:
            List of Slack Block Kit blocks
        """
        days = progress.days_since_start
        day_word = "day" if days == 1 else "days"

        return [
            {
                "type": "section",
                "text": {
                    "type": "mrkdwn",
                    "text": (
                        f"👋 Hi {member.name},\n"
                        f"Your vote is required on the following issue: "
                        f"*<{issue.html_url}|#{issue.number}: {issue.title}>*"
                    ),
                },
            },
            {
                "type": "section",
                "fields": [
                    {
                        "type": "mrkdwn",
                        "text": f"*Open for:* {days} {day_word}",
                    },
                    {
                        "type": "mrkdwn",
                        "text": f"*Vote:* <{progress.vote_comment_url}|Cast your vote>",
                    },
                ],
            },
            {
                "type": "context",
                "elements": [
                    {
                        "type": "mrkdwn",
                        "text": "Thank you for your contribution to the TSC! 🎉",
                    }
                ],
            },
        ]

    def _format_failure_alert(self, failed_ids: List[str]) -> List[Dict[str, Any]]:
        recipients = "\n".join(f"• {failed_id}" for failed_id in failed_ids)
        return [
            {
                "type": "header",
                "text": {"type": "plain_text", "text": ALERT_TITLE},
            },
            {
                "type": "section",
                "text": {"type": "mrkdwn", "text": recipients},
            },
        ]
