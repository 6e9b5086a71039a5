"""Mailjet client for TSC vote reminder emails."""

import logging
from html import escape
from typing import Any, Optional

import httpx

from ..github_client.models import GitHubIssue
from ..voting.models import Reviewer, VoteProgress
from .config import MailConfig

logger = logging.getLogger(__name__)

MAILJET_SEND_URL = "https://api.mailjet.com/v3.1/send"


class MailClient:
    """Sends reminder emails with the Mailjet Send API v3.1."""

    def __init__(
        self,
        config: Optional[MailConfig] = None,
        http_client: Optional[httpx.Client] = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize mail client.

        Args:
            config: Mailjet configuration, read from the environment if None
            http_client: Preconfigured httpx client (used by tests)
            timeout: Request timeout in seconds
        """
        self.config = config or MailConfig()
        self.timeout = timeout
        self._http_client = http_client

    @property
    def http_client(self) -> httpx.Client:
        """Get or create the authenticated HTTP client."""
        if self._http_client is None:
            self.config.validate()
            self._http_client = httpx.Client(
                auth=(self.config.api_key or "", self.config.api_secret or ""),
                timeout=self.timeout,
                headers={"User-Agent": "vote-notify/0.1.0"},
            )
        return self._http_client

    def close(self) -> None:
        if self._http_client is not None:
            self._http_client.close()
            self._http_client = None

    def send(
        self,
        to_email: str,
        to_name: str,
        subject: str,
        text: str,
        html: str,
    ) -> bool:
        """Send a single email.

        Returns:
            True if Mailjet accepted the message, False otherwise
        """
        payload = {
            "Messages": [
                {
                    "From": {
                        "Email": self.config.from_email,
                        "Name": self.config.from_name,
                    },
                    "To": [{"Email": to_email, "Name": to_name}],
                    "Subject": subject,
                    "TextPart": text,
                    "HTMLPart": html,
                }
            ]
        }

        try:
            response = self.http_client.post(MAILJET_SEND_URL, json=payload)
            response.raise_for_status()
            return self._accepted(response.json())

        except httpx.HTTPStatusError as e:
            logger.error(
                f"Mailjet rejected email to {to_email}: "
                f"{e.response.status_code} {e.response.text}"
            )
        except httpx.HTTPError as e:
            logger.error(f"Error sending email to {to_email}: {e}")
        except ValueError as e:
            logger.error(f"Invalid Mailjet response for {to_email}: {e}")

        return False

    def _accepted(self, body: dict[str, Any]) -> bool:
        messages = body.get("Messages") or []
        if not messages:
            logger.error(f"Unexpected Mailjet response: {body}")
            return False
        status = messages[0].get("Status")
        if status != "success":
            logger.error(f"Mailjet returned status {status}: {messages[0]}")
            return False
        return True

    def send_vote_reminder(
        self, member: Reviewer, issue: GitHubIssue, progress: VoteProgress
    ) -> bool:
        """Email a member who has not voted on ``issue`` yet."""
        if not member.email:
            logger.warning(f"No email address for {member.name}, skipping email")
            return False

        subject, text, html = self._format_reminder(member, issue, progress)
        return self.send(member.email, member.name, subject, text, html)

    def _format_reminder(
        self, member: Reviewer, issue: GitHubIssue, progress: VoteProgress
    ) -> tuple[str, str, str]:
        """Build subject, plain text and HTML bodies of a reminder."""
        days = progress.days_since_start
        day_word = "day" if days == 1 else "days"
        subject = f"TSC Vote Reminder: #{issue.number} {issue.title}"

        text = (
            f"Hi {member.name},\n\n"
            f"Your vote is required on the following issue: "
            f"#{issue.number} {issue.title}\n{issue.html_url}\n\n"
            f"This vote has been open for {days} {day_word}.\n"
            f"Cast your vote here: {progress.vote_comment_url}\n\n"
            f"Thank you for your contribution to the TSC!\n"
        )

        html = (
            f"<p>Hi {escape(member.name)},</p>"
            f"<p>Your vote is required on the following issue: "
            f'<a href="{escape(issue.html_url)}">'
            f"#{issue.number} {escape(issue.title)}</a></p>"
            f"<p>This vote has been open for <strong>{days} {day_word}</strong>.</p>"
            f'<p><a href="{escape(progress.vote_comment_url)}">Cast your vote</a></p>'
            f"<p>Thank you for your contribution to the TSC!</p>"
        )

        return subject, text, html
