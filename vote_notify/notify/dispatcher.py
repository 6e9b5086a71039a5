"""Send reminders to the members who still owe a vote."""

from pydantic import BaseModel, Field
from rich.console import Console

from ..config import NotificationMethod
from ..github_client.models import GitHubIssue
from ..mail.client import MailClient
from ..slack.client import SlackClient
from ..voting.models import Reviewer, VoteProgress

console = Console()


class DispatchReport(BaseModel):
    """Outcome of all reminders sent during a run."""

    sent: int = Field(0, description="Reminders delivered successfully")
    failed_slack_ids: list[str] = Field(
        default_factory=list, description="Slack recipients that failed"
    )
    failed_emails: list[str] = Field(
        default_factory=list, description="Email recipients that failed"
    )

    @property
    def failed_ids(self) -> list[str]:
        """Every failed recipient, Slack first, without duplicates."""
        return list(dict.fromkeys(self.failed_slack_ids + self.failed_emails))

    @property
    def has_failures(self) -> bool:
        return bool(self.failed_slack_ids or self.failed_emails)

    def record_slack_failure(self, recipient: str) -> None:
        if recipient not in self.failed_slack_ids:
            self.failed_slack_ids.append(recipient)

    def record_email_failure(self, recipient: str) -> None:
        if recipient not in self.failed_emails:
            self.failed_emails.append(recipient)


class NotificationDispatcher:
    """Delivers reminders over the channels selected for the run.

    Failures are recorded in the report and never retried.
    """

    def __init__(
        self,
        method: NotificationMethod,
        slack_client: SlackClient | None = None,
        mail_client: MailClient | None = None,
        dry_run: bool = False,
    ):
        if method.uses_slack and slack_client is None and not dry_run:
            raise ValueError(f"A Slack client is required for method '{method.value}'")
        if method.uses_email and mail_client is None and not dry_run:
            raise ValueError(f"A mail client is required for method '{method.value}'")

        self.method = method
        self.slack_client = slack_client
        self.mail_client = mail_client
        self.dry_run = dry_run

    def dispatch(
        self,
        issue: GitHubIssue,
        progress: VoteProgress,
        report: DispatchReport | None = None,
    ) -> DispatchReport:
        """Remind every member in ``progress.left_to_vote`` about ``issue``.

        Args:
            issue: The vote issue
            progress: Who still has to vote and for how long the vote is open
            report: Report to accumulate into, a new one if None

        Returns:
            The updated report
        """
        report = report if report is not None else DispatchReport()

        for member in progress.left_to_vote:
            console.print(f"Notifying {member.name} about issue #{issue.number}")
            self._notify_member(member, issue, progress, report)

        return report

    def _notify_member(
        self,
        member: Reviewer,
        issue: GitHubIssue,
        progress: VoteProgress,
        report: DispatchReport,
    ) -> None:
        if self.dry_run:
            console.print(
                f"[yellow]Dry run: would notify {member.name} via "
                f"{self.method.value}[/yellow]"
            )
            return

        if self.method.uses_slack and self.slack_client is not None:
            if self.slack_client.send_vote_reminder(member, issue, progress):
                report.sent += 1
            else:
                report.record_slack_failure(member.slack or member.github)

        if self.method.uses_email and self.mail_client is not None:
            if self.mail_client.send_vote_reminder(member, issue, progress):
                report.sent += 1
            else:
                report.record_email_failure(member.email or member.github)
