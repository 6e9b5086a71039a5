"""Tests for the end-to-end notification run."""

import subprocess
from datetime import timedelta
from pathlib import Path
from unittest.mock import Mock

import pytest
from github.GithubException import GithubException
from conftest import NOW, make_issue, make_reaction, make_vote_comment

from vote_notify.config import NotificationMethod, NotifySettings
from vote_notify.github_client.client import GitHubClient
from vote_notify.mail.client import MailClient
from vote_notify.notify.dispatcher import NotificationDispatcher
from vote_notify.notify.workflow import run_vote_notification
from vote_notify.slack.client import SlackClient
from vote_notify.state.branch import StateBranch
from vote_notify.state.manager import StateManager
from vote_notify.state.models import VoteState, VoteStatus
from vote_notify.voting.models import Reviewer


class TestRunVoteNotification:
    """Test run_vote_notification."""

    @pytest.fixture
    def settings(self, tmp_path: Path) -> NotifySettings:
        return NotifySettings(
            org="testorg",
            repo="testrepo",
            days=5,
            method=NotificationMethod.BOTH,
            state_dir=tmp_path / ".vote_state",
        )

    @pytest.fixture
    def state_manager(self, settings: NotifySettings) -> StateManager:
        return StateManager(settings.state_dir, settings.state_file)

    @pytest.fixture
    def github_client(self) -> Mock:
        client = Mock(spec=GitHubClient)
        client.list_issues.return_value = [
            make_issue(1, comments=[make_vote_comment(comment_id=101)]),
            make_issue(2, comments=[make_vote_comment(comment_id=202)]),
        ]
        client.get_comment_reactions.return_value = [make_reaction("alice")]
        return client

    @pytest.fixture
    def slack_client(self) -> Mock:
        client = Mock(spec=SlackClient)
        client.send_vote_reminder.return_value = True
        client.send_failure_alert.return_value = True
        return client

    @pytest.fixture
    def mail_client(self) -> Mock:
        client = Mock(spec=MailClient)
        client.send_vote_reminder.return_value = True
        return client

    @pytest.fixture
    def dispatcher(
        self, slack_client: Mock, mail_client: Mock
    ) -> NotificationDispatcher:
        return NotificationDispatcher(
            NotificationMethod.BOTH, slack_client=slack_client, mail_client=mail_client
        )

    def test_first_run_notifies_all_open_votes(
        self,
        settings: NotifySettings,
        github_client: Mock,
        dispatcher: NotificationDispatcher,
        slack_client: Mock,
        state_manager: StateManager,
        tsc_members: list[Reviewer],
    ) -> None:
        result = run_vote_notification(
            settings,
            github_client,
            dispatcher,
            tsc_members,
            state_manager,
            slack_client=slack_client,
            now=NOW,
        )

        github_client.list_issues.assert_called_once_with(
            "testorg", "testrepo", labels=["gitvote/open"], state="open"
        )
        assert result.open_issues == [1, 2]
        assert result.notified_issues == [1, 2]
        # alice voted on both, so only Bob is reminded, on two channels each
        assert result.report.sent == 4
        assert not result.alert_sent
        slack_client.send_failure_alert.assert_not_called()

        saved = state_manager.load()
        for number in (1, 2):
            entry = saved.get(number)
            assert entry is not None
            assert entry.last_notified == NOW

    def test_only_processed_issues_get_timestamp(
        self,
        settings: NotifySettings,
        github_client: Mock,
        dispatcher: NotificationDispatcher,
        state_manager: StateManager,
        tsc_members: list[Reviewer],
    ) -> None:
        """Recent reminders and issues without a vote comment keep their state."""
        recent = NOW - timedelta(days=1)
        state = VoteState()
        state.mark_notified(1, recent)
        state_manager.save(state)
        github_client.list_issues.return_value = [
            make_issue(1, comments=[make_vote_comment(comment_id=101)]),
            make_issue(2),
            make_issue(3, comments=[make_vote_comment(comment_id=303)]),
        ]

        result = run_vote_notification(
            settings, github_client, dispatcher, tsc_members, state_manager, now=NOW
        )

        assert result.notified_issues == [3]
        assert result.skipped_issues == [2]
        saved = state_manager.load()
        entry_1, entry_2, entry_3 = saved.get(1), saved.get(2), saved.get(3)
        assert entry_1 is not None and entry_1.last_notified == recent
        assert entry_2 is not None and entry_2.last_notified is None
        assert entry_3 is not None and entry_3.last_notified == NOW

    def test_closed_votes_are_kept_in_state(
        self,
        settings: NotifySettings,
        github_client: Mock,
        dispatcher: NotificationDispatcher,
        state_manager: StateManager,
        tsc_members: list[Reviewer],
    ) -> None:
        state = VoteState()
        state.mark_notified(77, NOW - timedelta(days=20))
        state_manager.save(state)

        result = run_vote_notification(
            settings, github_client, dispatcher, tsc_members, state_manager, now=NOW
        )

        entry = result.state.get(77)
        assert entry is not None
        assert entry.status == VoteStatus.CLOSED
        assert state_manager.load().get(77) == entry

    def test_failures_trigger_single_alert(
        self,
        settings: NotifySettings,
        github_client: Mock,
        dispatcher: NotificationDispatcher,
        slack_client: Mock,
        mail_client: Mock,
        state_manager: StateManager,
        tsc_members: list[Reviewer],
    ) -> None:
        slack_client.send_vote_reminder.return_value = False
        mail_client.send_vote_reminder.return_value = False

        result = run_vote_notification(
            settings,
            github_client,
            dispatcher,
            tsc_members,
            state_manager,
            slack_client=slack_client,
            now=NOW,
        )

        assert result.report.failed_ids == ["U02BOB", "bob@example.com"]
        slack_client.send_failure_alert.assert_called_once_with(
            ["U02BOB", "bob@example.com"]
        )
        assert result.alert_sent
        # failed reminders still count as processed
        assert result.notified_issues == [1, 2]

    def test_state_branch_checkout_and_push(
        self,
        settings: NotifySettings,
        github_client: Mock,
        dispatcher: NotificationDispatcher,
        state_manager: StateManager,
        tsc_members: list[Reviewer],
    ) -> None:
        branch = Mock(spec=StateBranch)

        run_vote_notification(
            settings,
            github_client,
            dispatcher,
            tsc_members,
            state_manager,
            state_branch=branch,
            now=NOW,
        )

        branch.checkout.assert_called_once()
        branch.commit_and_push.assert_called_once()
        assert "[1, 2]" in branch.commit_and_push.call_args.args[0]

    def test_dry_run_persists_nothing(
        self,
        settings: NotifySettings,
        github_client: Mock,
        slack_client: Mock,
        mail_client: Mock,
        state_manager: StateManager,
        tsc_members: list[Reviewer],
    ) -> None:
        settings = settings.model_copy(update={"dry_run": True})
        dispatcher = NotificationDispatcher(
            NotificationMethod.BOTH,
            slack_client=slack_client,
            mail_client=mail_client,
            dry_run=True,
        )
        branch = Mock(spec=StateBranch)

        result = run_vote_notification(
            settings,
            github_client,
            dispatcher,
            tsc_members,
            state_manager,
            state_branch=branch,
            slack_client=slack_client,
            now=NOW,
        )

        assert result.notified_issues == [1, 2]
        slack_client.send_vote_reminder.assert_not_called()
        branch.commit_and_push.assert_not_called()
        assert state_manager.load().entries == {}

    @pytest.mark.parametrize(
        "error",
        [
            ValueError("Comment 202 on issue #2 not found in testorg/testrepo"),
            GithubException(502, "Bad Gateway", None),
        ],
    )
    def test_unreadable_votes_skip_issue_and_keep_earlier_work(
        self,
        settings: NotifySettings,
        github_client: Mock,
        dispatcher: NotificationDispatcher,
        state_manager: StateManager,
        tsc_members: list[Reviewer],
        error: Exception,
    ) -> None:
        github_client.get_comment_reactions.side_effect = [
            [make_reaction("alice")],
            error,
        ]

        result = run_vote_notification(
            settings, github_client, dispatcher, tsc_members, state_manager, now=NOW
        )

        assert result.notified_issues == [1]
        assert result.skipped_issues == [2]
        assert result.report.sent == 2
        saved = state_manager.load()
        entry_1, entry_2 = saved.get(1), saved.get(2)
        assert entry_1 is not None and entry_1.last_notified == NOW
        assert entry_2 is not None and entry_2.last_notified is None

    def test_failure_alert_sent_when_push_fails(
        self,
        settings: NotifySettings,
        github_client: Mock,
        dispatcher: NotificationDispatcher,
        slack_client: Mock,
        state_manager: StateManager,
        tsc_members: list[Reviewer],
    ) -> None:
        slack_client.send_vote_reminder.return_value = False
        branch = Mock(spec=StateBranch)
        branch.commit_and_push.side_effect = subprocess.CalledProcessError(
            1, ["git", "push"], stderr="rejected"
        )

        with pytest.raises(subprocess.CalledProcessError):
            run_vote_notification(
                settings,
                github_client,
                dispatcher,
                tsc_members,
                state_manager,
                state_branch=branch,
                slack_client=slack_client,
                now=NOW,
            )

        slack_client.send_failure_alert.assert_called_once_with(["U02BOB"])
        entry = state_manager.load().get(1)
        assert entry is not None and entry.last_notified == NOW

    def test_dry_run_leaves_invalid_state_file_untouched(
        self,
        settings: NotifySettings,
        github_client: Mock,
        slack_client: Mock,
        mail_client: Mock,
        state_manager: StateManager,
        tsc_members: list[Reviewer],
    ) -> None:
        settings = settings.model_copy(update={"dry_run": True})
        dispatcher = NotificationDispatcher(
            NotificationMethod.BOTH,
            slack_client=slack_client,
            mail_client=mail_client,
            dry_run=True,
        )
        state_manager.base_path.mkdir(parents=True)
        content = '{"1": {"status": "open", "last_notified": null},}'
        state_manager.file_path.write_text(content, encoding="utf-8")

        run_vote_notification(
            settings, github_client, dispatcher, tsc_members, state_manager, now=NOW
        )

        assert state_manager.file_path.read_text(encoding="utf-8") == content
