"""Storage manager for the vote state file."""

import json
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console

from .models import VoteState

console = Console()

DEFAULT_STATE_DIR = ".vote_state"
DEFAULT_STATE_FILE = "vote_status.json"


class StateManager:
    """Reads and writes ``vote_status.json`` inside the state directory."""

    def __init__(
        self,
        base_path: str | Path = DEFAULT_STATE_DIR,
        filename: str = DEFAULT_STATE_FILE,
    ):
        """Initialize state manager.

        Args:
            base_path: Directory holding the state file (the state branch checkout)
            filename: Name of the JSON state file
        """
        self.base_path = Path(base_path)
        self.file_path = self.base_path / filename

    def _initialize(self, write: bool = True) -> VoteState:
        """Return empty state, writing an empty state file when ``write`` is set."""
        if write:
            console.print(f"Initializing {self.file_path}")
            self.base_path.mkdir(parents=True, exist_ok=True)
            self.file_path.write_text("{}\n", encoding="utf-8")
        return VoteState()

    def load(self, initialize: bool = True) -> VoteState:
        """Load state, starting fresh when the file is missing, empty or unreadable.

        Args:
            initialize: Overwrite a missing or unusable file with ``{}``.
                Read-only callers pass False to leave the file untouched.

        Returns:
            VoteState parsed from disk, or empty state
        """
        if not self.file_path.is_file():
            return self._initialize(initialize)

        try:
            raw = self.file_path.read_text(encoding="utf-8")
        except OSError as e:
            console.print(f"Warning: Could not read {self.file_path}: {e}")
            return self._initialize(initialize)

        if not raw.strip():
            return self._initialize(initialize)

        try:
            data = json.loads(raw)
            if not isinstance(data, dict):
                raise ValueError("state file must contain a JSON object")
            return VoteState.from_json_dict(data)
        except (ValueError, ValidationError) as e:
            console.print(
                f"Warning: Invalid state in {self.file_path}, starting fresh: {e}"
            )
            return self._initialize(initialize)

    def save(self, state: VoteState) -> Path:
        """Save state to the JSON file.

        Args:
            state: VoteState to persist

        Returns:
            Path to the saved file
        """
        self.base_path.mkdir(parents=True, exist_ok=True)

        with open(self.file_path, "w", encoding="utf-8") as f:
            json.dump(state.to_json_dict(), f, indent=2, sort_keys=True)
            f.write("\n")

        console.print(f"Saved vote state to {self.file_path}")
        return self.file_path
