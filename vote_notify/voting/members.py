"""Load the TSC roster from MAINTAINERS.yaml."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import Reviewer

DEFAULT_MAINTAINERS_FILE = "MAINTAINERS.yaml"


def load_maintainers(path: str | Path = DEFAULT_MAINTAINERS_FILE) -> list[Reviewer]:
    """Parse every maintainer entry in the roster file.

    Args:
        path: Path to MAINTAINERS.yaml

    Returns:
        List of Reviewer objects in file order

    Raises:
        ValueError: If the file is missing or not a list of maintainers
    """
    roster_path = Path(path)
    if not roster_path.is_file():
        raise ValueError(f"Maintainers file {roster_path} not found")

    with open(roster_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or []

    if not isinstance(data, list):
        raise ValueError(
            f"Maintainers file {roster_path} must contain a list of maintainers"
        )

    try:
        return [Reviewer.model_validate(entry) for entry in data]
    except ValidationError as e:
        raise ValueError(f"Invalid maintainer entry in {roster_path}: {e}") from e


def load_tsc_members(path: str | Path = DEFAULT_MAINTAINERS_FILE) -> list[Reviewer]:
    """Maintainers flagged with ``isTscMember: true``."""
    return [member for member in load_maintainers(path) if member.is_tsc_member]
