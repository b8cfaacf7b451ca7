"""Contribution source interface."""

from typing import Protocol

from gitpulse.core.contributions import ContributionDay


class ContributionSource(Protocol):
    """Interface for fetching a user's contribution calendar from a remote."""

    def fetch_calendar(self, username: str, token: str | None = None) -> list[ContributionDay]:
        """Fetch and flatten the calendar. Raises on any remote failure."""
        ...
