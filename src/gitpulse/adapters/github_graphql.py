"""GitHub GraphQL adapter - HTTP client for contribution calendars."""

import logging
from datetime import datetime

import requests

from gitpulse.config import Config, load_config
from gitpulse.core.contributions import ContributionDay, InvalidResponseError, flatten_calendar

logger = logging.getLogger(__name__)

CONTRIBUTION_QUERY = """
query($login: String!) {
    user(login: $login) {
        contributionsCollection {
            contributionCalendar {
                weeks {
                    contributionDays {
                        date
                        contributionCount
                    }
                }
            }
        }
    }
}
"""


class FetchError(Exception):
    """Raised when the contribution calendar cannot be fetched."""

    pass


class GitHubGraphQLAdapter:
    """
    GitHub GraphQL API adapter.

    Implements ContributionSource protocol. One POST per call, no retries.
    """

    def __init__(self, config: Config | None = None, session: requests.Session | None = None):
        self.config = config or load_config()
        self._session = session or requests.Session()

    def _headers(self, token: str | None) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "User-Agent": self.config.user_agent,
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _post(self, username: str, token: str | None) -> dict:
        """Send the query and return the decoded payload."""
        logger.debug(f"Fetching contribution calendar for {username}")
        try:
            resp = self._session.post(
                self.config.graphql_url,
                json={"query": CONTRIBUTION_QUERY, "variables": {"login": username}},
                headers=self._headers(token),
                timeout=self.config.request_timeout,
            )
        except requests.RequestException as e:
            raise FetchError(f"Network error: {e}") from e

        if not resp.ok:
            raise FetchError(_status_message(resp))

        try:
            payload = resp.json()
        except ValueError as e:
            raise FetchError(f"JSON parse error: {e}") from e

        if not isinstance(payload, dict):
            raise FetchError("Invalid response structure")
        if payload.get("errors") is not None:
            raise FetchError(f"GraphQL error: {_graphql_messages(payload['errors'])}")
        return payload

    def fetch_calendar(self, username: str, token: str | None = None) -> list[ContributionDay]:
        """Fetch and flatten the user's contribution calendar."""
        payload = self._post(username, token)
        try:
            return flatten_calendar(payload)
        except InvalidResponseError as e:
            raise FetchError(str(e)) from e


def _status_message(resp: requests.Response) -> str:
    """Describe a non-success HTTP response."""
    reset = resp.headers.get("X-RateLimit-Reset")
    if resp.status_code == 429 and reset:
        try:
            reset_at = datetime.fromtimestamp(int(reset))
        except (ValueError, OverflowError, OSError):
            pass
        else:
            return f"Rate limited. Resets at {reset_at.strftime('%Y-%m-%d %H:%M:%S')}"
    return f"GitHub API error: {resp.status_code} {resp.reason or ''}".rstrip()


def _graphql_messages(errors) -> str:
    """Join GraphQL error messages, falling back to the raw value."""
    if isinstance(errors, list):
        messages = [e.get("message", str(e)) if isinstance(e, dict) else str(e) for e in errors]
        return ", ".join(messages)
    return str(errors)
