"""Pure contribution calendar logic - no I/O dependencies."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContributionDay:
    """One day of the contribution calendar."""

    date: str
    contribution_count: int

    @classmethod
    def from_api(cls, data: dict) -> "ContributionDay":
        """Build a day from a GraphQL node, defaulting malformed fields."""
        raw_date = data.get("date")
        raw_count = data.get("contributionCount")
        # bool is an int subclass; floats are not whole counts
        if isinstance(raw_count, bool) or not isinstance(raw_count, int) or raw_count < 0:
            raw_count = 0
        return cls(
            date=raw_date if isinstance(raw_date, str) else "",
            contribution_count=raw_count,
        )

    @classmethod
    def from_dict(cls, data: dict) -> "ContributionDay":
        """Strict inverse of to_dict. Raises ValueError on malformed input."""
        if not isinstance(data, dict):
            raise ValueError(f"Expected an object, got {type(data).__name__}")
        day, count = data.get("date"), data.get("contributionCount")
        if not isinstance(day, str):
            raise ValueError("Missing or invalid 'date'")
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ValueError("Missing or invalid 'contributionCount'")
        return cls(date=day, contribution_count=count)

    def to_dict(self) -> dict:
        return {"date": self.date, "contributionCount": self.contribution_count}


@dataclass
class FetchResult:
    """
    Outcome of a contribution fetch.

    Exactly one of data/error is set: data when ok, error otherwise.
    """

    ok: bool
    data: list[ContributionDay] | None = None
    error: str | None = None

    @classmethod
    def success(cls, days: list[ContributionDay]) -> "FetchResult":
        return cls(ok=True, data=list(days), error=None)

    @classmethod
    def failure(cls, message: str) -> "FetchResult":
        return cls(ok=False, data=None, error=message)

    def to_dict(self) -> dict:
        """Host-facing shape, ready for json.dumps."""
        return {
            "ok": self.ok,
            "data": [d.to_dict() for d in self.data] if self.data is not None else None,
            "error": self.error,
        }


class InvalidResponseError(ValueError):
    """Raised when a GraphQL payload lacks the contribution calendar."""

    pass


def flatten_calendar(payload: dict) -> list[ContributionDay]:
    """
    Flatten data.user.contributionsCollection.contributionCalendar.weeks.

    Pure function - no I/O. Days keep the order the API returned them in.
    A week without a contributionDays list contributes nothing.

    Raises:
        InvalidResponseError: if the weeks list is missing.
    """
    node = payload
    for key in ("data", "user", "contributionsCollection", "contributionCalendar", "weeks"):
        node = node.get(key) if isinstance(node, dict) else None
    if not isinstance(node, list):
        raise InvalidResponseError("Invalid response structure")

    days = []
    for week in node:
        contribution_days = week.get("contributionDays") if isinstance(week, dict) else None
        if not isinstance(contribution_days, list):
            continue
        for day in contribution_days:
            days.append(ContributionDay.from_api(day if isinstance(day, dict) else {}))
    return days


def total_contributions(days: list[ContributionDay]) -> int:
    """Sum of contribution counts across all days."""
    return sum(d.contribution_count for d in days)


def intensity_level(count: int) -> int:
    """Heatmap shade (0-4) for a day's contribution count."""
    if count <= 0:
        return 0
    elif count < 3:
        return 1
    elif count < 6:
        return 2
    elif count < 9:
        return 3
    return 4


def group_into_weeks(days: list[ContributionDay], size: int = 7) -> list[list[ContributionDay]]:
    """Chunk a flat day list into consecutive weeks of `size` days."""
    if size <= 0:
        raise ValueError("size must be positive")
    return [days[i : i + size] for i in range(0, len(days), size)]
