"""Developer domain entity and its quality metric."""

import re

from pydantic import BaseModel, ConfigDict, field_validator

from devtrack.models.common import is_blank

_INTEGER = re.compile(r"[+-]?\d+")

# (lower bound, rating), checked in order
RATING_BANDS = (
    (85.0, "Excellent"),
    (70.0, "Good"),
    (55.0, "Average"),
)
LOWEST_RATING = "Needs Improvement"


def rating_for_score(score: float) -> str:
    for lower_bound, rating in RATING_BANDS:
        if score >= lower_bound:
            return rating
    return LOWEST_RATING


def parse_feature_count(text: str | None) -> int | None:
    """Parse a completed-feature count, or None if it is not an integer."""
    if is_blank(text):
        return None
    stripped = text.strip()
    if not _INTEGER.fullmatch(stripped):
        return None
    return int(stripped)


class Developer(BaseModel):
    """A person assigned to exactly one project."""

    model_config = ConfigDict(validate_assignment=True)

    id: int = 0
    project_id: int = 0
    name: str | None = None
    contract_status: str | None = None
    features_completed: str | None = None
    bug_count: int = 0

    @field_validator("bug_count")
    @classmethod
    def _clamp_bug_count(cls, value: int) -> int:
        return value if value >= 0 else 0

    def quality_score(self) -> float:
        """Share of completed features not offset by a bug, as a percentage.

        Zero when the feature count is blank, not an integer, or zero.
        Not clamped: more bugs than features gives a negative score.
        """
        features = parse_feature_count(self.features_completed)
        if not features:
            return 0.0
        return 100 - (self.bug_count / features) * 100

    def performance_rating(self) -> str:
        return rating_for_score(self.quality_score())

    def is_valid(self) -> bool:
        return (
            self.project_id > 0
            and not is_blank(self.name)
            and not is_blank(self.contract_status)
            and not is_blank(self.features_completed)
            and self.bug_count >= 0
        )

    def __str__(self) -> str:
        return f"{self.name} - {self.contract_status}"
