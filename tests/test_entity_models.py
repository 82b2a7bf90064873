"""Tests for the Project and Developer entities.

Covers:
- budget / bug_count clamping on construction and on assignment
- is_valid rules for both entities
- quality score and performance rating, including band boundaries
- lenient parsing of the completed-feature count
"""

import pytest

from devtrack.models import Developer, HasIdentity, Project
from devtrack.models.developer import rating_for_score


class TestProjectModel:
    def test_negative_budget_clamped_on_construction(self):
        project = Project(name="Portal", client="Acme", budget=-5)
        assert project.budget == 0

    def test_negative_budget_clamped_on_assignment(self):
        project = Project(name="Portal", client="Acme", budget=100)
        project.budget = -5
        assert project.budget == 0

    def test_valid_project(self):
        assert Project(name="Portal", client="Acme", budget=1).is_valid() is True

    @pytest.mark.parametrize(
        "name, client, budget",
        [
            ("", "Acme", 100),
            ("   ", "Acme", 100),
            (None, "Acme", 100),
            ("Portal", " ", 100),
            ("Portal", "Acme", 0),
            ("Portal", "Acme", -10),
        ],
    )
    def test_invalid_project(self, name, client, budget):
        assert Project(name=name, client=client, budget=budget).is_valid() is False

    def test_str(self):
        assert str(Project(name="Portal", client="Acme", budget=5)) == "Portal - Acme"

    def test_has_identity(self):
        assert isinstance(Project(id=3), HasIdentity)


class TestDeveloperModel:
    def _dev(self, features: str | None, bugs: int = 0) -> Developer:
        return Developer(
            project_id=1,
            name="Sari",
            contract_status="Kontrak",
            features_completed=features,
            bug_count=bugs,
        )

    def test_negative_bug_count_clamped(self):
        dev = self._dev("10", bugs=-3)
        assert dev.bug_count == 0
        dev.bug_count = -1
        assert dev.bug_count == 0

    def test_zero_features_scores_zero(self):
        dev = self._dev("0", bugs=2)
        assert dev.quality_score() == 0
        assert dev.performance_rating() == "Needs Improvement"

    def test_no_bugs_is_excellent(self):
        dev = self._dev("10", bugs=0)
        assert dev.quality_score() == 100
        assert dev.performance_rating() == "Excellent"

    def test_half_bugs_needs_improvement(self):
        dev = self._dev("10", bugs=5)
        assert dev.quality_score() == 50
        assert dev.performance_rating() == "Needs Improvement"

    @pytest.mark.parametrize("features", ["abc", "", "  ", None, "1.5", "1_0"])
    def test_unparseable_features_score_zero(self, features):
        assert self._dev(features, bugs=1).quality_score() == 0

    def test_surrounding_whitespace_is_tolerated(self):
        assert self._dev(" 4 ", bugs=1).quality_score() == 75

    def test_score_can_go_negative(self):
        dev = self._dev("2", bugs=5)
        assert dev.quality_score() == pytest.approx(-150.0)
        assert dev.performance_rating() == "Needs Improvement"

    @pytest.mark.parametrize(
        "bugs, rating",
        [
            (1, "Excellent"),  # 87.5
            (2, "Good"),  # 75
            (3, "Average"),  # 62.5
            (4, "Needs Improvement"),  # 50
        ],
    )
    def test_rating_bands(self, bugs, rating):
        assert self._dev("8", bugs=bugs).performance_rating() == rating

    @pytest.mark.parametrize(
        "score, rating",
        [
            (85.0, "Excellent"),
            (84.99, "Good"),
            (70.0, "Good"),
            (69.99, "Average"),
            (55.0, "Average"),
            (54.99, "Needs Improvement"),
        ],
    )
    def test_rating_band_lower_bounds_inclusive(self, score, rating):
        assert rating_for_score(score) == rating

    def test_valid_developer(self):
        assert self._dev("3").is_valid() is True

    def test_invalid_developer(self):
        assert self._dev("").is_valid() is False
        dev = self._dev("3")
        dev.project_id = 0
        assert dev.is_valid() is False
        dev = self._dev("3")
        dev.contract_status = " "
        assert dev.is_valid() is False

    def test_str(self):
        assert str(self._dev("1")) == "Sari - Kontrak"
