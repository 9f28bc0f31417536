"""
Tests for ranking and the rotating display window.
"""
import pytest

from idea_lab.engine.ranking import rank, rank_all, rotate
from idea_lab.models.enums import Goal, TimeCommitment
from idea_lab.models.preferences import UserPreferences

from .factories import make_blueprint, make_catalog


class TestRotate:
    """Tests for the left barrel rotation."""

    def test_zero_offset_is_identity(self):
        assert rotate([1, 2, 3, 4], 0) == [1, 2, 3, 4]

    def test_left_rotation(self):
        assert rotate([1, 2, 3, 4], 1) == [2, 3, 4, 1]
        assert rotate([1, 2, 3, 4], 3) == [4, 1, 2, 3]

    def test_offset_wraps_modulo_length(self):
        assert rotate([1, 2, 3], 4) == rotate([1, 2, 3], 1)
        assert rotate([1, 2, 3], 3) == [1, 2, 3]

    def test_empty_sequence(self):
        assert rotate([], 5) == []

    def test_returns_new_list(self):
        items = [1, 2]
        assert rotate(items, 0) is not items


class TestRank:
    """Tests for rank()."""

    @pytest.fixture
    def writing_catalog(self):
        """The direct-fit vs transferable-fit scenario."""
        a = make_blueprint(
            "a",
            required_skills=["writing"],
            time_commitment="micro",
            growth_styles=["community"],
            revenue_streams=["one"],
        )
        b = make_blueprint(
            "b",
            required_skills=[],
            supportive_skills=["writing"],
            time_commitment="full-time",
        )
        c = make_blueprint("c")
        return make_catalog([c, b, a])

    def test_direct_fit_outranks_transferable(self, writing_catalog):
        prefs = UserPreferences(
            skills="writing",
            time_commitment=TimeCommitment.MICRO,
            growth_style="any",
            goal=Goal.INCOME,
        )
        results = rank(writing_catalog, prefs)

        assert [r.blueprint.id for r in results] == ["a", "b", "c"]
        assert [r.score for r in results] == [8, 2, 0]

    def test_ties_keep_catalog_order(self):
        blueprints = [make_blueprint(name) for name in ("zeta", "alpha", "mid")]
        catalog = make_catalog(blueprints)

        results = rank(catalog, UserPreferences())

        assert [r.blueprint.id for r in results] == ["zeta", "alpha", "mid"]
        assert all(r.score == 0 for r in results)

    def test_ties_keep_catalog_order_behind_higher_scores(self):
        catalog = make_catalog([
            make_blueprint("first"),
            make_blueprint("winner", required_skills=["sales"]),
            make_blueprint("second"),
            make_blueprint("third"),
        ])

        ranked = rank_all(catalog, UserPreferences(skills="sales"))

        assert [r.blueprint.id for r in ranked] == ["winner", "first", "second", "third"]

    def test_returns_top_three(self, builtin_catalog):
        assert len(rank(builtin_catalog, UserPreferences())) == 3

    def test_small_catalog_returns_fewer(self):
        catalog = make_catalog([make_blueprint("only")])
        assert [r.blueprint.id for r in rank(catalog, UserPreferences(), rotation_offset=7)] == ["only"]

    def test_empty_catalog_returns_empty(self, empty_catalog):
        assert rank(empty_catalog, UserPreferences()) == []
        assert rank(empty_catalog, UserPreferences(), rotation_offset=3) == []

    def test_zero_offset_matches_sorted_head(self, builtin_catalog):
        prefs = UserPreferences(skills="writing research", interests="creators")

        assert rank(builtin_catalog, prefs, 0) == rank_all(builtin_catalog, prefs)[:3]

    def test_rotation_window(self, builtin_catalog):
        prefs = UserPreferences(skills="writing networking", audience="creators")
        ranked = rank_all(builtin_catalog, prefs)

        window = rank(builtin_catalog, prefs, rotation_offset=2)

        assert window == ranked[2:5]

    def test_rotation_wraps_to_head(self, builtin_catalog):
        prefs = UserPreferences(skills="automation")
        ranked = rank_all(builtin_catalog, prefs)
        n = len(ranked)

        window = rank(builtin_catalog, prefs, rotation_offset=n - 1)

        assert window == [ranked[-1], ranked[0], ranked[1]]

    @pytest.mark.parametrize("offset", [0, 1, 4, 7])
    def test_full_cycle_is_identity(self, builtin_catalog, offset):
        prefs = UserPreferences(interests="education", goal=Goal.AUTOMATION)
        n = len(builtin_catalog)

        assert rank(builtin_catalog, prefs, offset) == rank(builtin_catalog, prefs, offset + n)

    def test_refresh_cycle_visits_every_blueprint(self, builtin_catalog):
        prefs = UserPreferences(skills="writing")
        seen = set()
        for offset in range(len(builtin_catalog)):
            seen.update(r.blueprint.id for r in rank(builtin_catalog, prefs, offset))

        assert seen == {b.id for b in builtin_catalog.blueprints}

    def test_ranking_is_pure(self, builtin_catalog):
        prefs = UserPreferences(skills="sales", audience="makers", growth_style="community")

        first = rank(builtin_catalog, prefs, 5)
        second = rank(builtin_catalog, prefs, 5)

        assert first == second

    def test_negative_offset_rejected(self, builtin_catalog):
        with pytest.raises(ValueError):
            rank(builtin_catalog, UserPreferences(), rotation_offset=-1)
