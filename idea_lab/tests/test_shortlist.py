"""
Tests for shortlist building and export.
"""
import json
import logging

from idea_lab.engine.ranking import rank
from idea_lab.engine.shortlist import build_shortlist
from idea_lab.models.enums import Goal
from idea_lab.models.preferences import UserPreferences


class TestBuildShortlist:
    """Tests for build_shortlist()."""

    def test_matches_equal_rank(self, builtin_catalog):
        prefs = UserPreferences(skills="writing", interests="creators", goal=Goal.AUDIENCE)

        shortlist = build_shortlist(builtin_catalog, prefs, rotation_offset=1)

        assert shortlist.matches == rank(builtin_catalog, prefs, 1)
        assert shortlist.preferences == prefs

    def test_metadata(self, builtin_catalog):
        shortlist = build_shortlist(builtin_catalog, UserPreferences(), rotation_offset=4)

        assert shortlist.metadata.rotation_offset == 4
        assert shortlist.metadata.catalog_size == len(builtin_catalog)
        assert len(shortlist.metadata.run_id) == 8

    def test_top_n_defaults_to_config(self, builtin_catalog):
        assert len(build_shortlist(builtin_catalog, UserPreferences()).matches) == 3

    def test_top_n_override(self, builtin_catalog):
        assert len(build_shortlist(builtin_catalog, UserPreferences(), top_n=5).matches) == 5

    def test_completed_run_logs_structured_fields(self, builtin_catalog, caplog):
        with caplog.at_level(logging.INFO, logger="idea_lab.engine.shortlist"):
            shortlist = build_shortlist(builtin_catalog, UserPreferences(), rotation_offset=2)

        records = [r for r in caplog.records if hasattr(r, "extra")]
        assert len(records) == 1
        assert records[0].extra == {
            "run_id": shortlist.metadata.run_id,
            "rotation_offset": 2,
            "matches": [m.blueprint.id for m in shortlist.matches],
        }

    def test_empty_catalog(self, empty_catalog):
        shortlist = build_shortlist(empty_catalog, UserPreferences())

        assert shortlist.matches == []
        assert shortlist.to_minimal_export()["results"] == []


class TestShortlistExport:
    """Tests for the JSON export."""

    def test_minimal_export_is_json_ready(self, builtin_catalog):
        prefs = UserPreferences(skills="automation no-code", time_commitment="part-time")
        shortlist = build_shortlist(builtin_catalog, prefs)

        export = shortlist.to_minimal_export()
        json.dumps(export)

        assert [r["rank"] for r in export["results"]] == [1, 2, 3]
        top = export["results"][0]
        assert top["id"] == "no-code-ops-studio"
        assert top["highlights"]["Direct fit strengths"] == ["Automation", "No-code"]
        assert top["highlights"]["Time fit"] == ["5-15 hrs/week"]
        assert export["preferences"]["time_commitment"] == "part-time"
        assert export["preferences"]["growth_style"] == "any"

    def test_full_dump_round_trips_as_json(self, builtin_catalog):
        shortlist = build_shortlist(builtin_catalog, UserPreferences(audience="founders"))

        data = json.loads(shortlist.model_dump_json())

        assert data["metadata"]["run_id"] == shortlist.metadata.run_id
        assert len(data["matches"]) == 3
