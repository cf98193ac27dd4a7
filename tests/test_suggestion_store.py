"""Tests for the JSON suggestion log."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import json
import logging
from datetime import datetime

import pytest

from data.suggestion_store import (
    append_suggestion,
    clear_suggestions,
    create_suggestion,
    export_suggestions_json,
    load_suggestions,
)


def log_path(tmp_path):
    return str(tmp_path / "logs" / "suggestion_logs.json")


class TestCreateSuggestion:
    def test_valid(self):
        entry = create_suggestion("fix", "  Wrong rule reference for exit signs  ")
        assert entry.suggestion_type == "fix"
        assert entry.details == "Wrong rule reference for exit signs"
        assert datetime.fromisoformat(entry.timestamp).tzinfo is not None

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            create_suggestion("complaint", "Too slow")

    @pytest.mark.parametrize("details", ["", "   ", None])
    def test_blank_details(self, details):
        with pytest.raises(ValueError):
            create_suggestion("other", details)


class TestPersistence:
    def test_missing_file_reads_empty(self, tmp_path):
        assert load_suggestions(log_path(tmp_path)) == []

    def test_append_creates_directory_and_keeps_order(self, tmp_path):
        path = log_path(tmp_path)
        append_suggestion(create_suggestion("feature", "Add a sprinkler head calculator"), path)
        entries = append_suggestion(create_suggestion("fix", "Typo in egress tab"), path)

        assert len(entries) == 2
        loaded = load_suggestions(path)
        assert [e.details for e in loaded] == ["Add a sprinkler head calculator", "Typo in egress tab"]

    def test_file_format(self, tmp_path):
        path = log_path(tmp_path)
        append_suggestion(create_suggestion("invalid", "Old memo"), path)
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
        assert set(raw[0]) == {"type", "details", "timestamp"}
        assert raw[0]["type"] == "invalid"

    def test_corrupt_file_reads_empty(self, tmp_path, caplog):
        path = tmp_path / "suggestion_logs.json"
        path.write_text("{not json", encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            assert load_suggestions(str(path)) == []
        assert "Could not read suggestion log" in caplog.text

    def test_non_list_reads_empty(self, tmp_path):
        path = tmp_path / "suggestion_logs.json"
        path.write_text('{"type": "fix"}', encoding="utf-8")
        assert load_suggestions(str(path)) == []

    def test_malformed_items_skipped(self, tmp_path):
        path = tmp_path / "suggestion_logs.json"
        path.write_text(json.dumps([
            {"type": "fix", "details": "Good entry", "timestamp": "2024-01-01T00:00:00+00:00"},
            "garbage",
            {"type": "fix"},
        ]), encoding="utf-8")
        entries = load_suggestions(str(path))
        assert [e.details for e in entries] == ["Good entry"]

    def test_append_after_corrupt_file_recovers(self, tmp_path):
        path = tmp_path / "suggestion_logs.json"
        path.write_text("[[[", encoding="utf-8")
        entries = append_suggestion(create_suggestion("other", "Hello"), str(path))
        assert len(entries) == 1

    def test_clear(self, tmp_path):
        path = log_path(tmp_path)
        append_suggestion(create_suggestion("fix", "Something"), path)
        clear_suggestions(path)
        assert load_suggestions(path) == []


class TestExport:
    def test_export_json(self):
        entries = [create_suggestion("fix", "One"), create_suggestion("feature", "Two")]
        data = json.loads(export_suggestions_json(entries))
        assert [d["details"] for d in data] == ["One", "Two"]

    def test_export_empty(self):
        assert json.loads(export_suggestions_json([])) == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
