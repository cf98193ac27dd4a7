"""Tests for reference library search and bookmarks."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from data.references import REFERENCES, FIRE_CODE_REFERENCES, BFP_MEMORANDA, NFPA_REFERENCES
from engine.library import list_categories, search_references, toggle_bookmark


def ids(refs):
    return [r.reference_id for r in refs]


class TestSearch:
    def test_blank_query_returns_everything(self):
        assert search_references(REFERENCES) == REFERENCES
        assert search_references(REFERENCES, "   ") == REFERENCES

    def test_keyword_matches_title_and_tags(self):
        result = ids(search_references(REFERENCES, "sprinkler"))
        assert "ra9514-rule-10" in result
        assert "memo-2021-005" in result
        assert "nfpa-13" in result

    def test_case_insensitive(self):
        assert ids(search_references(REFERENCES, "FSIC")) == ids(search_references(REFERENCES, "fsic"))

    def test_category_filter(self):
        result = search_references(REFERENCES, category="General Provisions")
        assert ids(result) == ["ra9514-rule-1", "ra9514-rule-2"]

    def test_type_filter(self):
        assert len(search_references(REFERENCES, ref_type="memorandum")) == 5
        assert len(search_references(REFERENCES, ref_type="nfpa")) == 8

    def test_bookmark_filter(self):
        result = search_references(REFERENCES, bookmarks=["memo-2020-001"])
        assert ids(result) == ["memo-2020-001"]

    def test_empty_bookmarks_filter_everything(self):
        assert search_references(REFERENCES, bookmarks=[]) == []

    def test_combined_filters(self):
        result = search_references(REFERENCES, "sprinkler", ref_type="memorandum")
        assert ids(result) == ["memo-2021-005", "memo-2022-002"]

    def test_no_match(self):
        assert search_references(REFERENCES, "zeppelin") == []


class TestCatalog:
    def test_composition(self):
        assert len(FIRE_CODE_REFERENCES) == 5
        assert len(BFP_MEMORANDA) == 5
        assert len(REFERENCES) == len(FIRE_CODE_REFERENCES) + len(BFP_MEMORANDA) + len(NFPA_REFERENCES)
        assert len(set(ids(REFERENCES))) == len(REFERENCES)

    def test_categories_sorted_unique(self):
        categories = list_categories(REFERENCES)
        assert categories == sorted(set(categories))
        assert "NFPA Standards" in categories


class TestBookmarks:
    def test_add_and_remove(self):
        bookmarks = toggle_bookmark([], "nfpa-13")
        assert bookmarks == ["nfpa-13"]
        assert toggle_bookmark(bookmarks, "nfpa-13") == []

    def test_original_untouched(self):
        bookmarks = ["nfpa-1"]
        toggle_bookmark(bookmarks, "nfpa-13")
        assert bookmarks == ["nfpa-1"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
