"""
Unit tests for free-text filtering.
"""

import pytest

from paper_browser.query import (
    SEARCH_FIELDS,
    filter_papers,
    matches_query,
    normalize_query,
)

from conftest import make_paper


class TestNormalizeQuery:
    def test_strips_and_lowercases(self):
        assert normalize_query("  Vietnam MEDICAL ") == "vietnam medical"

    def test_none_is_blank(self):
        assert normalize_query(None) == ""


class TestFilterPapers:
    """Test the filter_papers function."""

    @pytest.mark.parametrize("query", ["", "   ", "\t\n"])
    def test_blank_query_is_identity(self, sample_papers, query):
        assert filter_papers(sample_papers, query) is sample_papers

    def test_matches_title_case_insensitively(self, sample_papers):
        result = filter_papers(sample_papers, "ASTHMA")
        assert [p.title for p in result] == ["Childhood asthma outcomes"]

    def test_matches_authors(self, sample_papers):
        result = filter_papers(sample_papers, "smith, j")
        assert [p.authors for p in result] == ["Smith, J."]

    def test_matches_journal(self, sample_papers):
        result = filter_papers(sample_papers, "public health")
        assert [p.journal for p in result] == ["Public Health Reports"]

    def test_surrounding_whitespace_is_ignored(self, sample_papers):
        assert filter_papers(sample_papers, "  hanoi  ") == (sample_papers[2],)

    def test_other_fields_are_not_searched(self, sample_papers):
        assert filter_papers(sample_papers, "Organization 1") == ()
        assert filter_papers(sample_papers, "example.org") == ()

    def test_preserves_source_order(self, sample_papers):
        result = filter_papers(sample_papers, "journal")
        assert result == (sample_papers[0], sample_papers[1])

    def test_no_match_gives_empty_result(self, sample_papers):
        assert filter_papers(sample_papers, "cardiology") == ()

    def test_does_not_mutate_input(self):
        papers = [make_paper(i) for i in range(1, 6)]
        snapshot = list(papers)

        filter_papers(papers, "Title 3")

        assert papers == snapshot

    def test_every_result_contains_query(self):
        papers = [make_paper(i) for i in range(1, 40)]
        for query in ["1", "Title 2", "JOURNAL 3", "author 1"]:
            result = filter_papers(papers, query)
            assert result
            needle = query.strip().lower()
            for paper in result:
                assert any(
                    needle in getattr(paper, field).lower() for field in SEARCH_FIELDS
                )

    def test_filtering_is_repeatable(self, sample_papers):
        assert filter_papers(sample_papers, "in") == filter_papers(sample_papers, "in")


def test_matches_query_expects_normalized_query(sample_papers):
    assert matches_query(sample_papers[0], "hypertension")
    assert not matches_query(sample_papers[0], "tuberculosis")
