"""Tests for report rendering."""

import json

from sharevote.consensus import classify
from sharevote.decode import decode_document
from sharevote.report import ConsensusReport

DOC = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}


def build(doc_data):
    doc = decode_document(doc_data)
    result = classify(doc.shares, doc.k)
    return ConsensusReport(declared_n=doc.n, k=doc.k,
                           shares=doc.shares, result=result)


class TestTextReport:

    def test_all_consistent(self):
        # f(x) = x^2 + 3 passes through all four shares
        text = build(DOC).to_text()
        assert text.splitlines()[:4] == [
            "k = 3, n = 4",
            "Total shares provided = 4",
            "Total combinations checked = 4",
            "Most frequent secret (f(0)) = 3",
        ]
        assert '- participant 6: base=4, value="213"' in text
        assert text.rstrip().endswith("Inconsistent shares (likely wrong):\n- none")

    def test_inconsistent_listed(self):
        data = dict(DOC)
        data["5"] = {"base": "10", "value": "100"}
        data["keys"] = {"n": 5, "k": 3}
        report = build(data)
        lines = report.to_text().splitlines()
        bad_at = lines.index("Inconsistent shares (likely wrong):")
        assert lines[bad_at + 1:] == ['- participant 5: base=10, value="100"']

    def test_sorted_by_x(self):
        data = {
            "keys": {"n": 3, "k": 2},
            "3": {"base": "10", "value": "7"},
            "1": {"base": "10", "value": "3"},
            "2": {"base": "10", "value": "5"},
        }
        report = build(data)
        xs = [s.x for _, s in report.consistent_shares()]
        assert xs == [1, 2, 3]

    def test_non_integer_marker(self):
        data = {
            "keys": {"n": 2, "k": 2},
            "2": {"base": "10", "value": "1"},
            "5": {"base": "10", "value": "2"},
        }
        text = build(data).to_text()
        assert "Most frequent secret (f(0)) = 1/3  [non-integer]" in text

    def test_empty_consistent_list_has_no_marker(self):
        doc = decode_document(DOC)
        result = classify(doc.shares, 0)
        report = ConsensusReport(declared_n=doc.n, k=0,
                                 shares=doc.shares, result=result)
        lines = report.to_text().splitlines()
        good_at = lines.index("Consistent shares (supporting the chosen secret):")
        assert lines[good_at + 1] == ""
        assert lines[good_at + 2] == "Inconsistent shares (likely wrong):"
        assert len(lines) == good_at + 3 + 4


class TestJsonReport:

    def test_fields(self):
        report = build(DOC)
        data = json.loads(report.to_json())
        assert data["secret"] == "3"
        assert data["secret_is_integer"] is True
        assert data["vote_count"] == 4
        assert data["total_combinations"] == 4
        assert data["candidates"] == [{"secret": "3", "votes": 4}]
        assert [e["x"] for e in data["consistent"]] == [1, 2, 3, 6]
        assert data["inconsistent"] == []
        assert data["consistent"][1] == {"x": 2, "y": "7", "base": 2, "value": "111"}

    def test_n_provided(self):
        assert build(DOC).n_provided == 4
