"""Tests for the SQL error classifier."""

import pytest

from sqlcraft.modules.playground.error_classifier import (
    CLASSIFICATION_RULES,
    classify_error,
    forbidden_operation,
    network_error,
)
from sqlcraft.schemas.query import RawQueryError


def classify(message: str, code: str = None):
    return classify_error(RawQueryError(message=message, code=code))


class TestClassifyByCode:
    """Vendor SQLSTATE selects the rule."""

    @pytest.mark.parametrize("sqlstate,expected", [
        ("42601", "SYNTAX_ERROR"),
        ("42P01", "TABLE_NOT_FOUND"),
        ("42703", "COLUMN_NOT_FOUND"),
        ("42P10", "GROUPBY_ERROR"),
        ("22P02", "TYPE_ERROR"),
    ])
    def test_code_match(self, sqlstate, expected):
        assert classify("something failed", sqlstate).code == expected

    def test_syntax_error(self):
        response = classify('syntax error at or near "SELET"', "42601")
        assert response.code == "SYNTAX_ERROR"
        assert response.message == 'syntax error at or near "SELET"'
        assert response.related_concept == "SQL Syntax Basics"

    def test_table_name_extracted(self):
        response = classify('relation "orderz" does not exist', "42P01")
        assert response.code == "TABLE_NOT_FOUND"
        assert "orderz" in response.friendly_message

    def test_table_name_fallback(self):
        response = classify("missing table", "42P01")
        assert 'The table "the table"' in response.friendly_message

    def test_column_name_extracted(self):
        response = CLASSIFICATION_RULES[2].build('column "nme" does not exist')
        assert response.code == "COLUMN_NOT_FOUND"
        assert '"nme"' in response.friendly_message

    def test_column_name_fallback(self):
        response = classify("unknown column", "42703")
        assert response.code == "COLUMN_NOT_FOUND"
        assert '"the column"' in response.friendly_message

    def test_code_beats_message_of_later_rule(self):
        response = classify('relation "x" does not exist', "42601")
        assert response.code == "SYNTAX_ERROR"


class TestPriorityOrder:
    """Rules are tried one by one; each matches on code or message."""

    def test_earlier_message_beats_later_code(self):
        response = classify("syntax error near GROUP BY", "42P10")
        assert response.code == "SYNTAX_ERROR"

    def test_column_message_matches_table_rule_first(self):
        response = classify('column "nme" does not exist', "42703")
        assert response.code == "TABLE_NOT_FOUND"
        assert 'The table "the table"' in response.friendly_message

    def test_group_by_message_beats_type_code(self):
        response = classify("must appear in the GROUP BY clause", "22P02")
        assert response.code == "GROUPBY_ERROR"


class TestClassifyByMessage:
    """Message patterns apply when no code matches."""

    def test_syntax_message(self):
        assert classify('syntax error at end of input').code == "SYNTAX_ERROR"

    def test_relation_message(self):
        response = classify('relation "customerz" does not exist', "XX000")
        assert response.code == "TABLE_NOT_FOUND"
        assert "customerz" in response.friendly_message

    def test_column_message_reads_as_missing_table(self):
        response = classify('column "emial" does not exist')
        assert response.code == "TABLE_NOT_FOUND"

    def test_column_message_without_does_not_exist(self):
        assert classify("column reference is ambiguous").code == "QUERY_ERROR"

    def test_group_by_message(self):
        message = 'column "orders.status" must appear in the GROUP BY clause or be used in an aggregate function'
        assert classify(message).code == "GROUPBY_ERROR"

    def test_invalid_input_message(self):
        assert classify('invalid input syntax for type integer: "abc"').code == "TYPE_ERROR"

    def test_first_matching_rule_wins(self):
        assert classify("syntax error: relation does not exist").code == "SYNTAX_ERROR"


class TestFallback:

    def test_unknown_error(self):
        response = classify("disk full", "99999")
        assert response.code == "QUERY_ERROR"
        assert response.message == "disk full"
        assert response.related_concept is None

    def test_timeout_is_generic(self):
        response = classify("canceling statement due to statement timeout", "57014")
        assert response.code == "QUERY_ERROR"

    def test_fallback_serialization_omits_related_concept(self):
        body = classify("disk full").model_dump(by_alias=True, exclude_none=True)
        assert "relatedConcept" not in body
        assert set(body) == {"code", "message", "friendlyMessage", "whyItHappened", "howToFix"}


def test_fixed_responses():
    assert forbidden_operation().code == "FORBIDDEN_OPERATION"
    assert forbidden_operation().related_concept == "Query Types"
    assert network_error().code == "NETWORK_ERROR"
    assert network_error().related_concept is None
