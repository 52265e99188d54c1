"""Unit tests for WHERE/HAVING predicates and AND()/OR() conjunctions."""

import logging

import pytest

from sqlchain import SQL, Conjunction
from sqlchain.builder import PredicateTarget


@pytest.fixture
def base() -> SQL:
    return SQL().SELECT("*").FROM("t")


def test_where_and_joins_inside_one_group(base: SQL) -> None:
    assert base.WHERE("a=1").AND().WHERE("b=2").to_sql() == "SELECT *\nFROM t\nWHERE (a=1 AND b=2)"


def test_where_or_splits_groups(base: SQL) -> None:
    assert base.WHERE("a=1").OR().WHERE("b=2").to_sql() == "SELECT *\nFROM t\nWHERE (a=1) OR (b=2)"


def test_where_without_conjunction_uses_and(base: SQL) -> None:
    assert base.WHERE("a=1").WHERE("b=2").to_sql() == "SELECT *\nFROM t\nWHERE (a=1 AND b=2)"


def test_where_multiple_conditions_in_one_call(base: SQL) -> None:
    assert base.WHERE("a=1", "b=2", "c=3").to_sql() == "SELECT *\nFROM t\nWHERE (a=1 AND b=2 AND c=3)"


def test_where_mixed_and_or(base: SQL) -> None:
    sql = base.WHERE("a=1").OR().WHERE("b=2").AND().WHERE("c=3").OR().WHERE("d=4").to_sql()
    assert sql == "SELECT *\nFROM t\nWHERE (a=1) OR (b=2 AND c=3) OR (d=4)"


def test_double_and_is_not_doubled(base: SQL) -> None:
    sql = base.WHERE("a=1").AND().AND().WHERE("b=2").to_sql()
    assert sql == "SELECT *\nFROM t\nWHERE (a=1 AND b=2)"
    assert sql is not None
    assert sql.count("AND") == 1


def test_double_or_is_not_doubled(base: SQL) -> None:
    sql = base.WHERE("a=1").OR().OR().WHERE("b=2").to_sql()
    assert sql == "SELECT *\nFROM t\nWHERE (a=1) OR (b=2)"


def test_consecutive_conjunctions_last_one_wins(base: SQL) -> None:
    assert base.WHERE("a=1").OR().AND().WHERE("b=2").to_sql() == "SELECT *\nFROM t\nWHERE (a=1 AND b=2)"


def test_trailing_conjunction_is_dropped(base: SQL) -> None:
    assert base.WHERE("a=1").OR().to_sql() == "SELECT *\nFROM t\nWHERE (a=1)"


def test_conjunction_with_no_predicates_omits_clause(base: SQL) -> None:
    assert base.WHERE().OR().to_sql() == "SELECT *\nFROM t"


def test_conjunction_before_where_is_ignored(base: SQL, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="sqlchain.builder")
    base.AND().OR()
    assert base.statement.where == []
    assert base.statement.having == []
    assert base.statement.last_predicate_target is PredicateTarget.NONE
    assert base.WHERE("a=1").to_sql() == "SELECT *\nFROM t\nWHERE (a=1)"
    assert "Ignoring AND() with no preceding WHERE or HAVING" in caplog.text


def test_conjunction_is_stored_as_marker(base: SQL) -> None:
    base.WHERE("a=1").OR().WHERE("b=2")
    assert base.statement.where == ["a=1", Conjunction.OR, "b=2"]


def test_predicate_text_that_looks_like_marker_is_a_predicate(base: SQL) -> None:
    sql = base.WHERE("x = 1").WHERE(") OR (").to_sql()
    assert sql == "SELECT *\nFROM t\nWHERE (x = 1 AND ) OR ()"
    assert base.statement.where == ["x = 1", ") OR ("]


def test_having_redirects_conjunctions(base: SQL) -> None:
    sql = base.WHERE("w1").GROUP_BY("g").HAVING("h1").OR().HAVING("h2").to_sql()
    assert sql == "SELECT *\nFROM t\nWHERE (w1)\nGROUP BY g\nHAVING (h1) OR (h2)"
    assert base.statement.last_predicate_target is PredicateTarget.HAVING


def test_where_after_having_redirects_back(base: SQL) -> None:
    base.HAVING("h1").WHERE("w1").OR().WHERE("w2").HAVING("h2")
    assert base.statement.where == ["w1", Conjunction.OR, "w2"]
    assert base.statement.having == ["h1", "h2"]


def test_and_or_return_self(base: SQL) -> None:
    assert base.AND() is base
    assert base.WHERE("a").OR() is base
