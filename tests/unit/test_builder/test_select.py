"""Unit tests for SELECT rendering.

Covers the column list, DISTINCT, FROM, the five join families, GROUP BY,
HAVING, ORDER BY, repeated rendering and statement kind handling.
"""

import copy

import pytest

from sqlchain import SQL, AbstractSQL, StatementKind


def test_select_full_statement(person_select: SQL) -> None:
    assert person_select.to_sql() == (
        "SELECT P.ID, P.USERNAME, P.FIRST_NAME\n"
        "FROM PERSON P, ACCOUNT A\n"
        "INNER JOIN DEPARTMENT D on D.ID = P.DEPARTMENT_ID\n"
        "INNER JOIN COMPANY C on D.COMPANY_ID = C.ID\n"
        "WHERE (P.ID = A.ID AND P.FIRST_NAME like ?) OR (P.LAST_NAME like ?)\n"
        "GROUP BY P.ID\n"
        "HAVING (P.LAST_NAME like ?) OR (P.FIRST_NAME like ?)\n"
        "ORDER BY P.ID, P.FULL_NAME"
    )


def test_select_sets_statement_kind(builder: SQL) -> None:
    assert builder.statement_kind is StatementKind.UNSET
    builder.SELECT("*")
    assert builder.statement_kind is StatementKind.SELECT


def test_select_returns_self_for_chaining(builder: SQL) -> None:
    assert builder.SELECT("id") is builder
    assert builder.FROM("users") is builder
    assert builder.ORDER_BY("id") is builder
    assert builder.GROUP_BY("id") is builder


def test_select_single_column_and_table() -> None:
    assert SQL().SELECT("*").FROM("users").to_sql() == "SELECT *\nFROM users"


def test_select_without_from() -> None:
    assert SQL().SELECT("1").to_sql() == "SELECT 1"


def test_select_distinct() -> None:
    sql = SQL().SELECT_DISTINCT("a", "b").FROM("t").to_sql()
    assert sql == "SELECT DISTINCT a, b\nFROM t"


def test_select_distinct_applies_to_whole_column_list() -> None:
    sql = SQL().SELECT("a").SELECT_DISTINCT("b").FROM("t").to_sql()
    assert sql == "SELECT DISTINCT a, b\nFROM t"


def test_select_join_families_render_in_fixed_order() -> None:
    sql = (
        SQL()
        .SELECT("*")
        .FROM("a")
        .RIGHT_OUTER_JOIN("f ON f.id = a.id")
        .LEFT_OUTER_JOIN("e ON e.id = a.id")
        .OUTER_JOIN("d ON d.id = a.id")
        .INNER_JOIN("c ON c.id = a.id")
        .JOIN("b ON b.id = a.id")
        .to_sql()
    )
    assert sql == (
        "SELECT *\n"
        "FROM a\n"
        "JOIN b ON b.id = a.id\n"
        "INNER JOIN c ON c.id = a.id\n"
        "OUTER JOIN d ON d.id = a.id\n"
        "LEFT OUTER JOIN e ON e.id = a.id\n"
        "RIGHT OUTER JOIN f ON f.id = a.id"
    )


def test_select_repeated_join_entries_each_get_keyword() -> None:
    sql = SQL().SELECT("*").FROM("a").LEFT_OUTER_JOIN("b ON b.id = a.id", "c ON c.id = a.id").to_sql()
    assert sql == "SELECT *\nFROM a\nLEFT OUTER JOIN b ON b.id = a.id\nLEFT OUTER JOIN c ON c.id = a.id"


def test_select_group_by_having_order_by() -> None:
    sql = (
        SQL()
        .SELECT("dept", "COUNT(*)")
        .FROM("emp")
        .GROUP_BY("dept")
        .HAVING("COUNT(*) > 5")
        .ORDER_BY("dept ASC", "COUNT(*) DESC")
        .to_sql()
    )
    assert sql == (
        "SELECT dept, COUNT(*)\nFROM emp\nGROUP BY dept\nHAVING (COUNT(*) > 5)\nORDER BY dept ASC, COUNT(*) DESC"
    )


def test_select_snake_case_aliases() -> None:
    upper = SQL().SELECT("id").FROM("t").WHERE("a = 1").OR().WHERE("b = 2").ORDER_BY("id")
    lower = SQL().select("id").from_("t").where("a = 1").or_().where("b = 2").order_by("id")
    assert lower.to_sql() == upper.to_sql()


def test_render_is_repeatable(person_select: SQL) -> None:
    assert person_select.to_sql() == person_select.to_sql()
    assert str(person_select) == person_select.to_sql()


def test_render_does_not_mutate_statement(person_select: SQL) -> None:
    before = copy.deepcopy(person_select.statement)
    person_select.to_sql()
    str(person_select)
    assert person_select.statement == before


def test_unset_kind_renders_to_none(builder: SQL) -> None:
    assert builder.to_sql() is None
    assert str(builder) == ""


def test_unset_kind_with_clauses_still_renders_to_none() -> None:
    sql = SQL().FROM("t").WHERE("a = 1").ORDER_BY("a").LIMIT(5)
    assert sql.statement_kind is StatementKind.UNSET
    assert sql.to_sql() is None


def test_statement_kind_last_call_wins() -> None:
    sql = SQL().SELECT("a").FROM("t").DELETE_FROM("u")
    assert sql.statement_kind is StatementKind.DELETE
    rendered = sql.to_sql()
    assert rendered is not None
    assert rendered.startswith("DELETE FROM")
    assert "SELECT" not in rendered


def test_mutation_after_render_changes_next_render(builder: SQL) -> None:
    builder.SELECT("a").FROM("t")
    first = builder.to_sql()
    builder.WHERE("a > 1")
    assert builder.to_sql() == f"{first}\nWHERE (a > 1)"


@pytest.mark.parametrize(
    ("columns", "expected"),
    [
        (("a",), "SELECT a"),
        (("a", "b"), "SELECT a, b"),
        (("a", "b", "c"), "SELECT a, b, c"),
    ],
)
def test_select_column_joining(columns: tuple[str, ...], expected: str) -> None:
    assert SQL().SELECT(*columns).to_sql() == expected


def test_subclass_chaining_keeps_subclass() -> None:
    class PersonSQL(AbstractSQL):
        __slots__ = ()

        def active_people(self) -> "PersonSQL":
            return self.SELECT("*").FROM("person").WHERE("active = TRUE")

    sql = PersonSQL().active_people().ORDER_BY("name")
    assert isinstance(sql, PersonSQL)
    assert sql.to_sql() == "SELECT *\nFROM person\nWHERE (active = TRUE)\nORDER BY name"


def test_repr_shows_kind_and_counts() -> None:
    assert repr(SQL().SELECT("a").FROM("t").WHERE("x")) == "SQL(kind=SELECT, tables=1, where=1, rows=1)"
