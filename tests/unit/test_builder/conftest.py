import pytest

from sqlchain import SQL


@pytest.fixture
def builder() -> SQL:
    return SQL()


@pytest.fixture
def person_select() -> SQL:
    """SELECT with every clause family populated."""
    return (
        SQL()
        .SELECT("P.ID", "P.USERNAME")
        .SELECT("P.FIRST_NAME")
        .FROM("PERSON P")
        .FROM("ACCOUNT A")
        .INNER_JOIN("DEPARTMENT D on D.ID = P.DEPARTMENT_ID")
        .INNER_JOIN("COMPANY C on D.COMPANY_ID = C.ID")
        .WHERE("P.ID = A.ID")
        .WHERE("P.FIRST_NAME like ?")
        .OR()
        .WHERE("P.LAST_NAME like ?")
        .GROUP_BY("P.ID")
        .HAVING("P.LAST_NAME like ?")
        .OR()
        .HAVING("P.FIRST_NAME like ?")
        .ORDER_BY("P.ID")
        .ORDER_BY("P.FULL_NAME")
    )
