from src.payroll_system.payroll_system.database.bootstrap import iter_sql_statements
from src.payroll_system.payroll_system.database.mysql_base import decode_weekdays, encode_weekdays


def test_sql_splitter_ignores_semicolons_in_quotes():
    sql = "CREATE TABLE a (x INT); INSERT INTO a VALUES ('x;y'); \n"
    assert list(iter_sql_statements(sql)) == ["CREATE TABLE a (x INT)", "INSERT INTO a VALUES ('x;y')"]


def test_weekday_column_round_trip():
    assert encode_weekdays({6, 5}) == "5,6"
    assert decode_weekdays("5,6") == {5, 6}
    assert decode_weekdays("") == frozenset()
