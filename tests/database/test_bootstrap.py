from src.attendance_ledger.attendance_ledger.database.bootstrap import _strip_create_db_and_use, iter_sql_statements


def test_statements_split_outside_quotes():
    sql = """
    -- storage table
    CREATE TABLE a (x VARCHAR(10) DEFAULT 'a;b');
    INSERT INTO a VALUES ("it\\"s;");
    SELECT 1
    """

    stmts = list(iter_sql_statements(sql))

    assert len(stmts) == 3
    assert stmts[0] == "CREATE TABLE a (x VARCHAR(10) DEFAULT 'a;b')"
    assert stmts[2] == "SELECT 1"


def test_schema_header_is_stripped():
    sql = "CREATE DATABASE IF NOT EXISTS foo;\nUSE foo;\nCREATE TABLE t (id INT);\n"

    assert list(iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE t (id INT)"]
