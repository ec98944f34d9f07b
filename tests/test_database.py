import pytest

from contactbook.database import DatabaseError, DatabaseManager


@pytest.fixture
def db():
    with DatabaseManager(":memory:") as manager:
        manager.execute("CREATE TABLE T(ID INTEGER PRIMARY KEY, NAME TEXT, NOTE TEXT)")
        yield manager


def test_query_returns_rows_as_text(db):
    db.execute("INSERT INTO T(NAME, NOTE) VALUES(?, ?)", ("alpha", "x"))
    db.execute("INSERT INTO T(NAME, NOTE) VALUES(?, ?)", ("beta", "y"))
    assert db.query("SELECT ID, NAME, NOTE FROM T ORDER BY ID") == [
        ("1", "alpha", "x"),
        ("2", "beta", "y"),
    ]


def test_null_is_shown_as_null(db):
    db.execute("INSERT INTO T(NAME) VALUES(?)", ("alpha",))
    assert db.query("SELECT NOTE FROM T") == [("NULL",)]


def test_query_with_no_rows_is_empty(db):
    assert db.query("SELECT * FROM T") == []


def test_execute_returns_affected_rows(db):
    db.execute("INSERT INTO T(NAME) VALUES('a')")
    db.execute("INSERT INTO T(NAME) VALUES('b')")
    assert db.execute("DELETE FROM T") == 2


def test_bad_statement_raises_with_sql_in_message(db):
    with pytest.raises(DatabaseError, match="NOT A STATEMENT"):
        db.execute("NOT A STATEMENT")


def test_bad_query_raises(db):
    with pytest.raises(DatabaseError):
        db.query("SELECT * FROM MISSING")


def test_use_after_close_raises():
    manager = DatabaseManager(":memory:")
    manager.close()
    manager.close()
    with pytest.raises(DatabaseError):
        manager.query("SELECT 1")


def test_context_manager_closes():
    with DatabaseManager(":memory:") as manager:
        assert manager.query("SELECT 1") == [("1",)]
    with pytest.raises(DatabaseError):
        manager.execute("SELECT 1")


def test_data_persists_in_file(tmp_path):
    path = str(tmp_path / "data.db")
    with DatabaseManager(path) as manager:
        manager.execute("CREATE TABLE T(NAME TEXT)")
        manager.execute("INSERT INTO T VALUES(?)", ("kept",))
    with DatabaseManager(path) as manager:
        assert manager.query("SELECT NAME FROM T") == [("kept",)]


def test_open_in_missing_directory_raises(tmp_path):
    with pytest.raises(DatabaseError):
        DatabaseManager(str(tmp_path / "no" / "such" / "dir" / "x.db"))