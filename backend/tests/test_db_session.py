from app.db.session import resolve_database_url


def test_db_name_fills_missing_database():
    url = resolve_database_url("postgresql://kd:secret@db:5432", "kid_draughts")
    assert url.database == "kid_draughts"
    assert url.drivername == "postgresql+psycopg"


def test_explicit_database_wins():
    url = resolve_database_url("postgresql+psycopg://kd:secret@db:5432/other", "kid_draughts")
    assert url.database == "other"


def test_sqlite_memory_untouched():
    url = resolve_database_url("sqlite://", "kid_draughts")
    assert url.database is None
