from sqlalchemy import inspect

from migrate import apply_schema
from models import db


def test_creates_tables_without_migration_repository(app, tmp_path):
    assert apply_schema(app, migrations_dir=str(tmp_path / "missing")) == "created"
    with app.app_context():
        tables = set(inspect(db.engine).get_table_names())
    assert {"user", "habit", "progress_entry"} <= tables
