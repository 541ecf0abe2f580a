"""
Pytest configuration and fixtures for Table Browser tests.
"""
import json
import os
import sqlite3

import pytest

# Allow Qt to run headless (e.g. CI without a display)
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Qt Application fixture for tests that need a QApplication
_qt_app = None


@pytest.fixture(scope="session")
def qapp():
    """Create a QApplication for tests that need Qt."""
    global _qt_app
    from PySide6.QtWidgets import QApplication
    if _qt_app is None:
        _qt_app = QApplication.instance() or QApplication([])
    yield _qt_app


@pytest.fixture
def sample_db(tmp_path):
    """
    Create a SQLite file with:
    - items: 25 rows (id, name, price, photo BLOB, note NULL on even ids)
    - empty_table: no rows
    - orders: foreign key to items and an index
    """
    db_path = tmp_path / "sample.db"
    conn = sqlite3.connect(db_path)
    try:
        conn.execute("""
            CREATE TABLE items (
                id INTEGER PRIMARY KEY,
                name TEXT NOT NULL,
                price REAL,
                photo BLOB,
                note TEXT
            )
        """)
        conn.executemany(
            "INSERT INTO items (id, name, price, photo, note) VALUES (?, ?, ?, ?, ?)",
            [
                (i, f"item{i:02d}", i * 1.5, bytes([i, 0, 255]),
                 None if i % 2 == 0 else f"note {i}")
                for i in range(1, 26)
            ]
        )
        conn.execute("CREATE TABLE empty_table (a INTEGER, b TEXT)")
        conn.execute("""
            CREATE TABLE orders (
                id INTEGER PRIMARY KEY,
                item_id INTEGER REFERENCES items(id),
                quantity INTEGER
            )
        """)
        conn.execute("CREATE INDEX idx_orders_item ON orders(item_id)")
        conn.commit()
    finally:
        conn.close()
    yield db_path


@pytest.fixture
def prefs_file(tmp_path):
    """Factory writing a JSON preferences file."""
    def _write(content):
        path = tmp_path / "preferences.json"
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path
    return _write
