import os
import sqlite3
import logging
from pathlib import Path
from sqlalchemy import create_engine

logger = logging.getLogger(__name__)

# ── Paths are relative to this file (…/backend/shopify_dashboard/db/session.py)
_THIS = Path(__file__).resolve()
PACKAGE_DIR = _THIS.parents[1]         # backend/shopify_dashboard
DB_DIR = PACKAGE_DIR / "data"          # backend/shopify_dashboard/data

# Default demo order store: backend/shopify_dashboard/data/orders.db
DEFAULT_DB_PATH = DB_DIR / "orders.db"
DEFAULT_DB_URL = f"sqlite:///{DEFAULT_DB_PATH.as_posix()}"

# SQL scripts directory: backend/shopify_dashboard/db/sql
SQL_DIR = _THIS.parent / "sql"
SCHEMA_SQL = SQL_DIR / "init_schema.sql"
DATA_SQL = SQL_DIR / "init_data.sql"


def make_engine(database_url: str = None):
    url = database_url or os.getenv("DATABASE_URL", DEFAULT_DB_URL)
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, echo=False, future=True, connect_args=connect_args)


def get_sqlite_conn(engine) -> sqlite3.Connection:
    """Raw sqlite connection (for executing SQL scripts / direct queries)."""
    if engine.url.get_backend_name() != "sqlite":
        raise RuntimeError("get_sqlite_conn only supports sqlite backend")
    db_path = Path(engine.url.database)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_path.as_posix())
    conn.row_factory = sqlite3.Row
    return conn


def _table_exists(conn: sqlite3.Connection, name: str) -> bool:
    cur = conn.execute("SELECT name FROM sqlite_master WHERE type='table' AND name=?", (name,))
    return cur.fetchone() is not None


def _executescript(conn: sqlite3.Connection, path: Path):
    if not path.exists():
        raise FileNotFoundError(f"SQL file not found: {path}")
    conn.execute("PRAGMA foreign_keys = ON;")
    conn.executescript(path.read_text(encoding="utf-8"))
    conn.commit()


def bootstrap(engine, with_demo_data: bool = True) -> bool:
    """Create the order tables (and demo orders) when they are missing. Returns True if it ran."""
    with get_sqlite_conn(engine) as conn:
        if _table_exists(conn, "orders") and _table_exists(conn, "line_items"):
            return False
        logger.info("[DB] Bootstrapping order schema%s …", " & demo data" if with_demo_data else "")
        _executescript(conn, SCHEMA_SQL)
        if with_demo_data:
            _executescript(conn, DATA_SQL)
        logger.info("[DB] Bootstrap complete.")
        return True


def maybe_bootstrap(engine) -> None:
    # Skip auto-bootstrap if disabled
    if os.getenv("AUTO_BOOTSTRAP_DB", "1") != "1":
        return
    bootstrap(engine)
