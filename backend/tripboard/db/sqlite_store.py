# backend/tripboard/db/sqlite_store.py

import sqlite3
import time
from pathlib import Path
from typing import Optional, Dict, Any, List
from uuid import uuid4

from tripboard.core.errors import NotFound
from tripboard.core.logger import get_logger
from tripboard.core.validation import SuggestionStatus
from tripboard.utils.time_utils import utc_now_iso


logger = get_logger("db")

# Retry configuration
MAX_RETRIES = 5
RETRY_DELAY = 0.1  # 100ms

# columns a partial update may touch
STOP_COLUMNS = ("day", "time", "name", "purpose", "notes", "latitude", "longitude")


class TripStore:
    def __init__(self, db_path: str):
        if db_path != ":memory:":
            Path(db_path).resolve().parent.mkdir(parents=True, exist_ok=True)

        self.db_path = db_path
        self.conn = sqlite3.connect(
            db_path,
            check_same_thread=False,
            timeout=30.0  # 30 seconds timeout
        )
        self.conn.row_factory = sqlite3.Row
        # Enable WAL mode for better concurrent access
        self.conn.execute("PRAGMA journal_mode=WAL")
        self.conn.execute("PRAGMA synchronous=NORMAL")
        self.conn.execute("PRAGMA busy_timeout=30000")
        self._init_tables()

    def close(self):
        self.conn.close()

    def _execute_with_retry(self, operation, *args, **kwargs):
        """Execute database operation with retry logic for handling locked database"""
        for attempt in range(MAX_RETRIES):
            try:
                return operation(*args, **kwargs)
            except sqlite3.OperationalError as e:
                if "locked" in str(e).lower() and attempt < MAX_RETRIES - 1:
                    logger.warning("Database locked, retrying (attempt %d)", attempt + 1)
                    time.sleep(RETRY_DELAY * (attempt + 1))
                    continue
                raise

    # ----------------------------------------------------------------------
    # CREATE TABLES
    # ----------------------------------------------------------------------
    def _init_tables(self):
        cur = self.conn.cursor()

        # ITINERARY STOPS
        cur.execute("""
        CREATE TABLE IF NOT EXISTS trip_places (
            id TEXT PRIMARY KEY,
            day INTEGER NOT NULL DEFAULT 1 CHECK (day >= 1),
            time TEXT NOT NULL,
            name TEXT NOT NULL,
            purpose TEXT NOT NULL,
            notes TEXT,
            latitude REAL NOT NULL,
            longitude REAL NOT NULL,
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL
        );
        """)

        # SUGGESTIONS
        cur.execute("""
        CREATE TABLE IF NOT EXISTS suggestions (
            id TEXT PRIMARY KEY,
            user_id TEXT NOT NULL,
            title TEXT NOT NULL,
            text TEXT NOT NULL,
            status TEXT NOT NULL DEFAULT 'Pending'
                CHECK (status IN ('Pending', 'Approved', 'Rejected')),
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL
        );
        """)

        # INDEXES
        cur.execute("CREATE INDEX IF NOT EXISTS idx_trip_places_day ON trip_places(day);")
        cur.execute("CREATE INDEX IF NOT EXISTS idx_suggestions_status ON suggestions(status);")

        self.conn.commit()

    # ----------------------------------------------------------------------
    # ITINERARY STOPS
    # ----------------------------------------------------------------------
    def list_stops(self, day: Optional[int] = None) -> List[Dict[str, Any]]:
        cur = self.conn.cursor()
        if day is None:
            cur.execute("SELECT * FROM trip_places ORDER BY day ASC, time ASC")
        else:
            cur.execute(
                "SELECT * FROM trip_places WHERE day = ? ORDER BY time ASC",
                (day,),
            )
        return [dict(r) for r in cur.fetchall()]

    def get_stop(self, stop_id: str) -> Dict[str, Any]:
        cur = self.conn.cursor()
        cur.execute("SELECT * FROM trip_places WHERE id = ?", (stop_id,))
        row = cur.fetchone()
        if not row:
            raise NotFound("Itinerary stop", stop_id)
        return dict(row)

    def create_stop(self, data: Dict[str, Any]) -> Dict[str, Any]:
        stop_id = uuid4().hex
        now = utc_now_iso()

        def _create_stop():
            cur = self.conn.cursor()
            cur.execute("""
            INSERT INTO trip_places (id, day, time, name, purpose, notes,
                                     latitude, longitude, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """, (
                stop_id,
                data.get("day", 1),
                data["time"],
                data["name"],
                data["purpose"],
                data.get("notes"),
                data["latitude"],
                data["longitude"],
                now,
                now,
            ))
            self.conn.commit()

        self._execute_with_retry(_create_stop)
        return self.get_stop(stop_id)

    def update_stop(self, stop_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        """Apply only the provided columns; an empty change set returns the row untouched."""
        fields = {k: v for k, v in changes.items() if k in STOP_COLUMNS}
        if not fields:
            return self.get_stop(stop_id)

        assignments = ", ".join(f"{column} = ?" for column in fields)
        params = list(fields.values()) + [utc_now_iso(), stop_id]

        def _update_stop():
            cur = self.conn.cursor()
            cur.execute(
                f"UPDATE trip_places SET {assignments}, updated_at = ? WHERE id = ?",
                params,
            )
            self.conn.commit()
            return cur.rowcount

        if not self._execute_with_retry(_update_stop):
            raise NotFound("Itinerary stop", stop_id)
        return self.get_stop(stop_id)

    def delete_stop(self, stop_id: str) -> Dict[str, Any]:
        """Delete and return the removed row."""
        existing = self.get_stop(stop_id)

        def _delete_stop():
            cur = self.conn.cursor()
            cur.execute("DELETE FROM trip_places WHERE id = ?", (stop_id,))
            self.conn.commit()
            return cur.rowcount

        if not self._execute_with_retry(_delete_stop):
            raise NotFound("Itinerary stop", stop_id)
        return existing

    # ----------------------------------------------------------------------
    # SUGGESTIONS
    # ----------------------------------------------------------------------
    def create_suggestion(self, user_id: str, title: str, text: str) -> Dict[str, Any]:
        suggestion_id = uuid4().hex
        now = utc_now_iso()

        def _create_suggestion():
            cur = self.conn.cursor()
            cur.execute("""
            INSERT INTO suggestions (id, user_id, title, text, status, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """, (
                suggestion_id, user_id, title, text,
                SuggestionStatus.PENDING.value,
                now, now,
            ))
            self.conn.commit()

        self._execute_with_retry(_create_suggestion)
        return self.get_suggestion(suggestion_id)

    def get_suggestion(self, suggestion_id: str) -> Dict[str, Any]:
        cur = self.conn.cursor()
        cur.execute("SELECT * FROM suggestions WHERE id = ?", (suggestion_id,))
        row = cur.fetchone()
        if not row:
            raise NotFound("Suggestion", suggestion_id)
        return dict(row)

    def list_suggestions(self, status: Optional[SuggestionStatus] = None) -> List[Dict[str, Any]]:
        """Newest first; rowid breaks ties between identical timestamps."""
        cur = self.conn.cursor()
        if status is None:
            cur.execute("""
            SELECT * FROM suggestions
            ORDER BY created_at DESC, rowid DESC
            """)
        else:
            cur.execute("""
            SELECT * FROM suggestions
            WHERE status = ?
            ORDER BY created_at DESC, rowid DESC
            """, (status.value,))
        return [dict(r) for r in cur.fetchall()]

    def update_suggestion_status(self, suggestion_id: str, status: SuggestionStatus) -> Dict[str, Any]:
        def _update_status():
            cur = self.conn.cursor()
            cur.execute("""
            UPDATE suggestions SET status = ?, updated_at = ?
            WHERE id = ?
            """, (status.value, utc_now_iso(), suggestion_id))
            self.conn.commit()
            return cur.rowcount

        if not self._execute_with_retry(_update_status):
            raise NotFound("Suggestion", suggestion_id)
        return self.get_suggestion(suggestion_id)
