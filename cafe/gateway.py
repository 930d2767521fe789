import sys
import sqlite3
import logging
from contextlib import closing
from types import ModuleType
from typing import Any, Sequence, TextIO

import psycopg2

logger = logging.getLogger(__name__)

Record = list[str | None]

# how each driver reads the last value handed out by a sequence
SEQUENCE_QUERIES = {
    "sqlite3": "SELECT seq FROM sqlite_sequence WHERE name = ?",
    "psycopg2": "SELECT currval(?)",
}

class GatewayError(Exception):
    """any failure while talking to the database"""

def as_text(value: Any) -> str | None:
    """render one column value the way every caller expects to see it"""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)

class DatabaseGateway:
    """the only thing that sends sql to the backend; owns exactly one connection"""
    def __init__(self, conn, driver: ModuleType, out: TextIO | None = None):
        self.conn = conn
        self.driver = driver
        self._out = out

    @classmethod
    def connect_postgres(cls, dbname: str, port: str, user: str, password: str = "", host: str = "localhost"):
        """open a postgres connection; raises GatewayError if the server can't be reached"""
        logger.info("connecting to postgres at %s:%s/%s as %s", host, port, dbname, user)
        try:
            conn = psycopg2.connect(dbname=dbname, port=port, user=user, password=password, host=host)
        except psycopg2.Error as e:
            raise GatewayError(str(e).strip()) from e
        conn.autocommit = True
        return cls(conn, psycopg2)

    @classmethod
    def connect_sqlite(cls, path: str):
        """open a sqlite database file (or ':memory:')"""
        logger.info("opening sqlite database %s", path)
        try:
            conn = sqlite3.connect(path)
        except sqlite3.Error as e:
            raise GatewayError(str(e)) from e
        conn.autocommit = True
        conn.execute("PRAGMA foreign_keys=ON;")
        return cls(conn, sqlite3)

    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    @property
    def closed(self) -> bool:
        return self.conn is None

    def _prepare(self, sql: str) -> str:
        """queries are written with qmark placeholders; translate for format-style drivers.

        every ? is a placeholder, so literals containing ? must be passed as parameters.
        """
        if self.driver.paramstyle in ("format", "pyformat"):
            return sql.replace("%", "%%").replace("?", "%s")
        return sql

    def _run(self, sql: str, params: Sequence[Any], fetch: bool):
        """execute one statement, returning (column names, rows) when fetching"""
        if self.conn is None:
            raise GatewayError("database connection is closed")
        logger.debug("sql: %s params: %r", sql.strip(), tuple(params))
        try:
            with closing(self.conn.cursor()) as cur:
                # without parameters the driver sends the text untouched
                if params:
                    cur.execute(self._prepare(sql), tuple(params))
                else:
                    cur.execute(sql)
                if not fetch:
                    return None, []
                columns = [d[0] for d in cur.description or ()]
                return columns, cur.fetchall()
        except self.driver.Error as e:
            logger.warning("statement failed: %s (%s)", sql.strip(), e)
            raise GatewayError(str(e).strip()) from e

    def execute_update(self, sql: str, params: Sequence[Any] = ()):
        """run insert / update / delete / create / drop; committed immediately"""
        self._run(sql, params, fetch=False)

    def execute_query(self, sql: str, params: Sequence[Any] = ()) -> int:
        """run a select and return only how many rows it produced"""
        _, rows = self._run(sql, params, fetch=True)
        return len(rows)

    def execute_query_and_return_result(self, sql: str, params: Sequence[Any] = ()) -> list[Record]:
        """run a select and return every row as a list of text values"""
        _, rows = self._run(sql, params, fetch=True)
        return [[as_text(v) for v in row] for row in rows]

    def execute_query_and_print_result(self, sql: str, params: Sequence[Any] = ()) -> int:
        """run a select, print a tab separated header + rows, return the row count"""
        columns, rows = self._run(sql, params, fetch=True)
        if rows:
            print("\t".join(columns), file=self.out)
        for row in rows:
            print("\t".join("null" if v is None else as_text(v) for v in row), file=self.out)
        return len(rows)

    def get_current_sequence_value(self, sequence: str) -> int:
        """last value handed out by a sequence, or -1 when there isn't one"""
        sql = SEQUENCE_QUERIES.get(self.driver.__name__)
        if sql is None:
            return -1
        try:
            rows = self.execute_query_and_return_result(sql, (sequence,))
        except GatewayError:
            return -1
        if not rows or rows[0][0] is None:
            return -1
        return int(rows[0][0])

    def close(self):
        """release the connection; safe to call more than once"""
        if self.conn is None:
            return
        try:
            self.conn.close()
        except self.driver.Error as e:
            logger.debug("ignoring error on close: %s", e)
        finally:
            self.conn = None
