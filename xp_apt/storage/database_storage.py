#!/usr/bin/env python3

import sqlite3
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from ..exceptions import StorageError
from ..models import (
    AirportRecord, AirportFileRecord, Runway, RunwayEnd, Apron,
    TaxiPath, Parking, Com, Helipad, Start,
)
from .base import SinkInterface
from .field_definitions import TABLES, SchemaManager, TableDefinition

logger = logging.getLogger(__name__)

class DatabaseStorage(SinkInterface):
    """
    SQLite storage for airport entities.

    One table per entity is created from the field definitions. Rows are
    inserted as the reader produces them and become visible to other
    connections after commit(). Use as context manager to commit and close
    automatically.
    """

    def __init__(self, database_path: str):
        """
        Initialize the database storage.

        Args:
            database_path: Path to the SQLite database file, created if missing
        """
        self.database_path = Path(database_path)
        self.schema_manager = SchemaManager()
        self._insert_sql: Dict[str, str] = {
            name: self.schema_manager.get_insert_sql(table) for name, table in TABLES.items()
        }
        self._conn: Optional[sqlite3.Connection] = sqlite3.connect(str(self.database_path))
        self._conn.row_factory = sqlite3.Row
        self._create_schema()

    def _create_schema(self):
        """Create the database schema using field definitions."""
        for table in TABLES.values():
            self._conn.execute(self.schema_manager.get_table_sql(table))
        self._conn.commit()
        logger.debug(f"Schema ready in {self.database_path}")

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StorageError(f"Database {self.database_path} is closed")
        return self._conn

    def _insert(self, table_name: str, entity: Any) -> None:
        table: TableDefinition = TABLES[table_name]
        self.connection.execute(self._insert_sql[table_name], table.to_row(entity))

    def write_airport(self, airport: AirportRecord) -> None:
        self._insert("airport", airport)

    def write_airport_file(self, record: AirportFileRecord) -> None:
        self._insert("airport_file", record)

    def write_runway(self, runway: Runway) -> None:
        self._insert("runway", runway)

    def write_runway_ends(self, runway_ends: List[RunwayEnd]) -> None:
        if not runway_ends:
            return
        table = TABLES["runway_end"]
        self.connection.executemany(self._insert_sql["runway_end"], [table.to_row(end) for end in runway_ends])

    def write_start(self, start: Start) -> None:
        self._insert("start", start)

    def write_helipad(self, helipad: Helipad) -> None:
        self._insert("helipad", helipad)

    def write_com(self, com: Com) -> None:
        self._insert("com", com)

    def write_parking(self, parking: Parking) -> None:
        self._insert("parking", parking)

    def write_taxi_path(self, taxi_path: TaxiPath) -> None:
        self._insert("taxi_path", taxi_path)

    def write_apron(self, apron: Apron) -> None:
        self._insert("apron", apron)

    def commit(self) -> None:
        self.connection.commit()

    def close(self) -> None:
        """Commit pending rows and close the connection."""
        if self._conn is not None:
            self._conn.commit()
            self._conn.close()
            self._conn = None

    def __enter__(self) -> 'DatabaseStorage':
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def get_table_counts(self) -> Dict[str, int]:
        """Number of rows per entity table."""
        counts = {}
        cursor = self.connection.cursor()
        for name in TABLES:
            cursor.execute(f"SELECT COUNT(*) as count FROM {name}")
            counts[name] = cursor.fetchone()['count']
        return counts

    def get_dataframe(self, table_name: str) -> pd.DataFrame:
        """
        Load an entity table.

        Args:
            table_name: One of the entity tables, e.g. 'airport' or 'runway_end'

        Returns:
            DataFrame with one column per field
        """
        if table_name not in TABLES:
            raise ValueError(f"Unknown table: {table_name}")
        return pd.read_sql_query(f"SELECT * FROM {table_name}", self.connection)

    def airport_summary(self) -> pd.DataFrame:
        """
        One row per airport with its main counters, ordered by ident.
        """
        return pd.read_sql_query(
            """
            SELECT ident, name, latitude_deg, longitude_deg, elevation_ft,
                   num_runways, longest_runway_length_ft, num_helipad, num_com,
                   num_parking, num_taxi_path, num_apron, rating
            FROM airport
            ORDER BY ident
            """,
            self.connection,
        )
