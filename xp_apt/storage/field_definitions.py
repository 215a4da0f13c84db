#!/usr/bin/env python3

import json
import dataclasses
from typing import Any, Dict, List, Optional, Union, get_type_hints
from dataclasses import dataclass
from enum import Enum

from ..models import (
    AirportRecord, AirportFileRecord, Runway, RunwayEnd, Apron,
    TaxiPath, Parking, Com, Helipad, Start, PavementPolygon,
)

class FieldType(Enum):
    """Supported field types."""
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    JSON = "json"

# SQLite has neither BOOLEAN nor JSON columns
_SQL_TYPES = {
    FieldType.STRING: "TEXT",
    FieldType.INTEGER: "INTEGER",
    FieldType.FLOAT: "REAL",
    FieldType.BOOLEAN: "INTEGER",
    FieldType.JSON: "TEXT",
}

_PYTHON_TYPES = {
    str: FieldType.STRING,
    int: FieldType.INTEGER,
    float: FieldType.FLOAT,
    bool: FieldType.BOOLEAN,
}

@dataclass
class FieldDefinition:
    """Definition of a column for storage."""
    name: str
    field_type: FieldType
    nullable: bool = True
    default_value: Any = None
    description: str = ""

    def get_sql_type(self) -> str:
        """Get SQL type for this field."""
        return _SQL_TYPES[self.field_type]

    def format_for_storage(self, value: Any) -> Any:
        """Format value for storage in database."""
        if value is None:
            return None

        if self.field_type is FieldType.BOOLEAN:
            return 1 if value else 0
        elif self.field_type is FieldType.JSON:
            if hasattr(value, 'to_dict'):
                value = value.to_dict()
            return json.dumps(value)
        elif self.field_type is FieldType.STRING:
            return str(value)
        elif self.field_type is FieldType.INTEGER:
            return int(value)
        elif self.field_type is FieldType.FLOAT:
            return float(value)

        return value


def _field_type_for(hint: Any) -> FieldType:
    # Optional[X] is Union[X, None]
    if getattr(hint, '__origin__', None) is Union:
        args = [arg for arg in hint.__args__ if arg is not type(None)]
        hint = args[0] if args else str
    if hint is PavementPolygon:
        return FieldType.JSON
    return _PYTHON_TYPES.get(hint, FieldType.STRING)


def fields_from_dataclass(cls: type, primary_key: Optional[str] = None) -> List[FieldDefinition]:
    """
    Build field definitions from the annotations of a model dataclass.

    Args:
        cls: Model dataclass
        primary_key: Field that must not be null

    Returns:
        One FieldDefinition per dataclass field in declaration order
    """
    hints = get_type_hints(cls)
    result = []
    for model_field in dataclasses.fields(cls):
        result.append(FieldDefinition(
            name=model_field.name,
            field_type=_field_type_for(hints[model_field.name]),
            nullable=model_field.name != primary_key,
        ))
    return result


@dataclass
class TableDefinition:
    """A table storing one model dataclass."""
    name: str
    model: type
    primary_key: str
    fields: List[FieldDefinition] = dataclasses.field(init=False, repr=False)

    def __post_init__(self):
        self.fields = fields_from_dataclass(self.model, self.primary_key)

    def get_field_by_name(self, name: str) -> Optional[FieldDefinition]:
        for field in self.fields:
            if field.name == name:
                return field
        return None

    def to_row(self, entity: Any) -> List[Any]:
        """Values of an entity in column order, formatted for storage."""
        return [field.format_for_storage(getattr(entity, field.name)) for field in self.fields]


TABLES: Dict[str, TableDefinition] = {
    table.name: table for table in [
        TableDefinition("airport", AirportRecord, "airport_id"),
        TableDefinition("airport_file", AirportFileRecord, "airport_file_id"),
        TableDefinition("runway", Runway, "runway_id"),
        TableDefinition("runway_end", RunwayEnd, "runway_end_id"),
        TableDefinition("start", Start, "start_id"),
        TableDefinition("helipad", Helipad, "helipad_id"),
        TableDefinition("com", Com, "com_id"),
        TableDefinition("parking", Parking, "parking_id"),
        TableDefinition("taxi_path", TaxiPath, "taxi_path_id"),
        TableDefinition("apron", Apron, "apron_id"),
    ]
}


class SchemaManager:
    """Generates the SQL for the entity tables."""

    def get_create_table_sql(self, table_name: str, fields: List[FieldDefinition], primary_key: str = None) -> str:
        """Generate CREATE TABLE SQL from field definitions."""
        field_definitions = []

        for field in fields:
            field_sql = f"{field.name} {field.get_sql_type()}"
            if not field.nullable:
                field_sql += " NOT NULL"
            if field.default_value is not None:
                if field.field_type == FieldType.STRING:
                    field_sql += f" DEFAULT '{field.default_value}'"
                else:
                    field_sql += f" DEFAULT {field.default_value}"
            field_definitions.append(field_sql)

        if primary_key:
            field_definitions.append(f"PRIMARY KEY ({primary_key})")

        return f"CREATE TABLE IF NOT EXISTS {table_name} (\n    " + ",\n    ".join(field_definitions) + "\n)"

    def get_insert_sql(self, table: TableDefinition) -> str:
        names = [field.name for field in table.fields]
        placeholders = ", ".join("?" for _ in names)
        return f"INSERT INTO {table.name} ({', '.join(names)}) VALUES ({placeholders})"

    def get_table_sql(self, table: TableDefinition) -> str:
        return self.get_create_table_sql(table.name, table.fields, primary_key=table.primary_key)
