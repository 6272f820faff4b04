"""
Schema introspection interface.

TableDefWriter only needs two calls from a source database connection:
the ordered column names of a table and the type info of each column.
Live implementations (JDBC, SQLAlchemy, ...) live outside this package.
"""

from typing import Any, Dict, Iterable, List, Mapping, Protocol, Sequence

from hiveddl.canonical.column import ColumnDescriptor, ColumnNameMap


class SchemaSource(Protocol):
    """Interface for source schema introspection."""

    def get_column_names(self, table: str) -> Sequence[str]:
        """Return column names in table order."""
        ...

    def get_column_info(self, table: str) -> Mapping[str, Any]:
        """Return column name -> ColumnDescriptor or (sql_type, precision, scale)."""
        ...


class StaticSchemaSource:
    """
    In-memory schema source, e.g. built from a YAML column list.
    """

    def __init__(self, tables: Dict[str, Iterable[ColumnDescriptor]]):
        self._tables: Dict[str, List[ColumnDescriptor]] = {
            name: list(columns) for name, columns in tables.items()
        }

    @classmethod
    def from_column_specs(cls, table: str, specs: Iterable[Dict[str, Any]]) -> "StaticSchemaSource":
        """
        Build from dicts like {"name": "id", "type": "INTEGER", "precision": 10}.
        """
        columns = []
        for spec in specs:
            if not isinstance(spec, dict) or not spec.get("name"):
                raise ValueError(f"Column spec must be a mapping with a name: {spec!r}")
            columns.append(ColumnDescriptor.from_info(spec["name"], spec))
        return cls({table: columns})

    def _columns(self, table: str) -> List[ColumnDescriptor]:
        if table not in self._tables:
            raise KeyError(f"Unknown table: {table}")
        return self._tables[table]

    def get_column_names(self, table: str) -> List[str]:
        return [c.name for c in self._columns(table)]

    def get_column_info(self, table: str) -> ColumnNameMap:
        return ColumnNameMap({c.name: c for c in self._columns(table)})
