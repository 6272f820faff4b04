import logging
import posixpath
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, List, Mapping, Optional, Union

from hiveddl.canonical.column import ColumnDescriptor, ColumnNameMap
from hiveddl.canonical.options import TableDefOptions
from hiveddl.canonical.sql_types import SqlType
from hiveddl.introspection.schema_source import SchemaSource
from hiveddl.observability.logger import RequestTimer, generate_request_id, log_event
from hiveddl.pipeline import hive_types
from hiveddl.pipeline.codecs import CodecMap, HIVE_IGNORE_KEY_OUTPUT_FORMAT, LZO_INPUT_FORMAT
from hiveddl.pipeline.type_resolution import ColumnTypeResolver
from hiveddl.utils.exceptions import (
    ConfigurationError,
    HiveDDLError,
    InvalidEscapeCodeError,
    InvalidPartitionError,
    UnsupportedTypeError,
)

MAX_ESCAPE_CODE = 0o177


def encode_octal_byte(code: Union[int, str]) -> str:
    """
    Render a delimiter as a Hive octal escape, e.g. "\\012" for newline.

    Only 7-bit values are accepted; Hive reads these escapes as single
    signed bytes, so anything above 0177 would not round trip.
    """
    if isinstance(code, str):
        if len(code) != 1:
            raise InvalidEscapeCodeError(
                f"Delimiter must be a single character, got {code!r}"
            )
        code = ord(code)

    if isinstance(code, bool) or not isinstance(code, int):
        raise InvalidEscapeCodeError(f"Invalid delimiter: {code!r}")

    if code < 0 or code > MAX_ESCAPE_CODE:
        raise InvalidEscapeCodeError(
            f"Character {code} is an out-of-range delimiter"
        )

    return "\\%03o" % code


@dataclass(frozen=True)
class TableStatements:
    create_table: str
    load_data: str


class TableDefWriter:
    """
    Generates the Hive statements that create a table for an import
    and move the imported files into it.

    Responsibilities:
    - CREATE TABLE with column types resolved from the source schema
    - Apply user type overrides before the default SQL -> Hive mapping
    - Partition column, delimiters and compression-aware storage clause
    - LOAD DATA from the staging directory

    Statements carry no trailing ';' unless terminate_statements is set.
    """

    def __init__(
        self,
        options: TableDefOptions,
        schema_source: Optional[SchemaSource],
        input_table: Optional[str],
        output_table: str,
        with_comments: bool = False,
        terminate_statements: bool = False,
        clock: Callable[[], datetime] = datetime.now,
    ):
        if not output_table:
            raise ValueError("output_table must not be empty")

        self.options = options
        self.schema_source = schema_source
        self.input_table = input_table
        self.output_table = output_table
        self.with_comments = with_comments
        self.terminate_statements = terminate_statements
        self.clock = clock

        self._column_types: Optional[ColumnNameMap] = None
        self._columns: Optional[List[ColumnDescriptor]] = None
        self._overrides_validated = False
        self._resolver = ColumnTypeResolver.with_overrides(options.get_column_overrides())

    # --------------------------------------------------
    # SCHEMA
    # --------------------------------------------------

    def set_column_types(self, column_types: Mapping[str, object]):
        """
        Use an already known schema instead of querying the schema source.
        Values may be SqlType codes or ColumnDescriptors.
        """
        self._column_types = ColumnNameMap(column_types)
        self._columns = None
        self._overrides_validated = False

    def get_column_descriptors(self) -> List[ColumnDescriptor]:
        if self._columns is not None:
            return self._columns

        if self._column_types is not None:
            names = list(self._column_types)
            info = self._column_types
        else:
            if self.schema_source is None or not self.input_table:
                raise HiveDDLError(
                    "A schema source and input table are required when "
                    "column types are not set explicitly"
                )
            names = list(self.schema_source.get_column_names(self.input_table))
            info = ColumnNameMap(self.schema_source.get_column_info(self.input_table))

        columns = []
        for name in names:
            if name not in info:
                raise UnsupportedTypeError(name, "unknown")
            try:
                columns.append(ColumnDescriptor.from_info(name, info[name]))
            except ValueError as e:
                raise ConfigurationError(str(e)) from e

        self._columns = columns
        return columns

    def validate_overrides(self):
        """
        Every overridden column must exist in the source table.
        """
        if self._overrides_validated:
            return
        self._resolver.validate([c.name for c in self.get_column_descriptors()])
        self._overrides_validated = True

    def resolve_column_type(self, column: ColumnDescriptor) -> str:
        self.validate_overrides()
        hive_type = self._resolver.resolve(column)

        if hive_types.is_hive_type_improvised(column.sql_type):
            log_event("COLUMN_TYPE_IMPROVISED", {
                "table": self.output_table,
                "column": column.name,
                "sql_type": SqlType.describe(column.sql_type),
                "hive_type": hive_type,
                "message": f"Column {column.name} had to be cast to a less precise type in Hive",
            }, level=logging.WARNING)

        return hive_type

    # --------------------------------------------------
    # NAMING HELPERS
    # --------------------------------------------------

    def _qualified_table_name(self) -> str:
        if self.options.hive_database:
            return f"`{self.options.hive_database}`.`{self.output_table}`"
        return f"`{self.output_table}`"

    def _terminate(self, stmt: str) -> str:
        return stmt + ";" if self.terminate_statements else stmt

    def get_source_path(self) -> str:
        """
        Directory holding the imported files: the target dir if given,
        else a directory named after the input table, under the staging root.
        """
        name = self.options.target_dir or self.input_table or self.output_table
        return posixpath.join(self.options.warehouse_dir, name)

    # --------------------------------------------------
    # CREATE TABLE
    # --------------------------------------------------

    def get_create_table_stmt(self) -> str:
        columns = self.get_column_descriptors()
        self.validate_overrides()
        self._check_partition_key(columns)

        column_sql = []
        for column in columns:
            column_sql.append(f"`{column.name}` {self.resolve_column_type(column)}")

        external = bool(self.options.external_table_dir)

        sb = ["CREATE "]
        if external:
            sb.append("EXTERNAL ")
        sb.append("TABLE ")
        if not self.options.fail_if_table_exists:
            sb.append("IF NOT EXISTS ")
        sb.append(self._qualified_table_name())
        sb.append(" ( ")
        sb.append(", ".join(column_sql))
        sb.append(") ")

        if self.with_comments:
            stamp = self.clock().strftime("%Y/%m/%d %H:%M:%S")
            sb.append(f"COMMENT 'Imported by hiveddl on {stamp}' ")

        if self.options.partition_key:
            sb.append(f"PARTITIONED BY ({self.options.partition_key} STRING) ")

        sb.append(self._build_row_format_clause())
        sb.append(" ")
        sb.append(self._build_storage_clause())

        if external:
            sb.append(f" LOCATION '{self.options.external_table_dir}'")

        return self._terminate("".join(sb))

    def _check_partition_key(self, columns: List[ColumnDescriptor]):
        key = self.options.partition_key
        if not key:
            return
        for column in columns:
            if column.name.casefold() == key.casefold():
                raise InvalidPartitionError(
                    f"Partition key {column.name} cannot be a column to import."
                )

    def _build_row_format_clause(self) -> str:
        field_esc = encode_octal_byte(self.options.field_delimiter)
        line_esc = encode_octal_byte(self.options.line_delimiter)
        return (
            f"ROW FORMAT DELIMITED FIELDS TERMINATED BY '{field_esc}' "
            f"LINES TERMINATED BY '{line_esc}'"
        )

    def _build_storage_clause(self) -> str:
        if CodecMap.is_lzop(self.options.compression_codec):
            return (
                f"STORED AS INPUTFORMAT '{LZO_INPUT_FORMAT}' "
                f"OUTPUTFORMAT '{HIVE_IGNORE_KEY_OUTPUT_FORMAT}'"
            )
        return "STORED AS TEXTFILE"

    # --------------------------------------------------
    # LOAD DATA
    # --------------------------------------------------

    def get_load_data_stmt(self) -> str:
        sb = [f"LOAD DATA INPATH '{self.get_source_path()}'"]
        if self.options.overwrite_table:
            sb.append(" OVERWRITE")
        sb.append(" INTO TABLE ")
        sb.append(self._qualified_table_name())

        if self.options.partition_key:
            sb.append(
                f" PARTITION ({self.options.partition_key}='{self.options.partition_value}')"
            )

        return self._terminate("".join(sb))

    # --------------------------------------------------
    # COMBINED ENTRYPOINT
    # --------------------------------------------------

    def generate(self) -> TableStatements:
        """
        Generate both statements, or raise without returning either.
        """
        request_id = generate_request_id()
        timer = RequestTimer()

        log_event("TABLE_DDL_GENERATION_STARTED", {
            "request_id": request_id,
            "input_table": self.input_table,
            "output_table": self.output_table,
            "database": self.options.hive_database,
        })

        try:
            statements = TableStatements(
                create_table=self.get_create_table_stmt(),
                load_data=self.get_load_data_stmt(),
            )
        except HiveDDLError as e:
            log_event("TABLE_DDL_GENERATION_FAILED", {
                "request_id": request_id,
                "output_table": self.output_table,
                "error": type(e).__name__,
                "message": str(e),
            }, level=logging.ERROR)
            raise

        log_event("TABLE_DDL_GENERATED", {
            "request_id": request_id,
            "output_table": self.output_table,
            "columns": len(self.get_column_descriptors()),
            "duration_seconds": timer.duration(),
        })
        return statements

    def as_dict(self) -> Dict[str, str]:
        statements = self.generate()
        return {
            "create_table": statements.create_table,
            "load_data": statements.load_data,
        }
