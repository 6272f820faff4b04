from typing import Any, Dict

from hiveddl.canonical.options import TableDefOptions
from hiveddl.introspection.schema_source import StaticSchemaSource
from hiveddl.observability.logger import log_event
from hiveddl.outputs.table_def_writer import TableDefWriter
from hiveddl.utils.exceptions import ConfigurationError

_PAYLOAD_KEYS = {
    "input_table",
    "output_table",
    "columns",
    "options",
    "with_comments",
    "terminate_statements",
}


def build_writer(payload: Dict[str, Any]) -> TableDefWriter:
    """
    Build a TableDefWriter from a request/config payload:

    {
      "input_table": "employees",
      "output_table": "employees",      # defaults to input_table
      "columns": [{"name": "id", "type": "INTEGER"}, ...],
      "options": {...TableDefOptions fields...},
      "with_comments": false,
      "terminate_statements": false
    }
    """
    if not isinstance(payload, dict):
        raise ConfigurationError("Payload must be a mapping")

    unknown = sorted(set(payload) - _PAYLOAD_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown payload keys: {', '.join(unknown)}")

    input_table = payload.get("input_table")
    if not input_table:
        raise ConfigurationError("input_table is required")
    output_table = payload.get("output_table") or input_table

    columns = payload.get("columns")
    if columns is None:
        columns = []
    if not isinstance(columns, list):
        raise ConfigurationError("columns must be a list")

    try:
        schema_source = StaticSchemaSource.from_column_specs(input_table, columns)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e

    options = TableDefOptions.from_dict(payload.get("options"))

    return TableDefWriter(
        options,
        schema_source,
        input_table,
        output_table,
        with_comments=bool(payload.get("with_comments", False)),
        terminate_statements=bool(payload.get("terminate_statements", False)),
    )


# ==========================================================
# ROUTER
# ==========================================================
def route(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Main entry point shared by the HTTP app, the config executor and the CLI.

    Flow:
    Payload → Options + Static schema → TableDefWriter → Statements
    """
    try:
        writer = build_writer(payload)
    except ConfigurationError as e:
        log_event("TABLE_DDL_REQUEST_REJECTED", {"message": str(e)})
        raise

    statements = writer.generate()

    return {
        "status": "SUCCESS",
        "input_table": writer.input_table,
        "output_table": writer.output_table,
        "create_table": statements.create_table,
        "load_data": statements.load_data,
    }
