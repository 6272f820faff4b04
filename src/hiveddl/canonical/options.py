from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Union
from urllib.parse import unquote

from hiveddl.canonical.column import ColumnNameMap
from hiveddl.pipeline.codecs import CodecMap
from hiveddl.utils.exceptions import ConfigurationError

DEFAULT_WAREHOUSE_DIR = "/user/hive/staging"


def parse_column_mapping(text: Optional[str]) -> ColumnNameMap:
    """
    Parse user type overrides of the form "col=Type,col2=Type2".

    Commas inside a type are written URL-encoded, e.g.
    "price=DECIMAL(10%2C2)".
    """
    mapping = ColumnNameMap()
    if text is None or not text.strip():
        return mapping

    for pair in text.split(","):
        column, sep, hive_type = pair.partition("=")
        column = unquote(column.strip())
        hive_type = unquote(hive_type.strip())

        if not sep or not column or not hive_type:
            raise ConfigurationError(f"Malformed column type mapping: {pair!r}")
        if column in mapping:
            raise ConfigurationError(f"Column {column} is mapped more than once")

        mapping[column] = hive_type

    return mapping


@dataclass
class TableDefOptions:
    """
    Options controlling Hive DDL generation for one imported table.
    """
    # Where imported files were staged
    target_dir: Optional[str] = None
    warehouse_dir: str = DEFAULT_WAREHOUSE_DIR

    # Table naming / placement
    hive_database: Optional[str] = None
    external_table_dir: Optional[str] = None

    # Single string partition column
    partition_key: Optional[str] = None
    partition_value: Optional[str] = None

    compression_codec: Optional[str] = None

    # "col=Type,col2=Type2"
    map_column_hive: Optional[str] = None

    # Delimiters as characters or byte values
    field_delimiter: Union[str, int] = ","
    line_delimiter: Union[str, int] = "\n"

    overwrite_table: bool = False
    fail_if_table_exists: bool = False

    def __post_init__(self):
        if (self.partition_key is None) != (self.partition_value is None):
            raise ConfigurationError(
                "partition_key and partition_value must be given together"
            )
        if self.partition_key is not None and not str(self.partition_key).strip():
            raise ConfigurationError("partition_key must not be empty")
        if self.compression_codec:
            CodecMap.get_codec_class_name(self.compression_codec)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "TableDefOptions":
        data = dict(data or {})

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown options: {', '.join(unknown)}")

        # YAML hands partition values like 20110413 back as ints
        for key in ("partition_key", "partition_value"):
            if data.get(key) is not None:
                data[key] = str(data[key])

        return cls(**data)

    def get_column_overrides(self) -> ColumnNameMap:
        return parse_column_mapping(self.map_column_hive)
