from typing import Optional, Union

from hiveddl.canonical.sql_types import SqlType

INT = "INT"
STRING = "STRING"
DOUBLE = "DOUBLE"
BOOLEAN = "BOOLEAN"
TINYINT = "TINYINT"
BIGINT = "BIGINT"
DECIMAL = "DECIMAL"

DECIMAL_MAX_PRECISION = 38
DECIMAL_MAX_SCALE = 38

_HIVE_TYPE_BY_SQL_TYPE = {
    SqlType.INTEGER: INT,
    SqlType.SMALLINT: INT,

    SqlType.VARCHAR: STRING,
    SqlType.CHAR: STRING,
    SqlType.LONGVARCHAR: STRING,
    SqlType.NVARCHAR: STRING,
    SqlType.NCHAR: STRING,
    SqlType.LONGNVARCHAR: STRING,
    SqlType.DATE: STRING,
    SqlType.TIME: STRING,
    SqlType.TIMESTAMP: STRING,
    SqlType.CLOB: STRING,

    SqlType.NUMERIC: DOUBLE,
    SqlType.FLOAT: DOUBLE,
    SqlType.DOUBLE: DOUBLE,
    SqlType.REAL: DOUBLE,

    SqlType.BIT: BOOLEAN,
    SqlType.BOOLEAN: BOOLEAN,

    SqlType.TINYINT: TINYINT,
    SqlType.BIGINT: BIGINT,
    SqlType.DECIMAL: DECIMAL,
}

# Types Hive can only hold in a more generic form
_IMPROVISED_SQL_TYPES = frozenset({
    SqlType.DATE,
    SqlType.TIME,
    SqlType.TIMESTAMP,
    SqlType.NUMERIC,
})


def to_hive_type(sql_type: Union[SqlType, int]) -> Optional[str]:
    """
    Map a JDBC SQL type to the closest Hive type.

    Returns None for types with no Hive counterpart
    (BINARY, VARBINARY, BLOB, ARRAY, STRUCT, ...).
    """
    return _HIVE_TYPE_BY_SQL_TYPE.get(sql_type)


def is_hive_type_improvised(sql_type: Union[SqlType, int]) -> bool:
    """
    True when the SQL type cannot be matched precisely in Hive
    and is cast to something more generic.
    """
    return sql_type in _IMPROVISED_SQL_TYPES


def render_decimal(precision: Optional[int], scale: Optional[int]) -> str:
    """
    Render a parameterized DECIMAL.

    Precision and scale are clamped together: if either exceeds the Hive
    maximum, both are rendered at the maximum.
    """
    if precision is None or scale is None:
        return DECIMAL

    if precision > DECIMAL_MAX_PRECISION or scale > DECIMAL_MAX_SCALE:
        precision = DECIMAL_MAX_PRECISION
        scale = DECIMAL_MAX_SCALE

    return f"{DECIMAL}({precision}, {scale})"
