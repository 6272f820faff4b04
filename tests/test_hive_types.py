# ============================================================================
# SQL -> HIVE TYPE MAPPING TESTS
# ============================================================================
# PURPOSE: Verify the fixed JDBC -> Hive type table, the improvised-type
#          flag and DECIMAL precision/scale rendering
# ============================================================================
"""
SQL -> Hive Type Mapping Tests

Run with:
    pytest tests/test_hive_types.py -v
"""

import pytest

from hiveddl.canonical.sql_types import SqlType
from hiveddl.pipeline import hive_types
from hiveddl.pipeline.hive_types import (
    is_hive_type_improvised,
    render_decimal,
    to_hive_type,
)


# ============================================================================
# to_hive_type
# ============================================================================

@pytest.mark.parametrize("sql_type,expected", [
    (SqlType.INTEGER, "INT"),
    (SqlType.SMALLINT, "INT"),
    (SqlType.VARCHAR, "STRING"),
    (SqlType.CHAR, "STRING"),
    (SqlType.LONGVARCHAR, "STRING"),
    (SqlType.NVARCHAR, "STRING"),
    (SqlType.NCHAR, "STRING"),
    (SqlType.LONGNVARCHAR, "STRING"),
    (SqlType.DATE, "STRING"),
    (SqlType.TIME, "STRING"),
    (SqlType.TIMESTAMP, "STRING"),
    (SqlType.CLOB, "STRING"),
    (SqlType.NUMERIC, "DOUBLE"),
    (SqlType.FLOAT, "DOUBLE"),
    (SqlType.DOUBLE, "DOUBLE"),
    (SqlType.REAL, "DOUBLE"),
    (SqlType.BIT, "BOOLEAN"),
    (SqlType.BOOLEAN, "BOOLEAN"),
    (SqlType.TINYINT, "TINYINT"),
    (SqlType.BIGINT, "BIGINT"),
    (SqlType.DECIMAL, "DECIMAL"),
])
def test_supported_types_map(sql_type, expected):
    assert to_hive_type(sql_type) == expected


def test_plain_int_codes_map_like_enum_members():
    assert to_hive_type(4) == "INT"
    assert to_hive_type(12) == "STRING"


@pytest.mark.parametrize("sql_type", [
    SqlType.BINARY,
    SqlType.VARBINARY,
    SqlType.LONGVARBINARY,
    SqlType.BLOB,
    SqlType.ARRAY,
    SqlType.STRUCT,
    SqlType.REF,
    SqlType.JAVA_OBJECT,
    SqlType.DISTINCT,
    SqlType.OTHER,
    SqlType.NULL,
    SqlType.SQLXML,
    99999,
])
def test_unsupported_types_map_to_none(sql_type):
    assert to_hive_type(sql_type) is None


# ============================================================================
# is_hive_type_improvised
# ============================================================================

def test_improvised_only_for_date_time_timestamp_numeric():
    improvised = {t for t in SqlType if is_hive_type_improvised(t)}
    assert improvised == {
        SqlType.DATE,
        SqlType.TIME,
        SqlType.TIMESTAMP,
        SqlType.NUMERIC,
    }


def test_decimal_is_not_improvised():
    assert not is_hive_type_improvised(SqlType.DECIMAL)
    assert not is_hive_type_improvised(424242)


# ============================================================================
# render_decimal
# ============================================================================

@pytest.mark.parametrize("precision,scale,expected", [
    (4, 2, "DECIMAL(4, 2)"),
    (38, 38, "DECIMAL(38, 38)"),
    (44, 256, "DECIMAL(38, 38)"),
    (44, 2, "DECIMAL(38, 38)"),
    (10, 40, "DECIMAL(38, 38)"),
    (0, 0, "DECIMAL(0, 0)"),
])
def test_render_decimal_clamps_together(precision, scale, expected):
    assert render_decimal(precision, scale) == expected


def test_render_decimal_without_precision_is_bare():
    assert render_decimal(None, None) == "DECIMAL"
    assert render_decimal(10, None) == "DECIMAL"


def test_decimal_limits():
    assert hive_types.DECIMAL_MAX_PRECISION == 38
    assert hive_types.DECIMAL_MAX_SCALE == 38
