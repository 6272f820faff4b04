from enum import IntEnum
from typing import Union


class SqlType(IntEnum):
    """
    JDBC SQL type codes, as reported by source database drivers.

    Values match java.sql.Types so codes read straight from a driver's
    metadata can be used without translation.
    """
    BIT = -7
    TINYINT = -6
    SMALLINT = 5
    INTEGER = 4
    BIGINT = -5
    FLOAT = 6
    REAL = 7
    DOUBLE = 8
    NUMERIC = 2
    DECIMAL = 3
    CHAR = 1
    VARCHAR = 12
    LONGVARCHAR = -1
    DATE = 91
    TIME = 92
    TIMESTAMP = 93
    BINARY = -2
    VARBINARY = -3
    LONGVARBINARY = -4
    NULL = 0
    OTHER = 1111
    JAVA_OBJECT = 2000
    DISTINCT = 2001
    STRUCT = 2002
    ARRAY = 2003
    BLOB = 2004
    CLOB = 2005
    REF = 2006
    DATALINK = 70
    BOOLEAN = 16
    ROWID = -8
    NCHAR = -15
    NVARCHAR = -9
    LONGNVARCHAR = -16
    NCLOB = 2011
    SQLXML = 2009
    REF_CURSOR = 2012
    TIME_WITH_TIMEZONE = 2013
    TIMESTAMP_WITH_TIMEZONE = 2014

    @classmethod
    def coerce(cls, value: Union["SqlType", int, str]) -> Union["SqlType", int]:
        """
        Normalize a type given as enum member, integer code or name.

        Integer codes this enum does not know are returned unchanged so
        vendor-specific types still flow through (they simply have no
        Hive mapping).
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, bool):
            raise ValueError(f"Invalid SQL type: {value!r}")

        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                return value

        if isinstance(value, str):
            key = value.strip().upper()
            if key.lstrip("-").isdigit():
                return cls.coerce(int(key))
            if key in cls.__members__:
                return cls[key]

        raise ValueError(f"Invalid SQL type: {value!r}")

    @staticmethod
    def describe(value: Union["SqlType", int]) -> str:
        if isinstance(value, SqlType):
            return value.name
        return str(value)
