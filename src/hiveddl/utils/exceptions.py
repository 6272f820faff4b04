class HiveDDLError(Exception):
    """
    Base exception for all DDL generation errors
    """
    pass


class ConfigurationError(HiveDDLError):
    """
    Raised when generation options or override text are invalid
    """
    pass


class UnsupportedTypeError(ConfigurationError):
    """
    Raised when a column's SQL type has no Hive mapping and no override
    """

    def __init__(self, column: str, sql_type):
        self.column = column
        self.sql_type = sql_type
        super().__init__(
            f"Hive does not support the SQL type for column {column} "
            f"(sql type: {sql_type})"
        )


class UnresolvedOverrideError(ConfigurationError):
    """
    Raised when a type override names a column absent from the source table
    """

    def __init__(self, column: str):
        self.column = column
        super().__init__(
            f"No column by the name {column} found while importing data"
        )


class InvalidPartitionError(ConfigurationError):
    """
    Raised when the partition key is also a column being imported
    """
    pass


class InvalidEscapeCodeError(HiveDDLError, ValueError):
    """
    Raised when a delimiter cannot be written as a Hive octal escape
    """
    pass


class MalformedTimeError(HiveDDLError, ValueError):
    """
    Raised when time text or time fields are out of the hh:mm:ss[.f] grammar
    """
    pass
