from typing import Iterable, Optional, Sequence

from hiveddl.canonical.column import ColumnDescriptor, ColumnNameMap
from hiveddl.canonical.sql_types import SqlType
from hiveddl.pipeline import hive_types
from hiveddl.utils.exceptions import UnresolvedOverrideError, UnsupportedTypeError


class OverrideTypeStrategy:
    """
    Hive types supplied by the user, taken verbatim.
    """

    def __init__(self, overrides: ColumnNameMap):
        self.overrides = overrides

    def validate(self, column_names: Iterable[str]):
        known = ColumnNameMap({name: True for name in column_names})
        for column in self.overrides:
            if column not in known:
                raise UnresolvedOverrideError(column)

    def resolve(self, column: ColumnDescriptor) -> Optional[str]:
        return self.overrides.get(column.name)


class MapperTypeStrategy:
    """
    Hive types derived from the JDBC type of the column.
    """

    def resolve(self, column: ColumnDescriptor) -> Optional[str]:
        hive_type = hive_types.to_hive_type(column.sql_type)
        if hive_type is None:
            return None

        if column.sql_type == SqlType.DECIMAL:
            return hive_types.render_decimal(column.precision, column.scale)

        return hive_type


class ColumnTypeResolver:
    """
    Tries each strategy in order; the first non-empty answer wins.
    """

    def __init__(self, strategies: Sequence):
        self.strategies = list(strategies)

    @classmethod
    def with_overrides(cls, overrides: ColumnNameMap) -> "ColumnTypeResolver":
        return cls([OverrideTypeStrategy(overrides), MapperTypeStrategy()])

    def validate(self, column_names: Sequence[str]):
        for strategy in self.strategies:
            validate = getattr(strategy, "validate", None)
            if validate is not None:
                validate(column_names)

    def resolve(self, column: ColumnDescriptor) -> str:
        for strategy in self.strategies:
            hive_type = strategy.resolve(column)
            if hive_type:
                return hive_type

        raise UnsupportedTypeError(column.name, SqlType.describe(column.sql_type))
