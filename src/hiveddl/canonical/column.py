from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from hiveddl.canonical.sql_types import SqlType


@dataclass(frozen=True)
class ColumnDescriptor:
    """
    Canonical representation of a source column.
    Produced by schema introspection, one per column.
    """
    name: str
    sql_type: Union[SqlType, int]

    precision: Optional[int] = None
    scale: Optional[int] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("Column name must not be empty")
        object.__setattr__(self, "sql_type", SqlType.coerce(self.sql_type))

        for attr in ("precision", "scale"):
            value = getattr(self, attr)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(
                    f"Column {self.name} {attr} must be a non-negative integer, got {value!r}"
                )

    @classmethod
    def from_info(cls, name: str, info: Any) -> "ColumnDescriptor":
        """
        Build a descriptor from the shapes introspection layers hand back:
        an existing descriptor, a bare type code, a (type, precision, scale)
        sequence or a dict with type/precision/scale keys.
        """
        if isinstance(info, ColumnDescriptor):
            if info.name == name:
                return info
            return cls(name, info.sql_type, info.precision, info.scale)

        if isinstance(info, dict):
            sql_type = info.get("sql_type", info.get("type"))
            if sql_type is None:
                raise ValueError(f"Column {name} has no SQL type")
            return cls(name, sql_type, info.get("precision"), info.get("scale"))

        if isinstance(info, (list, tuple)):
            if not info:
                raise ValueError(f"Column {name} has no SQL type")
            padded = list(info) + [None, None]
            return cls(name, padded[0], padded[1], padded[2])

        return cls(name, info)


class ColumnNameMap(MutableMapping):
    """
    Mapping keyed by column name, compared case-insensitively.

    The spelling a key was first stored with is kept, so iteration and
    original_name() return the column identity the source reported.
    """

    def __init__(self, data=None, **kwargs):
        self._store: Dict[str, Tuple[str, Any]] = {}
        if data is not None:
            self.update(data)
        if kwargs:
            self.update(kwargs)

    @staticmethod
    def _key(name: str) -> str:
        if not isinstance(name, str):
            raise TypeError(f"Column names must be strings, got {type(name).__name__}")
        return name.casefold()

    def __getitem__(self, name: str) -> Any:
        return self._store[self._key(name)][1]

    def __setitem__(self, name: str, value: Any) -> None:
        key = self._key(name)
        original = self._store[key][0] if key in self._store else name
        self._store[key] = (original, value)

    def __delitem__(self, name: str) -> None:
        del self._store[self._key(name)]

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return name.casefold() in self._store

    def original_name(self, name: str) -> str:
        return self._store[self._key(name)][0]

    def copy(self) -> "ColumnNameMap":
        return ColumnNameMap(self)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"ColumnNameMap({{{items}}})"
