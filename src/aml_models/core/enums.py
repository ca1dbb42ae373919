"""Open string enums that tolerate values the service adds later."""

from __future__ import annotations

from enum import Enum
from typing import Any

UNKNOWN_VALUE = "UNKNOWN_VALUE"


class OpenEnum(str, Enum):
    """A string enum whose decoder never rejects a value.

    Documented values decode to their members. Any other string decodes to
    an unknown member that carries the original text, so a value the service
    introduced after this package was built survives a decode/encode round
    trip unchanged::

        >>> ComputeType("AKS") is ComputeType.AKS
        True
        >>> future = ComputeType("SomeFutureComputeType")
        >>> future.is_known, future.value
        (False, 'SomeFutureComputeType')

    Subclasses may name a construction default with a ``__default__`` class
    attribute holding the wire value. The default is only used by
    :meth:`default`; it plays no part in decoding.
    """

    @classmethod
    def _missing_(cls, value: Any) -> OpenEnum | None:
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = UNKNOWN_VALUE
        member._value_ = value
        return member

    def __str__(self) -> str:
        return self._value_

    @property
    def is_known(self) -> bool:
        return type(self)._member_map_.get(self._name_) is self

    @classmethod
    def default(cls) -> OpenEnum:
        value = cls.__dict__.get("__default__")
        if value is None:
            raise TypeError(f"{cls.__name__} has no default value")
        return cls(value)

    @classmethod
    def known_values(cls) -> list[str]:
        return [member.value for member in cls]
