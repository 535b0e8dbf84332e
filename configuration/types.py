# ──────────────────────────────────────────────────────────────────────────────
# File: configuration/types.py
# Purpose: Typed accessors over environment variables. Each accessor re-reads
#          its source on every call and falls back to a caller default when
#          the key is unset.
#
# Upstream:
#   - ENV: any key handed to a factory
#   - Imports: dataclasses, json, os, typing
#
# Downstream:
#   - configuration.audit, embedding applications
#
# Contents:
#   - Present / Absent / ABSENT
#   - Config
#   - or_else()
#   - string_config() / boolean_config()
# ──────────────────────────────────────────────────────────────────────────────
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Callable, Generic, Mapping, Optional, Protocol, TypeVar, Union

from configuration.errors import BooleanConfigError

T = TypeVar("T")

Source = Mapping[str, str]


@dataclass(frozen=True)
class Present(Generic[T]):
    """A value that was found. Truthy even when the value itself is falsy."""

    value: T


class Absent:
    """No value for the key. Use the ``ABSENT`` singleton."""

    _instance: Optional["Absent"] = None

    def __new__(cls) -> "Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent()

Result = Union[Present[T], Absent]
Getter = Callable[[], Result]


def or_else(getter: Getter) -> Callable[[T], T]:
    """Wrap a getter so an absent result becomes the supplied default."""

    def get_or_else(default: T) -> T:
        result = getter()
        if isinstance(result, Present):
            return result.value
        return default

    return get_or_else


class Config(Generic[T]):
    """Accessor for one key and one value type."""

    def __init__(self, key: str, getter: Getter):
        self._key = key
        self._getter = getter
        self._or_else = or_else(getter)

    @property
    def key(self) -> str:
        return self._key

    def read(self) -> Result:
        return self._getter()

    def get(self) -> Optional[T]:
        result = self._getter()
        return result.value if isinstance(result, Present) else None

    def get_or_else(self, default: T) -> T:
        return self._or_else(default)

    getOrElse = get_or_else

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._key!r})"


class ConfigFactory(Protocol[T]):
    def __call__(self, key: str, source: Optional[Source] = None) -> Config[T]: ...


def _lookup(key: str, source: Optional[Source]) -> Result:
    # os.environ is resolved per read so later changes are visible
    env = os.environ if source is None else source
    value = env.get(key)
    return ABSENT if value is None else Present(value)


def _string_getter(key: str, source: Optional[Source]) -> Getter:
    return lambda: _lookup(key, source)


def _boolean_getter(key: str, source: Optional[Source]) -> Getter:
    def read() -> Result:
        result = _lookup(key, source)
        if not result:
            return result
        # json.JSONDecodeError propagates to the caller unchanged
        decoded = json.loads(result.value)
        if not isinstance(decoded, bool):
            raise BooleanConfigError(key, result.value)
        return Present(decoded)

    return read


def string_config(key: str, source: Optional[Source] = None) -> Config[str]:
    """
    Accessor for the raw string value of ``key``.

    The value is returned verbatim; an empty string counts as present.
    """
    return Config(key, _string_getter(key, source))


def boolean_config(key: str, source: Optional[Source] = None) -> Config[bool]:
    """
    Accessor for a JSON boolean stored in ``key``.

    Only ``true`` and ``false`` decode. Anything that is not JSON raises
    ``json.JSONDecodeError``; JSON that is not a boolean raises
    ``BooleanConfigError``. Neither is turned into a default.
    """
    return Config(key, _boolean_getter(key, source))


stringConfig: ConfigFactory[str] = string_config
booleanConfig: ConfigFactory[bool] = boolean_config
