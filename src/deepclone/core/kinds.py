"""Kind classification: map a type to the shape category that selects its copier.

Usage:
    classify(list)          # Kind.DYNAMIC_SEQUENCE
    kind_of({"a": 1})       # Kind.MAPPING
    kind_of(lambda: None)   # Kind.UNSUPPORTED
"""

from __future__ import annotations

import array
import asyncio
import collections
import ctypes
import datetime
import functools
import io
import mmap
import pathlib
import queue
import re
import socket
import threading
import types
import uuid
from decimal import Decimal
from enum import Enum, auto
from fractions import Fraction
from typing import Any


class Kind(Enum):
    """Shape category of a value. Every type maps to exactly one."""

    SCALAR = auto()  # Immutable atom, returned as-is
    FIXED_SEQUENCE = auto()  # tuple-like, fixed length
    DYNAMIC_SEQUENCE = auto()  # list-like, resizable
    MAPPING = auto()  # keyed collection, keys kept as-is
    REFERENCE = auto()  # single-referent box (cell)
    DYNAMIC_WRAPPER = auto()  # holds one value in `data`
    RECORD = auto()  # object with named members
    UNSUPPORTED = auto()  # code, channels, raw memory, unknown layouts


SCALAR_TYPES: tuple[type, ...] = (
    types.NoneType,
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    Decimal,
    Fraction,
    uuid.UUID,
    Enum,
    range,
    slice,
    types.EllipsisType,
    types.NotImplementedType,
    re.Pattern,
    pathlib.PurePath,
    type,
)

TIMESTAMP_TYPES: tuple[type, ...] = (
    datetime.date,
    datetime.time,
    datetime.timedelta,
    datetime.tzinfo,
)

_EXECUTABLE_TYPES: tuple[type, ...] = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.MethodWrapperType,
    types.WrapperDescriptorType,
    types.MethodDescriptorType,
    types.ClassMethodDescriptorType,
    types.CodeType,
    types.GeneratorType,
    types.CoroutineType,
    types.AsyncGeneratorType,
    types.FrameType,
    types.TracebackType,
    functools.partial,
    staticmethod,
    classmethod,
    property,
)

_CHANNEL_TYPES: tuple[type, ...] = (
    queue.Queue,
    queue.SimpleQueue,
    asyncio.Queue,
    socket.socket,
    io.IOBase,
    type(threading.Lock()),
    type(threading.RLock()),
    threading.Condition,
    threading.Event,
    threading.Semaphore,
    threading.Barrier,
)

_RAW_MEMORY_TYPES: tuple[type, ...] = (
    memoryview,
    mmap.mmap,
    ctypes._SimpleCData,
    ctypes._Pointer,
    ctypes.Array,
    ctypes.Structure,
    ctypes.Union,
)

UNSUPPORTED_TYPES: tuple[type, ...] = (
    *_EXECUTABLE_TYPES,
    *_CHANNEL_TYPES,
    *_RAW_MEMORY_TYPES,
    types.ModuleType,
)

# Immutable value bases whose subclasses may still carry instance attributes.
VALUE_TYPES: tuple[type, ...] = (int, float, complex, str, bytes)

WRAPPER_TYPES: tuple[type, ...] = (
    collections.UserDict,
    collections.UserList,
    collections.UserString,
    types.MappingProxyType,
)

MAPPING_TYPES: tuple[type, ...] = (dict, set, frozenset)

SEQUENCE_TYPES: tuple[type, ...] = (list, bytearray, collections.deque, array.array)


def _has_member_layout(tp: type) -> bool:
    """Check whether instances of tp store members in __dict__ or __slots__.

    Args:
        tp: Type to inspect.

    Returns:
        True if instances carry inspectable members, False for opaque C layouts.
    """
    if tp is object:
        return True
    if getattr(tp, "__dictoffset__", 0):
        return True
    return any("__slots__" in vars(base) for base in tp.__mro__ if base is not object)


@functools.lru_cache(maxsize=1024)
def classify(tp: type) -> Kind:
    """Determine the Kind of a type from its shape alone.

    Args:
        tp: Concrete runtime type of a value.

    Returns:
        The Kind whose copier handles values of this type.
    """
    if (
        issubclass(tp, VALUE_TYPES)
        and not issubclass(tp, Enum)
        and getattr(tp, "__dictoffset__", 0)
    ):
        return Kind.RECORD  # value subclass with its own attributes
    if issubclass(tp, SCALAR_TYPES):
        return Kind.SCALAR
    if issubclass(tp, UNSUPPORTED_TYPES):
        return Kind.UNSUPPORTED
    if issubclass(tp, TIMESTAMP_TYPES):
        return Kind.RECORD
    if issubclass(tp, types.CellType):
        return Kind.REFERENCE
    if issubclass(tp, WRAPPER_TYPES):
        return Kind.DYNAMIC_WRAPPER
    if issubclass(tp, tuple):
        return Kind.FIXED_SEQUENCE
    if issubclass(tp, MAPPING_TYPES):
        return Kind.MAPPING
    if issubclass(tp, SEQUENCE_TYPES):
        return Kind.DYNAMIC_SEQUENCE
    if _has_member_layout(tp):
        return Kind.RECORD
    return Kind.UNSUPPORTED


def kind_of(value: Any) -> Kind:
    """Classify a value by its concrete type.

    Args:
        value: Any object.

    Returns:
        Kind of type(value).
    """
    return classify(type(value))
