"""Per-kind copy algorithms and the unsupported-kind policy.

Each copier takes the original value and the active CopyContext, and recurses
into children through ``context.copy``. Copiers for identity-bearing kinds
register their new storage with the context's tracker before copying any
child.
"""

from __future__ import annotations

import array
import dataclasses
import functools
import gc
import logging
import types
from collections import defaultdict, deque
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from deepclone.core.errors import UnsupportedTypeError, qualified_name
from deepclone.core.kinds import TIMESTAMP_TYPES, VALUE_TYPES, Kind

if TYPE_CHECKING:
    from deepclone.engine.dispatch import CopyContext

logger = logging.getLogger(__name__)

Copier = Callable[[Any, "CopyContext"], Any]


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def _is_pydantic(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic.

    Args:
        cls: Class to check.

    Returns:
        True if class inherits from pydantic.BaseModel, False otherwise.
    """
    for base in cls.__mro__:
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


@functools.lru_cache(maxsize=1024)
def _public_slots(cls: type) -> tuple[str, ...]:
    """Collect public slot names declared anywhere in the class hierarchy.

    Args:
        cls: Class to inspect.

    Returns:
        Public slot names, base classes first.
    """
    names: list[str] = []
    for base in reversed(cls.__mro__):
        slots = vars(base).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if _is_public(name) and name not in names:
                names.append(name)
    return tuple(names)


def _copy_members(
    src: Any, dst: Any, context: CopyContext, skip: Iterable[str] = ()
) -> None:
    """Copy public members from src into dst, by instance dict and slots.

    Non-public members (leading underscore) are never read. Writes bypass
    ``__setattr__`` so frozen dataclasses and guarded setters are filled too.

    Args:
        src: Original object.
        dst: Freshly allocated object of the same type.
        context: Active copy context.
        skip: Member names handled by the caller.
    """
    members = getattr(src, "__dict__", None)
    if members is not None:
        target = dst.__dict__
        for name, value in members.items():
            if _is_public(name) and name not in skip:
                target[name] = context.copy(value)

    for name in _public_slots(type(src)):
        if name in skip:
            continue
        try:
            value = object.__getattribute__(src, name)
        except AttributeError:
            continue  # unset slot
        object.__setattr__(dst, name, context.copy(value))


def _zero_private_fields(dst: Any) -> None:
    """Reset non-public dataclass fields to their declared defaults (or None)."""
    if not dataclasses.is_dataclass(dst):
        return
    for f in dataclasses.fields(dst):
        if _is_public(f.name):
            continue
        if f.default is not dataclasses.MISSING:
            value = f.default
        elif f.default_factory is not dataclasses.MISSING:
            value = f.default_factory()
        else:
            value = None
        object.__setattr__(dst, f.name, value)


def apply_unsupported_policy(src: Any, context: CopyContext, reason: str | None = None) -> Any:
    """Resolve a value the engine cannot copy.

    Args:
        src: The unsupported value (never None).
        context: Active copy context; its mode selects the outcome.
        reason: Optional detail for the failure message.

    Returns:
        None in lenient mode.

    Raises:
        UnsupportedTypeError: In strict mode.
    """
    if context.skip_unsupported:
        logger.debug("Replacing unsupported %s value with None", qualified_name(type(src)))
        return None
    raise UnsupportedTypeError(type(src), reason)


_UNALLOCATABLE = object()
_UNALLOCATABLE_REASON = "cannot be allocated without arguments"


def _allocate(cls: type) -> Any:
    """Create an uninitialized instance, or _UNALLOCATABLE if __new__ needs arguments."""
    try:
        return cls.__new__(cls)
    except TypeError:
        logger.debug("%s %s", qualified_name(cls), _UNALLOCATABLE_REASON)
        return _UNALLOCATABLE


# Copiers by kind


def copy_scalar(src: Any, context: CopyContext) -> Any:
    """Scalars are immutable and returned as-is."""
    return src


def copy_fixed_sequence(src: tuple[Any, ...], context: CopyContext) -> tuple[Any, ...]:
    """Copy a tuple element by element into a new tuple of the same type.

    Tuples are immutable, so the copy can only be built once its elements
    exist. If one of the elements led back to this tuple, the copy made on
    that inner visit is reused so that the result stays a single object.
    """
    items = [context.copy(item) for item in src]

    existing = context.tracker.get(src)
    if existing is not None:
        return existing

    cls = type(src)
    if cls is tuple:
        dst = tuple(items)
    elif hasattr(cls, "_make"):
        dst = cls._make(items)
    else:
        dst = tuple.__new__(cls, items)

    context.tracker.register(src, dst)
    _copy_members(src, dst, context)
    return dst


def copy_dynamic_sequence(src: Any, context: CopyContext) -> Any:
    """Copy a resizable sequence, preserving length, order and capacity."""
    cls = type(src)

    if isinstance(src, array.array):
        dst = array.array.__new__(cls, src.typecode, src)
        context.tracker.register(src, dst)
        _copy_members(src, dst, context)
        return dst

    dst = _allocate(cls)
    if dst is _UNALLOCATABLE:
        return apply_unsupported_policy(src, context, _UNALLOCATABLE_REASON)
    if isinstance(src, deque):
        deque.__init__(dst, (), src.maxlen)
    context.tracker.register(src, dst)
    _copy_members(src, dst, context)

    if isinstance(src, bytearray):
        dst.extend(src)
        return dst

    for item in src:
        dst.append(context.copy(item))
    return dst


def copy_mapping(src: Any, context: CopyContext) -> Any:
    """Copy a keyed collection. Keys are kept as-is; only values are copied."""
    cls = type(src)

    if isinstance(src, frozenset):
        dst = frozenset.__new__(cls, src)
        context.tracker.register(src, dst)
        _copy_members(src, dst, context)
        return dst

    dst = _allocate(cls)
    if dst is _UNALLOCATABLE:
        return apply_unsupported_policy(src, context, _UNALLOCATABLE_REASON)
    if isinstance(src, defaultdict):
        dst.default_factory = src.default_factory
    context.tracker.register(src, dst)
    _copy_members(src, dst, context)

    if isinstance(src, set):
        dst.update(src)
        return dst

    for key, value in src.items():
        dst[key] = context.copy(value)
    return dst


def copy_reference(src: types.CellType, context: CopyContext) -> types.CellType:
    """Copy a cell into a new cell that refers to a copy of the referent."""
    dst = types.CellType()
    context.tracker.register(src, dst)
    try:
        referent = src.cell_contents
    except ValueError:
        return dst  # empty cell stays empty
    dst.cell_contents = context.copy(referent)
    return dst


def copy_dynamic_wrapper(src: Any, context: CopyContext) -> Any:
    """Unwrap the held value, copy it, and re-wrap it in the same wrapper type."""
    if isinstance(src, types.MappingProxyType):
        # The proxy's only referent is the mapping it views.
        (backing,) = gc.get_referents(src)
        held = context.copy(backing)
        existing = context.tracker.get(src)
        if existing is not None:
            return existing
        dst = types.MappingProxyType(held)
        context.tracker.register(src, dst)
        return dst

    held = getattr(src, "data", None)
    if held is None:
        return src

    dst = _allocate(type(src))
    if dst is _UNALLOCATABLE:
        return apply_unsupported_policy(src, context, _UNALLOCATABLE_REASON)
    context.tracker.register(src, dst)
    dst.__dict__["data"] = context.copy(held)
    _copy_members(src, dst, context, skip=("data",))
    return dst


def copy_record(src: Any, context: CopyContext) -> Any:
    """Copy an object member by member into a fresh uninitialized instance.

    Timestamps are copied by value. Subclasses of int, str and the other
    value types keep their value and get their instance attributes copied.
    Only public members are copied; the rest stay at their zero value in the
    copy.
    """
    if isinstance(src, TIMESTAMP_TYPES):
        return src

    cls = type(src)
    if _is_pydantic(cls):
        return _copy_pydantic_model(src, context)

    value_base = next((base for base in VALUE_TYPES if isinstance(src, base)), None)
    if value_base is not None:
        dst = value_base.__new__(cls, src)
    else:
        dst = _allocate(cls)
        if dst is _UNALLOCATABLE:
            return apply_unsupported_policy(src, context, _UNALLOCATABLE_REASON)

    context.tracker.register(src, dst)
    _zero_private_fields(dst)
    _copy_members(src, dst, context)
    return dst


def _copy_pydantic_model(src: Any, context: CopyContext) -> Any:
    """Copy a Pydantic model without validation.

    Fields and extras are copied, the set of explicitly set fields is kept,
    and private attributes are reset to their declared defaults.
    """
    from pydantic_core import PydanticUndefined

    cls = type(src)
    dst = cls.__new__(cls)
    context.tracker.register(src, dst)

    fields: dict[str, Any] = {}
    object.__setattr__(dst, "__dict__", fields)
    object.__setattr__(dst, "__pydantic_fields_set__", set(src.__pydantic_fields_set__))

    extra = src.__pydantic_extra__
    dst_extra: dict[str, Any] | None = None if extra is None else {}
    object.__setattr__(dst, "__pydantic_extra__", dst_extra)

    private: dict[str, Any] = {}
    for name, attr in cls.__private_attributes__.items():
        default = attr.get_default()
        if default is not PydanticUndefined:
            private[name] = default
    object.__setattr__(dst, "__pydantic_private__", private if cls.__private_attributes__ else None)

    for name, value in src.__dict__.items():
        if _is_public(name):
            fields[name] = context.copy(value)
    if extra and dst_extra is not None:
        for name, value in extra.items():
            dst_extra[name] = context.copy(value)
    return dst


def copy_unsupported(src: Any, context: CopyContext) -> Any:
    """Opaque values cannot be copied; defer to the mode's policy."""
    return apply_unsupported_policy(src, context)


COPIERS: dict[Kind, Copier] = {
    Kind.SCALAR: copy_scalar,
    Kind.FIXED_SEQUENCE: copy_fixed_sequence,
    Kind.DYNAMIC_SEQUENCE: copy_dynamic_sequence,
    Kind.MAPPING: copy_mapping,
    Kind.REFERENCE: copy_reference,
    Kind.DYNAMIC_WRAPPER: copy_dynamic_wrapper,
    Kind.RECORD: copy_record,
    Kind.UNSUPPORTED: copy_unsupported,
}
"""Dispatch table: one copier per Kind."""
