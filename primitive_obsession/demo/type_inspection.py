"""Classify a type as a raw representation or a nominal wrapper around one."""

from dataclasses import fields, is_dataclass


def is_nominal_wrapper(tp: type) -> bool:
    """A nominal wrapper is a frozen dataclass with exactly one field."""
    if not isinstance(tp, type) or not is_dataclass(tp):
        return False
    return tp.__dataclass_params__.frozen and len(fields(tp)) == 1  # type: ignore[attr-defined]


def _type_name(tp: object) -> str:
    return getattr(tp, "__name__", str(tp))


def describe_type(tp: type) -> str:
    if is_nominal_wrapper(tp):
        wrapped = fields(tp)[0].type
        return f"{tp.__name__}: nominal wrapper around {_type_name(wrapped)}"
    return f"{_type_name(tp)}: raw representation"
