"""Numeric kinds a range can be expanded over.

Every kind implements the Steppable capability once: parse from text, a
fixed unit increment, and stepping by that unit. The parser only talks to
this interface, so it stays generic over integers and floats alike.
"""

from __future__ import annotations

import math
import re
import struct
from abc import ABC, abstractmethod
from typing import Any

INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class Steppable(ABC):
    """Capability interface for a numeric kind."""

    name: str = ""
    unit: Any = None

    @classmethod
    @abstractmethod
    def parse(cls, text: str) -> Any:
        """Parse already-trimmed text. Raises ValueError on bad input."""
        ...

    @classmethod
    def step(cls, value: Any) -> Any:
        return value + cls.unit

    @classmethod
    def can_step(cls, start: Any, end: Any) -> bool:
        """Whether stepping from start is guaranteed to reach past end."""
        return True


class NumericRegistry:
    """Registry mapping numeric kind names to their Steppable classes."""

    _registry: dict[str, type[Steppable]] = {}

    @classmethod
    def register(cls, *names: str):
        def decorator(kind: type[Steppable]):
            for name in names:
                cls._registry[name] = kind
            return kind
        return decorator

    @classmethod
    def get(cls, name: str) -> type[Steppable]:
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys()))
            raise ValueError(
                f"Unknown numeric kind: '{name}'. Available: [{available}]"
            )
        return cls._registry[name]

    @classmethod
    def resolve(cls, kind: str | type) -> type[Steppable]:
        """Accept a kind name, a builtin int/float, or a Steppable subclass."""
        if isinstance(kind, str):
            return cls.get(kind)
        if kind is int or kind is float:
            return cls.get(kind.__name__)
        if isinstance(kind, type) and issubclass(kind, Steppable):
            return kind
        raise ValueError(f"Unsupported numeric kind: {kind!r}")

    @classmethod
    def list_kinds(cls) -> list[str]:
        return sorted(cls._registry.keys())


@NumericRegistry.register("int")
class Integer(Steppable):
    name = "int"
    unit = 1

    @classmethod
    def parse(cls, text: str) -> int:
        if not INT_PATTERN.fullmatch(text):
            raise ValueError(f"invalid integer literal: {text!r}")
        return int(text)


class BoundedInteger(Integer):
    """Fixed-width integer; values outside [minimum, maximum] do not parse."""

    minimum: int = 0
    maximum: int = 0

    @classmethod
    def parse(cls, text: str) -> int:
        value = super().parse(text)
        if not cls.minimum <= value <= cls.maximum:
            raise ValueError(f"{value} out of range for {cls.name}")
        return value


def _bounded(name: str, bits: int, signed: bool) -> type[BoundedInteger]:
    if signed:
        minimum, maximum = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        minimum, maximum = 0, (1 << bits) - 1
    kind = type(name.upper(), (BoundedInteger,), {
        "name": name,
        "minimum": minimum,
        "maximum": maximum,
        "__doc__": f"{'Signed' if signed else 'Unsigned'} {bits}-bit integer.",
    })
    return NumericRegistry.register(name)(kind)


I8 = _bounded("i8", 8, True)
I16 = _bounded("i16", 16, True)
I32 = _bounded("i32", 32, True)
I64 = _bounded("i64", 64, True)
U8 = _bounded("u8", 8, False)
U16 = _bounded("u16", 16, False)
U32 = _bounded("u32", 32, False)
U64 = _bounded("u64", 64, False)


@NumericRegistry.register("float", "f64")
class Float(Steppable):
    name = "float"
    unit = 1.0

    @classmethod
    def parse(cls, text: str) -> float:
        return float(text)

    @classmethod
    def can_step(cls, start: float, end: float) -> bool:
        # Past 2**53 adding 1.0 no longer changes the value.
        if not (math.isfinite(start) and math.isfinite(end)):
            return False
        return cls.step(start) != start and cls.step(end) != end


@NumericRegistry.register("f32")
class Float32(Float):
    """Single precision float, stored as the nearest Python float."""

    name = "f32"

    @staticmethod
    def _round(value: float) -> float:
        return struct.unpack("f", struct.pack("f", value))[0]

    @classmethod
    def parse(cls, text: str) -> float:
        value = float(text)
        try:
            rounded = cls._round(value)
        except OverflowError:
            rounded = math.inf
        if math.isfinite(value) and not math.isfinite(rounded):
            raise ValueError(f"{text!r} out of range for {cls.name}")
        return rounded

    @classmethod
    def step(cls, value: float) -> float:
        return cls._round(value + cls.unit)
