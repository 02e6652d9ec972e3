from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

from oscsend.errors import ArgumentEncodingError

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class ArgumentType(Enum):
    """
    The type of an OSC argument. The value of each member is the character used for it in the type tag string.

    - `INT32`: A 32-bit signed integer.
    - `FLOAT32`: A 32-bit IEEE-754 float. Double precision values are narrowed when encoded.
    - `STRING`: An ASCII string.
    """

    INT32 = "i"
    FLOAT32 = "f"
    STRING = "s"

    @property
    def tag(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Argument:
    """
    A single typed OSC argument. Arguments are usually created from plain Python values with `Argument.from_value`,
    which picks the argument type. The value must match the argument type.

    ### Parameters
    `type` : ArgumentType
        The argument type.
    `value` : Any
        An int, float or str matching the argument type.
    """

    type: ArgumentType
    value: Any

    def __post_init__(self):
        """
        Check that the value matches the argument type.
        """
        if not isinstance(self.type, ArgumentType):
            raise ArgumentEncodingError(f"Expected type of type ArgumentType, got {type(self.type)}.")

        if self.type == ArgumentType.INT32:
            if isinstance(self.value, bool) or not isinstance(self.value, int):
                raise ArgumentEncodingError(f"Expected int for {self.type}, got {type(self.value).__name__}.")
            if not INT32_MIN <= self.value <= INT32_MAX:
                raise ArgumentEncodingError(f"Integer {self.value} does not fit into 32 bits.")
        elif self.type == ArgumentType.FLOAT32:
            if not isinstance(self.value, float):
                raise ArgumentEncodingError(f"Expected float for {self.type}, got {type(self.value).__name__}.")
        elif self.type == ArgumentType.STRING:
            if not isinstance(self.value, str):
                raise ArgumentEncodingError(f"Expected str for {self.type}, got {type(self.value).__name__}.")
            if not self.value.isascii():
                raise ArgumentEncodingError(f"OSC strings must be ASCII, got {self.value!r}.")
        else:
            raise ArgumentEncodingError(f"Unhandled argument type {self.type}.")

    @property
    def tag(self) -> str:
        return self.type.tag

    @classmethod
    def from_value(cls, value: Any) -> "Argument":
        """
        Create an argument from a plain Python or numpy value.

        ### Parameters
        `value` : Any
            An int, float or str (or the numpy equivalent). Existing `Argument` objects are returned unchanged.

        ### Returns
        Argument
            The typed argument.

        ### Raises
        ArgumentEncodingError
            If the value has no OSC representation.
        """
        if isinstance(value, Argument):
            return value
        # bool is a subclass of int, so it needs to be rejected first
        if isinstance(value, (bool, np.bool_)):
            raise ArgumentEncodingError(
                f"Unsupported argument type {type(value).__name__}: booleans are not supported."
            )
        if isinstance(value, (int, np.integer)):
            return cls(ArgumentType.INT32, int(value))
        if isinstance(value, (float, np.floating)):
            return cls(ArgumentType.FLOAT32, float(value))
        if isinstance(value, str):
            return cls(ArgumentType.STRING, value)
        raise ArgumentEncodingError(
            f"Unsupported argument type {type(value).__name__}. Must be one of "
            f"{[t.name.lower() for t in ArgumentType]}."
        )
