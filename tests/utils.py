import inspect
from typing import Any, List, Type

import numpy as np

from oscsend import params
from oscsend.data import ArgumentType
from oscsend.params import Param

EXAMPLE_VALUES = {
    ArgumentType.INT32: 42,
    ArgumentType.FLOAT32: 0.5,
    ArgumentType.STRING: "hello",
}


def list_argument_types() -> List[ArgumentType]:
    """List all available argument types."""
    return list(ArgumentType.__members__.values())


def list_param_types() -> List[Type[Param]]:
    """List all available parameter types."""
    members = inspect.getmembers(params, inspect.isclass)
    return [cls for _, cls in members if issubclass(cls, Param) and cls is not Param]


def example_value(arg_type: ArgumentType) -> Any:
    if arg_type not in EXAMPLE_VALUES:
        # EXAMPLE_VALUES is missing an entry for this type
        raise NotImplementedError(f"Missing example value for {arg_type}.")
    return EXAMPLE_VALUES[arg_type]


def decode_int32(data: bytes) -> int:
    """Interpret four bytes as a big-endian two's complement integer."""
    assert len(data) == 4, f"Expected 4 bytes, got {len(data)}."
    return int(np.frombuffer(data, dtype=">i4")[0])


def decode_float32(data: bytes) -> float:
    """Interpret four bytes as a big-endian IEEE-754 single precision float."""
    assert len(data) == 4, f"Expected 4 bytes, got {len(data)}."
    return float(np.frombuffer(data, dtype=">f4")[0])
