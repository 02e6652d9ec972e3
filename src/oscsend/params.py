from abc import ABC, abstractmethod
from collections import namedtuple
from copy import deepcopy
from dataclasses import asdict, dataclass
from typing import Any, Dict, List

import yaml


@dataclass
class Param(ABC):
    """
    Parameter container that has a specific type and potentially constrains the range of allowed values.
    """

    _value: Any = None

    def __post_init__(self):
        if self._value is None:
            self._value = self.default()

        if isinstance(self._value, bool) and not isinstance(self.default(), bool):
            raise TypeError(f"Parameter {self.__class__.__name__} does not accept booleans.")

        if not isinstance(self._value, type(self.default())):
            if isinstance(self.default(), float) and isinstance(self._value, int):
                # it's okay if we wanted a float but got int
                self._value = float(self._value)
            else:
                raise TypeError(
                    f"Parameter {self.__class__.__name__} expected type {type(self.default())} "
                    f"but got {type(self._value)}."
                )
        self.validate(self._value)

    @staticmethod
    @abstractmethod
    def default() -> Any:
        """
        Return the default value for the parameter.
        """
        pass

    def validate(self, value: Any) -> None:
        """
        Check that a value is allowed for this parameter. Raises a ValueError if it is not.
        """
        pass

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, value: Any):
        self.validate(value)
        self._value = value


@dataclass
class BoolParam(Param):
    @staticmethod
    def default() -> bool:
        return False


@dataclass
class FloatParam(Param):
    vmin: float = 0.0
    vmax: float = 1.0

    @staticmethod
    def default() -> float:
        return 0.0

    def validate(self, value: float) -> None:
        if not self.vmin <= value <= self.vmax:
            raise ValueError(f"Value {value} is outside the allowed range [{self.vmin}, {self.vmax}].")


@dataclass
class IntParam(Param):
    vmin: int = 0
    vmax: int = 65535

    @staticmethod
    def default() -> int:
        return 0

    def validate(self, value: int) -> None:
        if not self.vmin <= value <= self.vmax:
            raise ValueError(f"Value {value} is outside the allowed range [{self.vmin}, {self.vmax}].")


@dataclass
class StringParam(Param):
    # if options is None, the string is free-form
    options: List[str] = None

    @staticmethod
    def default() -> str:
        return ""

    def validate(self, value: str) -> None:
        if self.options is not None and value not in self.options:
            raise ValueError(f"Value '{value}' is not one of {self.options}.")


DEFAULT_PARAMS = {
    "osc": {
        "host": StringParam("127.0.0.1"),
        "port": IntParam(8000, 1, 65535),
        "broadcast": BoolParam(False),
        # 0 means blocking
        "timeout": FloatParam(0.0, 0.0, 60.0),
    },
    "common": {
        "debug": BoolParam(False),
    },
}

TYPE_PARAM_MAP = {
    bool: BoolParam,
    float: FloatParam,
    int: IntParam,
    str: StringParam,
}


def _to_param(value: Any, template: Param = None) -> Param:
    """
    Convert a plain value or a serialized parameter dict to a Param object. If a template is given, the parameter
    takes its type and constraints from the template.
    """
    if isinstance(value, Param):
        return value
    if isinstance(value, dict):
        # reconstruct serialized param object
        param_type = TYPE_PARAM_MAP[type(value["_value"])] if template is None else type(template)
        return param_type(**value)
    if template is not None:
        return type(template)(**{**asdict(template), "_value": value})

    if type(value) not in TYPE_PARAM_MAP:
        raise TypeError(
            f"Invalid parameter type {type(value).__name__}. Must be one of "
            f"{list(map(lambda x: x.__name__, TYPE_PARAM_MAP.keys()))}."
        )
    return TYPE_PARAM_MAP[type(value)](value)


class SenderParams:
    """
    A class for storing the configuration of an OSC sender. The parameters are stored in named groups with each
    group containing a number of parameters, and can be accessed as attributes, e.g. `params.osc.port.value`.

    When initializing a `SenderParams` object, the default parameters are inserted if they are not provided.
    Plain values for known parameters inherit the constraints of the default parameter.

    ### Parameters
    `data` : Dict[str, Dict[str, Any]]
        A dictionary of parameter groups, where each group is a dictionary of parameter names and values.
    """

    def __init__(self, data: Dict[str, Dict[str, Any]] = None):
        data = deepcopy(data) if data is not None else {}
        defaults = deepcopy(DEFAULT_PARAMS)

        result = {}
        for group, params in data.items():
            if not isinstance(params, dict):
                raise TypeError(f"Expected dict, got {type(params)}.")
            if group in defaults:
                for name in params:
                    if name not in defaults[group]:
                        raise ValueError(f"Parameter '{name}' does not exist in group '{group}'.")
            result[group] = {
                name: _to_param(param, defaults.get(group, {}).get(name)) for name, param in params.items()
            }

        # insert default parameters if they are not present
        for group, params in defaults.items():
            result.setdefault(group, {})
            for name, param in params.items():
                result[group].setdefault(name, param)

        # convert to named tuples
        self._data = self._generate_data_dict(result)

    def _generate_data_dict(self, data: Dict[str, Dict[str, Param]]) -> Dict[str, Any]:
        result = {}
        for group, params in data.items():
            # create the named tuple class for the current group
            NamedTupleClass = namedtuple(group.capitalize(), params.keys())

            # implement dict-like access for the named tuple class
            NamedTupleClass = type(
                NamedTupleClass.__name__,
                (NamedTupleClass,),
                {
                    "__contains__": lambda self, item: hasattr(self, item),
                    "__getitem__": lambda self, item: getattr(self, item),
                    "keys": lambda self: self._asdict().keys(),
                    "values": lambda self: self._asdict().values(),
                    "items": lambda self: self._asdict().items(),
                },
            )

            result[group] = NamedTupleClass(**params)
        return result

    def update(self, params: Dict[str, Dict[str, Any]]):
        """
        Update the parameters with new values. Plain values keep the constraints of the existing parameter.

        ### Parameters
        `params` : Dict[str, Dict[str, Any]]
            A dictionary of parameter groups, where each group is a dictionary of parameter names and values.
        """
        for group, values in params.items():
            if group not in self._data:
                raise ValueError(f"Parameter group '{group}' does not exist.")
            for name, value in values.items():
                if name not in self._data[group]._fields:
                    raise ValueError(f"Parameter '{name}' does not exist in group '{group}'.")
                param = _to_param(value, getattr(self._data[group], name))
                self._data[group] = self._data[group]._replace(**{name: param})

    def serialize(self) -> Dict[str, Dict[str, Any]]:
        """
        Serialize the parameters to a dictionary of plain values.

        ### Returns
        `Dict[str, Dict[str, Any]]`
            A dictionary of parameter groups, where each group is a dictionary of parameter names and values.
        """
        return {group: {name: param.value for name, param in params.items()} for group, params in self._data.items()}

    @classmethod
    def load(cls, path: str) -> "SenderParams":
        """
        Load parameters from a YAML file. Missing groups and parameters are filled with defaults.

        ### Parameters
        `path` : str
            Path to the YAML file.
        """
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise TypeError(f"Expected a mapping of parameter groups in {path}, got {type(data).__name__}.")
        return cls(data)

    def save(self, path: str) -> None:
        """Write the parameters to a YAML file."""
        with open(path, "w") as f:
            yaml.safe_dump(self.serialize(), f, default_flow_style=False)

    def __getattr__(self, group: str):
        # don't allow access to the _data attribute
        if group == "_data":
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{group}'")

        if group in self._data:
            return self._data[group]
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{group}'")

    def __contains__(self, group: str) -> bool:
        return group in self._data

    def __getitem__(self, group: str):
        return self._data[group]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SenderParams):
            return False
        return self.serialize() == other.serialize()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.serialize()})"
