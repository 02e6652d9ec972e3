from typing import Any, Iterable

from oscsend.data import Argument


def build_type_tags(arguments: Iterable[Any]) -> str:
    """
    Build the OSC type tag string for a list of arguments, e.g. `",ifs"` for an int, a float and a string.

    ### Parameters
    `arguments` : Iterable[Any]
        Plain values or `Argument` objects, in message order.

    ### Returns
    str
        A comma followed by one tag character per argument.

    ### Raises
    ArgumentEncodingError
        If any argument has an unsupported type. Unsupported arguments are never dropped silently.
    """
    return "," + "".join(Argument.from_value(arg).tag for arg in arguments)
