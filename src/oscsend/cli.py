import argparse
import logging
from typing import Any, Dict, List, Union

import yaml

from oscsend.client import OSCSender
from oscsend.errors import OSCError
from oscsend.params import SenderParams

logger = logging.getLogger(__name__)


def parse_value(text: str) -> Union[int, float, str]:
    """
    Convert a command line value to the matching OSC argument: integer literals become ints, float literals become
    floats and everything else stays a string. Words like `nan` or `inf` and literals with underscores are kept as
    strings although Python would parse them as numbers.
    """
    if "_" in text or not any(c.isdigit() for c in text):
        return text
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return text


def _overrides(args: argparse.Namespace) -> Dict[str, Dict[str, Any]]:
    """Collect the parameters that were set explicitly on the command line."""
    osc = {}
    if args.host is not None:
        osc["host"] = args.host
    if args.port is not None:
        osc["port"] = args.port
    if args.timeout is not None:
        osc["timeout"] = args.timeout
    if args.broadcast:
        osc["broadcast"] = True

    result = {"osc": osc}
    if args.debug:
        result["common"] = {"debug": True}
    return result


def main(args: List[str] = None) -> int:
    """
    Entry point of the `oscsend` command. Sends a single OSC message and returns the exit status.

    ### Parameters
    `args` : list
        A list of command line arguments. If `None`, uses `sys.argv[1:]`.
    """
    parser = argparse.ArgumentParser(prog="oscsend", description="Send a single OSC message over UDP.")
    parser.add_argument("address", help="OSC address pattern, e.g. /volume")
    parser.add_argument("values", nargs="*", help="message arguments (ints, floats or strings)")
    parser.add_argument("--host", help="destination host (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, help="destination port (default: 8000)")
    parser.add_argument("--timeout", type=float, help="send timeout in seconds")
    parser.add_argument("--broadcast", action="store_true", help="allow sending to a broadcast address")
    parser.add_argument("--config", help="path to a YAML config file")
    parser.add_argument("--debug", action="store_true", help="print every encoding stage to stderr")
    parser.add_argument(
        "--string", action="store_true", help="send all values as strings (by default numeric literals become numbers)"
    )
    args = parser.parse_args(args)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    values = list(args.values) if args.string else [parse_value(v) for v in args.values]

    try:
        if args.config is not None:
            params = SenderParams.load(args.config)
        else:
            params = SenderParams()
        params.update(_overrides(args))
    except (OSError, TypeError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    sender = OSCSender(params)
    try:
        sent = sender.send(args.address, values)
    except OSCError as e:
        logger.error(str(e))
        return 1

    osc = sender.params.osc
    logger.info(f"Sent {args.address} {values} to {osc.host.value}:{osc.port.value} ({sent} bytes)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
