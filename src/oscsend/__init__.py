from oscsend.client import OSCSender, send
from oscsend.data import Argument, ArgumentType
from oscsend.encoding import encode_argument, encode_float32, encode_int32, encode_string
from oscsend.errors import ArgumentEncodingError, ConstructionError, OSCError, TransmissionError
from oscsend.message import OSCMessage, assemble
from oscsend.params import SenderParams
from oscsend.trace import StreamTracer
from oscsend.typetags import build_type_tags

__version__ = "1.0.0"
