"""Field extractors for tshark Elasticsearch (-T ek) capture documents."""

from .ip_parser import PROTOCOL_NAMES, get_protocol_name, parse_ip_layer
from .frame_parser import parse_frame_length
from .transport_parser import parse_ports

__all__ = [
    'PROTOCOL_NAMES',
    'get_protocol_name',
    'parse_ip_layer',
    'parse_frame_length',
    'parse_ports',
]
