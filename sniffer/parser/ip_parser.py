import logging
from typing import Any, Dict

from .fields import field_value, get_layer

logger = logging.getLogger(__name__)

UNKNOWN_ADDRESS = 'Unknown'
DEFAULT_PROTOCOL = '0'

# IANA assigned internet protocol numbers shown on the dashboard
PROTOCOL_NAMES: Dict[int, str] = {
    1: 'ICMP',
    2: 'IGMP',
    6: 'TCP',
    17: 'UDP',
    41: 'IPv6',
    89: 'OSPF',
}


def get_protocol_name(proto: Any) -> str:
    """
    Map an IP protocol number to its label.

    Args:
        proto: Protocol number as int or numeric string (e.g. '6')

    Returns:
        Label such as 'TCP', or 'Proto <id>' for unlisted numbers
    """
    text = str(proto).strip()
    try:
        number = int(text)
    except (TypeError, ValueError):
        number = None

    if number is not None and number in PROTOCOL_NAMES:
        return PROTOCOL_NAMES[number]

    logger.debug(f"Unlisted IP protocol id: {text!r}")
    return f"Proto {text}"


def parse_ip_layer(layers: Any) -> Dict[str, str]:
    """
    Extract addresses and protocol number from the IP layer.

    Args:
        layers: The 'layers' mapping of a capture document

    Returns:
        dict with src_ip, dst_ip and protocol, defaulted when absent
    """
    ip_layer = get_layer(layers, 'ip')

    return {
        'src_ip': field_value(ip_layer, 'ip_ip_src') or UNKNOWN_ADDRESS,
        'dst_ip': field_value(ip_layer, 'ip_ip_dst') or UNKNOWN_ADDRESS,
        'protocol': field_value(ip_layer, 'ip_ip_proto') or DEFAULT_PROTOCOL,
    }
