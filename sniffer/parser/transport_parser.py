from typing import Any, Tuple

from .fields import first_field, get_layer

NO_PORT = 'N/A'


def parse_tcp_ports(layers: Any) -> Tuple[str, str]:
    """Return (src_port, dst_port) from the TCP layer."""
    tcp = get_layer(layers, 'tcp')
    return (
        first_field(tcp, 'tcp_srcport', 'tcp_tcp_srcport') or NO_PORT,
        first_field(tcp, 'tcp_dstport', 'tcp_tcp_dstport') or NO_PORT,
    )


def parse_udp_ports(layers: Any) -> Tuple[str, str]:
    """Return (src_port, dst_port) from the UDP layer."""
    udp = get_layer(layers, 'udp')
    return (
        first_field(udp, 'udp_srcport', 'udp_udp_srcport') or NO_PORT,
        first_field(udp, 'udp_dstport', 'udp_udp_dstport') or NO_PORT,
    )


def parse_ports(layers: Any) -> Tuple[str, str]:
    """
    Extract source and destination ports.

    TCP takes precedence over UDP when a document carries both.
    Packets without either layer have no ports.

    Returns:
        (src_port, dst_port), 'N/A' where unavailable
    """
    if get_layer(layers, 'tcp') is not None:
        return parse_tcp_ports(layers)
    if get_layer(layers, 'udp') is not None:
        return parse_udp_ports(layers)
    return NO_PORT, NO_PORT
