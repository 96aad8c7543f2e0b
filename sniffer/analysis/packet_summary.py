from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from sniffer.parser import get_protocol_name, parse_frame_length, parse_ip_layer, parse_ports


def format_timestamp(ts: datetime) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. 2024-05-01T12:00:00.123Z."""
    return ts.astimezone(timezone.utc).strftime('%Y-%m-%dT%H:%M:%S.') + f"{ts.microsecond // 1000:03d}Z"


class PacketSummary:
    """Flat, read-only view of one capture document."""

    __slots__ = (
        'timestamp', 'src_ip', 'dst_ip', 'protocol', 'protocol_name',
        'length', 'src_port', 'dst_port',
    )

    def __init__(self, timestamp: datetime, src_ip: str, dst_ip: str,
                 protocol: str, protocol_name: str, length: int,
                 src_port: str, dst_port: str):
        object.__setattr__(self, 'timestamp', timestamp)
        object.__setattr__(self, 'src_ip', src_ip)
        object.__setattr__(self, 'dst_ip', dst_ip)
        object.__setattr__(self, 'protocol', protocol)
        object.__setattr__(self, 'protocol_name', protocol_name)
        object.__setattr__(self, 'length', length)
        object.__setattr__(self, 'src_port', src_port)
        object.__setattr__(self, 'dst_port', dst_port)

    def __setattr__(self, name, value):
        raise AttributeError(f"PacketSummary is immutable (cannot set {name!r})")

    def __repr__(self) -> str:
        return (
            f"PacketSummary({self.src_ip}:{self.src_port} -> "
            f"{self.dst_ip}:{self.dst_port} {self.protocol_name} {self.length}B)"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'timestamp': format_timestamp(self.timestamp),
            'srcIp': self.src_ip,
            'dstIp': self.dst_ip,
            'protocol': self.protocol,
            'protocolName': self.protocol_name,
            'length': self.length,
            'srcPort': self.src_port,
            'dstPort': self.dst_port,
        }


def normalize_packet(raw: Any, received_at: Optional[datetime] = None) -> PacketSummary:
    """
    Build a PacketSummary from a tshark ek capture document.

    Every field is defaulted, so any JSON value is accepted. The
    timestamp is the receipt time, never a capture-embedded one.

    Args:
        raw: Parsed capture document ({'layers': {'frame': ..., 'ip': ...}})
        received_at: Receipt time (default: now, UTC)

    Returns:
        PacketSummary
    """
    if received_at is None:
        received_at = datetime.now(timezone.utc)

    layers = raw.get('layers') if isinstance(raw, Mapping) else None
    if not isinstance(layers, Mapping):
        layers = {}

    ip_info = parse_ip_layer(layers)
    src_port, dst_port = parse_ports(layers)

    return PacketSummary(
        timestamp=received_at,
        src_ip=ip_info['src_ip'],
        dst_ip=ip_info['dst_ip'],
        protocol=ip_info['protocol'],
        protocol_name=get_protocol_name(ip_info['protocol']),
        length=parse_frame_length(layers),
        src_port=src_port,
        dst_port=dst_port,
    )
