from collections import Counter
from datetime import datetime, timezone
from typing import Dict, Optional

from sniffer.parser.ip_parser import UNKNOWN_ADDRESS
from sniffer.parser.transport_parser import NO_PORT

from .packet_summary import PacketSummary


class TrafficStats:
    """
    Cumulative traffic counters since process start.

    Tables only ever grow: there is no reset and no eviction of keys.
    Not thread-safe on its own; PacketStore serializes access.
    """

    def __init__(self, start_time: Optional[datetime] = None):
        self.start_time = start_time or datetime.now(timezone.utc)
        self.total_packets = 0
        self.total_bytes = 0
        self.by_protocol: Counter = Counter()
        self.by_source_ip: Counter = Counter()
        self.by_destination_ip: Counter = Counter()
        self.by_port: Counter = Counter()

    def record(self, summary: PacketSummary) -> None:
        """Fold one packet into the totals and frequency tables."""
        self.total_packets += 1
        self.total_bytes += summary.length

        self.by_protocol[summary.protocol_name] += 1

        if summary.src_ip != UNKNOWN_ADDRESS:
            self.by_source_ip[summary.src_ip] += 1
        if summary.dst_ip != UNKNOWN_ADDRESS:
            self.by_destination_ip[summary.dst_ip] += 1

        if summary.dst_port != NO_PORT:
            self.by_port[f"{summary.dst_port}/{summary.protocol_name}"] += 1

    def uptime_seconds(self, now: Optional[datetime] = None) -> float:
        now = now or datetime.now(timezone.utc)
        return (now - self.start_time).total_seconds()

    def compute_rates(self, now: Optional[datetime] = None) -> Dict[str, float]:
        """
        Average packet and byte rates since start.

        Returns:
          - packets_per_second
          - bytes_per_second
        Both rounded to 2 decimals; 0.0 when no time has elapsed.
        """
        elapsed = self.uptime_seconds(now)
        if elapsed <= 0:
            return {'packets_per_second': 0.0, 'bytes_per_second': 0.0}

        return {
            'packets_per_second': round(self.total_packets / elapsed, 2),
            'bytes_per_second': round(self.total_bytes / elapsed, 2),
        }

