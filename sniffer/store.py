"""
Packet Store

Owns the aggregate traffic statistics and the retention buffer for one
server process. A single lock serializes ingestion and the composite
reads behind the query endpoints, so a response never mixes values from
before and after a concurrent write.
"""

import math
import threading
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sniffer.analysis import TrafficStats, format_timestamp, normalize_packet, ranked_dict
from sniffer.capture import RetentionBuffer, RetentionEntry
from sniffer.capture.retention_buffer import MAX_RETAINED, RETAINED_FLOOR


class PacketStore:
    """In-memory state shared by the API handlers."""

    def __init__(self, max_retained: int = MAX_RETAINED,
                 retained_floor: int = RETAINED_FLOOR, top_n: int = 10,
                 start_time: Optional[datetime] = None):
        self.stats = TrafficStats(start_time=start_time)
        self.buffer = RetentionBuffer(max_retained, retained_floor)
        self.top_n = top_n
        self._lock = threading.Lock()

    def ingest(self, raw: Any, received_at: Optional[datetime] = None) -> int:
        """
        Normalize, count and retain one capture document.

        Args:
            raw: Capture document as decoded from JSON
            received_at: Receipt time (default: now)

        Returns:
            Current retention buffer length
        """
        summary = normalize_packet(raw, received_at)
        entry = RetentionEntry(summary, raw)

        with self._lock:
            self.stats.record(summary)
            self.buffer.append(entry)
            return len(self.buffer)

    def packets_snapshot(self, limit: int) -> Dict[str, Any]:
        """
        Most recent packets for the packet table.

        Returns:
            {"total": retained count, "packets": [...]} with packets in
            buffer order (oldest of the selection first)
        """
        with self._lock:
            entries = self.buffer.latest(limit)
            total = len(self.buffer)

        return {
            'total': total,
            'packets': [entry.to_dict() for entry in entries],
        }

    def stats_snapshot(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        """Summary counters, rates and ranked frequency tables."""
        now = now or datetime.now(timezone.utc)

        with self._lock:
            stats = self.stats
            rates = stats.compute_rates(now)
            snapshot = {
                'summary': {
                    'totalPackets': stats.total_packets,
                    'totalBytes': stats.total_bytes,
                    'uptime': self._uptime(now),
                    'packetsPerSecond': rates['packets_per_second'],
                    'bytesPerSecond': rates['bytes_per_second'],
                    'startTime': format_timestamp(stats.start_time),
                },
                'byProtocol': ranked_dict(stats.by_protocol),
                'bySourceIP': ranked_dict(stats.by_source_ip, self.top_n),
                'byDestinationIP': ranked_dict(stats.by_destination_ip, self.top_n),
                'byPort': ranked_dict(stats.by_port, self.top_n),
            }

        return snapshot

    def health_snapshot(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        now = now or datetime.now(timezone.utc)
        with self._lock:
            return {
                'status': 'healthy',
                'packetsReceived': self.stats.total_packets,
                'uptime': self._uptime(now),
            }

    def buffer_stats(self) -> Dict[str, Any]:
        with self._lock:
            return self.buffer.stats()

    def _uptime(self, now: datetime) -> int:
        return max(0, math.floor(self.stats.uptime_seconds(now)))
