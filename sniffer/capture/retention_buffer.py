import logging
from typing import Any, Dict, List

from sniffer.analysis.packet_summary import PacketSummary

logger = logging.getLogger(__name__)

MAX_RETAINED = 5000
RETAINED_FLOOR = 4000


class RetentionEntry:
    """A packet summary paired with the capture document it came from."""

    __slots__ = ('summary', 'raw')

    def __init__(self, summary: PacketSummary, raw: Any):
        object.__setattr__(self, 'summary', summary)
        object.__setattr__(self, 'raw', raw)

    def __setattr__(self, name, value):
        raise AttributeError(f"RetentionEntry is immutable (cannot set {name!r})")

    def to_dict(self) -> Dict[str, Any]:
        data = self.summary.to_dict()
        data['raw'] = self.raw
        return data


class RetentionBuffer:
    """
    Ordered, size-bounded store of recent packets (oldest first).

    Once the buffer grows past max_size it is cut back to the newest
    floor_size entries, so truncation happens once per
    (max_size - floor_size) appends rather than on every insert.
    """

    def __init__(self, max_size: int = MAX_RETAINED, floor_size: int = RETAINED_FLOOR):
        """
        Initialize retention buffer.

        Args:
            max_size: Hard ceiling on retained entries
            floor_size: Entries kept after a truncation
        """
        if floor_size < 1 or floor_size > max_size:
            raise ValueError(
                f"Invalid retention bounds: floor {floor_size} must be between 1 and max {max_size}"
            )
        self.max_size = max_size
        self.floor_size = floor_size
        self.buffer: List[RetentionEntry] = []
        self.total_appended = 0
        self.evicted = 0
        self.truncations = 0

    def __len__(self) -> int:
        return len(self.buffer)

    def append(self, entry: RetentionEntry) -> None:
        """Add entry at the tail, then enforce the size ceiling."""
        self.buffer.append(entry)
        self.total_appended += 1
        self.truncate()

    def truncate(self) -> int:
        """
        Drop the oldest entries if the ceiling is exceeded.

        Returns:
            Number of entries evicted
        """
        if len(self.buffer) <= self.max_size:
            return 0

        dropped = len(self.buffer) - self.floor_size
        del self.buffer[:dropped]
        self.evicted += dropped
        self.truncations += 1
        logger.info(
            f"Retention buffer truncated: evicted {dropped} oldest packets, {len(self.buffer)} kept"
        )
        return dropped

    def recent(self, limit: int) -> List[RetentionEntry]:
        """Newest `limit` entries, most recent first."""
        if limit <= 0:
            return []
        return list(reversed(self.buffer[-limit:]))

    def latest(self, limit: int) -> List[RetentionEntry]:
        """Newest `limit` entries in buffer order (oldest first)."""
        if limit <= 0:
            return []
        return self.buffer[-limit:]

    def all(self) -> List[RetentionEntry]:
        return list(self.buffer)

    def stats(self) -> Dict[str, Any]:
        """Get buffer statistics."""
        return {
            'capacity': self.max_size,
            'floor': self.floor_size,
            'current_size': len(self.buffer),
            'total_appended': self.total_appended,
            'evicted': self.evicted,
            'truncations': self.truncations,
        }
