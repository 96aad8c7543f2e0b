from .packet_summary import PacketSummary, normalize_packet, format_timestamp
from .traffic_stats import TrafficStats
from .top_talkers import top_n, ranked_dict

__all__ = [
    'PacketSummary',
    'normalize_packet',
    'format_timestamp',
    'TrafficStats',
    'top_n',
    'ranked_dict',
]
