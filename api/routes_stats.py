"""Statistics API Routes"""

from flask import Blueprint, jsonify

from api.extensions import get_packet_store

stats_bp = Blueprint('stats', __name__)


@stats_bp.route('/stats', methods=['GET'])
def get_stats():
    """
    Get aggregate traffic statistics since server start.

    Returns:
        {
            "summary": {
                "totalPackets": int,
                "totalBytes": int,
                "uptime": int,             # seconds
                "packetsPerSecond": float,
                "bytesPerSecond": float,
                "startTime": str
            },
            "byProtocol": {label: count},       # all protocols
            "bySourceIP": {ip: count},          # top N
            "byDestinationIP": {ip: count},     # top N
            "byPort": {"port/proto": count}     # top N
        }
    """
    return jsonify(get_packet_store().stats_snapshot()), 200
