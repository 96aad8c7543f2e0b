"""
Packet API Routes

- POST /packets - Ingest one capture document
- GET /packets - Most recent retained packets
"""

import logging
from typing import Any, Optional

from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from api.extensions import get_packet_store
from sniffer.parser.fields import leading_int

logger = logging.getLogger(__name__)

packets_bp = Blueprint('packets', __name__)


def check_serializable(packet: Any) -> None:
    """
    Encode the packet as GET /packets would return it.

    The decoder accepts documents nested slightly deeper than the
    encoder can emit once they sit inside the listing envelope, so a
    packet is only stored if it survives this round. Two extra list
    levels leave room for the deeper call stack of the listing route.

    Raises:
        RecursionError, ValueError, TypeError: the packet cannot be served back
    """
    current_app.json.dumps({'total': 0, 'packets': [{'raw': [[packet]]}]})


@packets_bp.route('/packets', methods=['POST'])
def receive_packet():
    """
    Ingest one packet as produced by `tshark -T ek`.

    Request body (JSON):
        {
            "timestamp": "...",
            "layers": {
                "frame": {"frame_len": "60", ...},
                "ip": {"ip_ip_src": "...", "ip_ip_dst": "...", "ip_ip_proto": "6"},
                "tcp": {"tcp_srcport": "443", "tcp_dstport": "51000"}
            }
        }

    Returns:
        {
            "status": "success",
            "message": "Packet received",
            "packetId": int   # packets currently retained
        }
    """
    try:
        packet = request.get_json(force=True)
        check_serializable(packet)
        packet_id = get_packet_store().ingest(packet)
    except HTTPException:
        # Malformed JSON (400) and oversized bodies (413) go to the shared handlers
        raise
    except Exception:
        logger.exception("Error processing packet")
        return jsonify({
            'status': 'error',
            'message': 'Internal server error'
        }), 500

    return jsonify({
        'status': 'success',
        'message': 'Packet received',
        'packetId': packet_id
    }), 200


def parse_limit(value: Optional[str], default: int) -> int:
    """Leading integer of the limit parameter ('10abc' gives 10); default unless positive."""
    limit = leading_int(value)
    if limit is None or limit <= 0:
        return default
    return limit


@packets_bp.route('/packets', methods=['GET'])
def list_packets():
    """
    Get the most recent packets.

    Query parameters:
        - limit: Max packets to return (default: 100)

    Returns:
        {
            "total": int,         # packets currently retained
            "packets": [          # oldest first
                {
                    "timestamp": str,
                    "srcIp": str,
                    "dstIp": str,
                    "protocol": str,
                    "protocolName": str,
                    "length": int,
                    "srcPort": str,
                    "dstPort": str,
                    "raw": {...}
                }
            ]
        }
    """
    default_limit = current_app.config.get('DEFAULT_PACKET_LIMIT', 100)
    limit = parse_limit(request.args.get('limit'), default_limit)

    return jsonify(get_packet_store().packets_snapshot(limit)), 200
