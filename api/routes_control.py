"""
Control API Routes

Operator endpoints.
- GET /ping - Liveness probe
- GET /config - Effective configuration
- GET /logs - Recent log lines
"""

import os
from collections import deque
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify, request

control_bp = Blueprint('control', __name__)


@control_bp.route('/ping', methods=['GET'])
def ping():
    """Simple health check."""
    return jsonify({
        'pong': True,
        'timestamp': datetime.now(timezone.utc).isoformat()
    }), 200


@control_bp.route('/config', methods=['GET'])
def get_config():
    """
    Get current API configuration.

    Returns:
        {
            "retention": {"max_packets": int, "floor_packets": int},
            "stats": {"top_n": int, "default_packet_limit": int},
            "max_content_length": int,
            "log_file": str
        }
    """
    config = current_app.config
    return jsonify({
        'retention': {
            'max_packets': config.get('MAX_RETAINED'),
            'floor_packets': config.get('RETAINED_FLOOR'),
        },
        'stats': {
            'top_n': config.get('TOP_N'),
            'default_packet_limit': config.get('DEFAULT_PACKET_LIMIT'),
        },
        'max_content_length': config.get('MAX_CONTENT_LENGTH'),
        'log_file': config.get('LOG_PATH'),
    }), 200


@control_bp.route('/logs', methods=['GET'])
def get_logs():
    """
    Get recent log entries.

    Query parameters:
        - limit: Number of recent lines to return (default: 100)

    Returns:
        {
            "log_file": str,
            "limit": int,
            "returned_lines": int,
            "logs": [...]
        }
    """
    limit = request.args.get('limit', default=100, type=int)
    if limit <= 0:
        limit = 100
    log_file = current_app.config.get('LOG_PATH')

    if not log_file or not os.path.exists(log_file):
        return jsonify({
            'logs': [],
            'message': f'Log file not found: {log_file}'
        }), 200

    with open(log_file, 'r') as f:
        recent = list(deque(f, maxlen=limit))

    return jsonify({
        'log_file': log_file,
        'limit': limit,
        'returned_lines': len(recent),
        'logs': recent
    }), 200
