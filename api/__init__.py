"""
API Module - REST API for the Packet Sniffer Dashboard

Endpoints:
    /health                   - Health check
    /api/status               - Retention buffer and configuration status

    POST /api/packets         - Ingest one tshark ek capture document
    GET  /api/packets         - Most recent packets (?limit=N, default 100)
    GET  /api/stats           - Totals, rates and top talkers

    /api/control/ping         - Liveness probe
    /api/control/config       - Effective configuration
    /api/control/logs         - Tail of the service log

Usage:
    $ python api/api_server.py --port 8080
"""

__version__ = '1.0.0'
__all__ = [
    'api_server',
    'routes_packets',
    'routes_stats',
    'routes_control',
]
