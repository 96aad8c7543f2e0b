#!/usr/bin/env python3
"""
Packet Sniffer Dashboard - REST API Server

Flask API that receives packets from a capture forwarder, keeps running
statistics in memory and serves them to the polling dashboard.

Usage:
    PYTHONPATH=. python api/api_server.py --port 8080

    Then forward a live capture:
    PYTHONPATH=. python scripts/live_capture.py eth0 --server http://localhost:8080
"""

import argparse
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from flask import Flask, abort, current_app, jsonify, send_from_directory

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from api.extensions import STORE_KEY, get_packet_store
from sniffer.config import load_server_config
from sniffer.main import log_startup_banner, setup_logging
from sniffer.store import PacketStore

logger = logging.getLogger(__name__)


class APIConfig:
    """Configuration for the API server."""
    DEBUG = False
    TESTING = False
    HOST = '0.0.0.0'
    PORT = 8080

    # Optional YAML overrides (None: config/app_config.yaml)
    CONFIG_FILE = None

    # Capture documents can be large
    MAX_CONTENT_LENGTH = 50 * 1024 * 1024

    # Retention buffer: cut back to the floor once the ceiling is exceeded
    MAX_RETAINED = 5000
    RETAINED_FLOOR = 4000

    # Ranking and listing
    TOP_N = 10
    DEFAULT_PACKET_LIMIT = 100

    # Storage paths
    LOG_DIR = 'logs'
    LOG_FILE = 'app.log'
    STATIC_DIR = 'public'


def create_app(config: Optional[Dict[str, Any]] = None) -> Flask:
    """
    Create and configure Flask application.

    Settings are applied in order: APIConfig defaults, the YAML file,
    then `config`. Keys unknown to APIConfig are ignored.

    Args:
        config: Configuration dict with keys like PORT, MAX_RETAINED, etc.

    Returns:
        Configured Flask app
    """
    config = config or {}
    app = Flask(__name__, static_folder=None)

    app.config.from_object(APIConfig)
    settings = load_server_config(config.get('CONFIG_FILE'))
    settings.update(config)
    for key, value in settings.items():
        if hasattr(APIConfig, key):
            app.config[key] = value

    # Ranked tables must keep their order in responses
    app.json.sort_keys = False

    app.config['LOG_PATH'] = setup_logging(app.config['LOG_DIR'], app.config['LOG_FILE'])

    app.extensions[STORE_KEY] = PacketStore(
        max_retained=int(app.config['MAX_RETAINED']),
        retained_floor=int(app.config['RETAINED_FLOOR']),
        top_n=int(app.config['TOP_N']),
    )

    register_error_handlers(app)
    register_blueprints(app)

    @app.route('/health', methods=['GET'])
    def health():
        return jsonify(get_packet_store().health_snapshot()), 200

    @app.route('/api/status', methods=['GET'])
    def api_status():
        """Get API and retention buffer status."""
        return jsonify({
            'api': {
                'status': 'running',
                'version': '1.0.0',
                'timestamp': datetime.now(timezone.utc).isoformat()
            },
            'buffer': get_packet_store().buffer_stats(),
        }), 200

    @app.route('/', methods=['GET'])
    def dashboard():
        return _send_static('index.html')

    @app.route('/static/<path:filename>', methods=['GET'])
    def static_files(filename):
        return _send_static(filename)

    return app


def _send_static(filename: str):
    static_dir = os.path.abspath(current_app.config['STATIC_DIR'])
    if not os.path.isfile(os.path.join(static_dir, filename)):
        abort(404)
    return send_from_directory(static_dir, filename)


def register_blueprints(app: Flask) -> None:
    """Register all API blueprints."""
    from api.routes_packets import packets_bp
    from api.routes_stats import stats_bp
    from api.routes_control import control_bp

    app.register_blueprint(packets_bp, url_prefix='/api')
    app.register_blueprint(stats_bp, url_prefix='/api')
    app.register_blueprint(control_bp, url_prefix='/api/control')


def _error_body(error: str, message: str) -> Dict[str, Any]:
    return {
        'error': error,
        'message': message,
        'timestamp': datetime.now(timezone.utc).isoformat()
    }


def register_error_handlers(app: Flask) -> None:
    """Register error handlers for common exceptions."""

    @app.errorhandler(400)
    def bad_request(error):
        return jsonify(_error_body('Bad Request', error.description)), 400

    @app.errorhandler(404)
    def not_found(error):
        return jsonify(_error_body('Not Found', 'The requested endpoint does not exist')), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify(_error_body('Method Not Allowed', error.description)), 405

    @app.errorhandler(413)
    def payload_too_large(error):
        limit = app.config.get('MAX_CONTENT_LENGTH')
        return jsonify(_error_body('Payload Too Large', f'Request body exceeds {limit} bytes')), 413

    @app.errorhandler(500)
    def server_error(error):
        logger.error(f"Unhandled server error: {error}")
        return jsonify(_error_body('Internal Server Error', 'Internal server error')), 500


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='Packet Sniffer Dashboard API Server'
    )
    parser.add_argument(
        '--host',
        default=None,
        help='API server host (default: 0.0.0.0)'
    )
    parser.add_argument(
        '--port',
        type=int,
        default=None,
        help='API server port (default: 8080)'
    )
    parser.add_argument(
        '--config',
        default=None,
        help='Path to YAML config file (default: config/app_config.yaml)'
    )
    parser.add_argument(
        '--log-dir',
        default=None,
        help='Directory for app.log'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug mode'
    )

    args = parser.parse_args()

    # Only explicit flags override the YAML file
    config = {'CONFIG_FILE': args.config}
    if args.host is not None:
        config['HOST'] = args.host
    if args.port is not None:
        config['PORT'] = args.port
    if args.log_dir is not None:
        config['LOG_DIR'] = args.log_dir
    if args.debug:
        config['DEBUG'] = True

    app = create_app(config)

    host = app.config['HOST']
    port = int(app.config['PORT'])
    log_startup_banner(host, port)

    app.run(host=host, port=port, debug=app.config['DEBUG'], threaded=True)


if __name__ == '__main__':
    main()
