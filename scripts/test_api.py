#!/usr/bin/env python3
"""
API Smoke Test Script

Exercises every endpoint of a running Packet Sniffer Dashboard server.

Usage:
    python scripts/test_api.py --server http://127.0.0.1:8080
"""

import argparse
from typing import Any, Dict, Optional

import requests

BASE_URL = 'http://127.0.0.1:8080'

SAMPLE_PACKET = {
    'timestamp': '1700000000000',
    'layers': {
        'frame': {'frame_len': '1500'},
        'ip': {'ip_ip_src': '10.0.0.1', 'ip_ip_dst': '10.0.0.2', 'ip_ip_proto': '6'},
        'tcp': {'tcp_srcport': '443', 'tcp_dstport': '51000'},
    },
}


def test_endpoint(base_url: str, name: str, method: str, url: str,
                  data: Optional[Dict[str, Any]] = None) -> bool:
    """Test a single endpoint."""
    full_url = base_url + url
    try:
        if method == 'GET':
            response = requests.get(full_url, timeout=5)
        elif method == 'POST':
            response = requests.post(full_url, json=data, timeout=5)
        else:
            return False

        status = "OK  " if response.status_code == 200 else "FAIL"
        print(f"{status} [{response.status_code}] {name}")

        body = response.json()
        if isinstance(body, dict):
            keys = list(body.keys())[:4]
            print(f"    Keys: {', '.join(keys)}")

        return response.status_code == 200

    except requests.exceptions.ConnectionError:
        print(f"FAIL [{name}] Connection error - API server not running")
        return False
    except requests.exceptions.Timeout:
        print(f"FAIL [{name}] Timeout")
        return False
    except ValueError:
        print(f"FAIL [{name}] Response is not JSON")
        return False


def main():
    """Run all checks."""
    parser = argparse.ArgumentParser(description='Smoke-test a running dashboard API')
    parser.add_argument('--server', default=BASE_URL, help='API base URL')
    base_url = parser.parse_args().server.rstrip('/')

    print("\n" + "=" * 70)
    print("Packet Sniffer Dashboard - API Smoke Test")
    print("=" * 70 + "\n")

    results = {
        'health': test_endpoint(base_url, "Health Check", "GET", '/health'),
        'status': test_endpoint(base_url, "API Status", "GET", '/api/status'),
        'ingest': test_endpoint(base_url, "Ingest Packet", "POST", '/api/packets', SAMPLE_PACKET),
        'packets': test_endpoint(base_url, "List Packets", "GET", '/api/packets?limit=10'),
        'stats': test_endpoint(base_url, "Statistics", "GET", '/api/stats'),
        'ping': test_endpoint(base_url, "Control Ping", "GET", '/api/control/ping'),
        'config': test_endpoint(base_url, "Control Config", "GET", '/api/control/config'),
        'logs': test_endpoint(base_url, "Control Logs", "GET", '/api/control/logs?limit=5'),
    }

    print("\n" + "=" * 70)
    passed = sum(1 for v in results.values() if v)
    print(f"Results: {passed}/{len(results)} endpoints passed")
    print("=" * 70 + "\n")


if __name__ == '__main__':
    main()
