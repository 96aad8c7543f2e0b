#!/usr/bin/env python3
"""
Live Capture Forwarder

Runs tshark with Elasticsearch JSON output (-T ek) on an interface and
POSTs every captured packet to the dashboard API.

Usage:
    sudo PYTHONPATH=. python scripts/live_capture.py eth0 --server http://localhost:8080
    sudo PYTHONPATH=. python scripts/live_capture.py eth0 --filter "tcp port 443" --count 500
"""

import argparse
import json
import logging
import os
import shutil
import subprocess
import sys
import time
from typing import Any, Dict, Iterable, Iterator, List, Optional

import requests

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from sniffer.main import setup_logging

logger = logging.getLogger('sniffer.live_capture')


def build_tshark_command(
    interface: str,
    capture_filter: Optional[str] = None,
    count: Optional[int] = None,
    tshark_path: str = 'tshark'
) -> List[str]:
    """Build the tshark command line for ek output on `interface`."""
    cmd = [tshark_path, '-i', interface, '-T', 'ek', '-l']
    if capture_filter:
        cmd.extend(['-f', capture_filter])
    if count:
        cmd.extend(['-c', str(count)])
    return cmd


def iter_packet_documents(lines: Iterable[str]) -> Iterator[Dict[str, Any]]:
    """
    Yield packet documents from tshark ek output.

    ek output is an Elasticsearch bulk stream: an {"index": ...} action
    line precedes every packet document. Action lines, blank lines and
    lines that are not JSON objects are skipped.
    """
    for line in lines:
        line = line.strip()
        if not line:
            continue
        try:
            doc = json.loads(line)
        except json.JSONDecodeError:
            logger.debug(f"Skipping non-JSON line: {line[:80]}")
            continue
        if not isinstance(doc, dict) or 'index' in doc:
            continue
        yield doc


class PacketForwarder:
    """Posts capture documents to the dashboard API."""

    def __init__(self, server_url: str, timeout: float = 5.0,
                 session: Optional[requests.Session] = None):
        self.endpoint = server_url.rstrip('/') + '/api/packets'
        self.timeout = timeout
        self.session = session or requests.Session()
        self.sent = 0
        self.failed = 0

    def send(self, packet: Dict[str, Any]) -> bool:
        """POST one packet; failures are logged and counted, never raised."""
        try:
            response = self.session.post(self.endpoint, json=packet, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            self.failed += 1
            logger.warning(f"Failed to forward packet: {e}")
            return False

        self.sent += 1
        return True

    def forward_all(self, packets: Iterable[Dict[str, Any]]) -> Dict[str, int]:
        for packet in packets:
            self.send(packet)
        return self.summary()

    def summary(self) -> Dict[str, int]:
        return {'sent': self.sent, 'failed': self.failed}


def run_capture(args: argparse.Namespace) -> int:
    tshark = shutil.which(args.tshark)
    if not tshark:
        logger.error(f"tshark not found: {args.tshark}")
        return 1

    cmd = build_tshark_command(args.interface, args.filter, args.count, tshark)
    logger.info(f"Starting capture: {' '.join(cmd)}")
    logger.info(f"Forwarding to: {args.server}")

    forwarder = PacketForwarder(args.server, timeout=args.timeout)
    start = time.time()

    process = subprocess.Popen(
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.DEVNULL,
        text=True,
        bufsize=1
    )
    try:
        forwarder.forward_all(iter_packet_documents(process.stdout))
    except KeyboardInterrupt:
        logger.info("Shutdown signal received. Stopping capture...")
    finally:
        process.terminate()
        try:
            process.wait(timeout=5)
        except subprocess.TimeoutExpired:
            process.kill()

    elapsed = time.time() - start
    stats = forwarder.summary()
    logger.info("=" * 60)
    logger.info(f"Capture finished in {elapsed:.1f}s: sent={stats['sent']} failed={stats['failed']}")
    logger.info("=" * 60)
    return 0


def main():
    parser = argparse.ArgumentParser(
        description='Forward live tshark captures to the Packet Sniffer Dashboard'
    )
    parser.add_argument('interface', help='Network interface (e.g. eth0)')
    parser.add_argument(
        '--server',
        default='http://localhost:8080',
        help='Dashboard API base URL'
    )
    parser.add_argument('--filter', default=None, help='BPF capture filter')
    parser.add_argument('--count', type=int, default=None, help='Stop after N packets')
    parser.add_argument('--timeout', type=float, default=5.0, help='HTTP timeout in seconds')
    parser.add_argument('--tshark', default='tshark', help='tshark executable')
    parser.add_argument('--log-dir', default='logs', help='Directory for the log file')

    args = parser.parse_args()
    setup_logging(args.log_dir, 'live_capture.log')
    sys.exit(run_capture(args))


if __name__ == '__main__':
    main()
