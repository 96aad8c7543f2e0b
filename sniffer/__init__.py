"""
Packet Sniffer Dashboard - core engine

Ingests tshark capture documents, keeps rolling traffic statistics and a
bounded buffer of recent packets for the dashboard API.
"""

from .store import PacketStore

__all__ = ['PacketStore']
__version__ = '1.0.0'
