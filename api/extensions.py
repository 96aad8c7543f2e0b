from flask import current_app

from sniffer.store import PacketStore

STORE_KEY = 'packet_store'


def get_packet_store() -> PacketStore:
    """Return the PacketStore bound to the current application."""
    return current_app.extensions[STORE_KEY]
