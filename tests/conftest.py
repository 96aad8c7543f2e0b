import sys
from pathlib import Path

# Ensure the project root is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


import pytest

from api.api_server import create_app


def make_capture(src="10.0.0.1", dst="10.0.0.2", proto="6", length="60",
                 sport="443", dport="51000", transport="tcp"):
    """Build a tshark ek style capture document. None drops a field."""
    layers = {}
    if length is not None:
        layers["frame"] = {"frame_len": length}

    ip = {}
    for key, value in (("ip_ip_src", src), ("ip_ip_dst", dst), ("ip_ip_proto", proto)):
        if value is not None:
            ip[key] = value
    if ip:
        layers["ip"] = ip

    if transport in ("tcp", "udp"):
        ports = {}
        if sport is not None:
            ports[f"{transport}_srcport"] = sport
        if dport is not None:
            ports[f"{transport}_dstport"] = dport
        layers[transport] = ports

    return {"timestamp": "1700000000000", "layers": layers}


@pytest.fixture
def capture_factory():
    return make_capture


@pytest.fixture
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "CONFIG_FILE": str(tmp_path / "missing.yaml"),
        "LOG_DIR": str(tmp_path / "logs"),
        "STATIC_DIR": str(tmp_path / "public"),
    })
    return app


@pytest.fixture
def client(app):
    return app.test_client()
