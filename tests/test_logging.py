import logging

from sniffer.main import setup_logging


def test_loggers_share_one_file_handler(tmp_path):
    log_path = setup_logging(str(tmp_path), "app.log")

    sniffer_handlers = logging.getLogger("sniffer").handlers
    api_handlers = logging.getLogger("api").handlers
    file_handlers = {
        id(h) for h in sniffer_handlers + api_handlers if isinstance(h, logging.FileHandler)
    }

    assert len(file_handlers) == 1
    assert sniffer_handlers == api_handlers

    logging.getLogger("sniffer.store").info("from core")
    logging.getLogger("api.routes_packets").info("from api")
    for handler in api_handlers:
        handler.flush()

    with open(log_path) as f:
        lines = f.read().splitlines()
    assert len(lines) == 2
    assert lines[0].endswith("INFO - from core")
    assert lines[1].endswith("INFO - from api")


def test_repeated_setup_replaces_handlers(tmp_path):
    setup_logging(str(tmp_path / "first"))
    setup_logging(str(tmp_path / "second"))

    handlers = logging.getLogger("sniffer").handlers
    assert len(handlers) == 2
    file_handler = next(h for h in handlers if isinstance(h, logging.FileHandler))
    assert file_handler.baseFilename.startswith(str(tmp_path / "second"))
