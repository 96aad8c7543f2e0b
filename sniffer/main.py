import logging
import os
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

log_folder = "logs"
log_file = "app.log"

LOGGER_NAMES = ("sniffer", "api")


def setup_logging(
    folder: Optional[str] = None,
    filename: Optional[str] = None,
    names: Iterable[str] = LOGGER_NAMES,
    level: int = logging.INFO,
) -> str:
    """
    Initialize package loggers with file and console handlers.

    Args:
        folder: Directory for the log file (default: logs)
        filename: Log file name (default: app.log)
        names: Logger names to configure
        level: Logging level

    Returns:
        Path of the log file
    """
    folder = folder or log_folder
    filename = filename or log_file
    os.makedirs(folder, exist_ok=True)
    log_path = os.path.join(folder, filename)

    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s"
    )

    # One handler of each kind, shared by every package logger
    file_handler = logging.FileHandler(log_path)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    for name in names:
        target = logging.getLogger(name)

        # Clear existing handlers
        for handler in list(target.handlers):
            target.removeHandler(handler)
            handler.close()
        target.setLevel(level)
        target.propagate = False

        target.addHandler(file_handler)
        target.addHandler(console_handler)

    return log_path


def log_startup_banner(host: str, port: int) -> None:
    """
    Log the listening address and how to feed packets to the server.

    Args:
        host: Bind address
        port: Bind port
    """
    display_host = 'localhost' if host in ('0.0.0.0', '') else host
    base = f"http://{display_host}:{port}"

    logger.info("=" * 60)
    logger.info("PACKET SNIFFER DASHBOARD")
    logger.info("=" * 60)
    logger.info(f"Server running at: {base}")
    logger.info(f"Dashboard:         {base}/")
    logger.info(f"Health:            {base}/health")
    logger.info(f"Send packets to:   {base}/api/packets")
    logger.info("=" * 60)
    logger.info("Forward a live capture with:")
    logger.info(f"  python scripts/live_capture.py eth0 --server {base}")
    logger.info("=" * 60)
