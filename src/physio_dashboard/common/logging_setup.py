"""Logging setup shared by the Streamlit entry point and the launcher."""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once; later calls only adjust the package level.

    Streamlit re-executes the app script on every rerun, so basicConfig must
    not stack handlers.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=numeric, format=LOG_FORMAT)

    logging.getLogger("physio_dashboard").setLevel(numeric)
