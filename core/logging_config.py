# core/logging_config.py
import logging
import sys

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once per process.

    Streamlit re-executes the script on every interaction, so repeated calls
    must not stack handlers.
    """
    root = logging.getLogger()
    if getattr(root, "_glrs_configured", False):
        return
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    root._glrs_configured = True
