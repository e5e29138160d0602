# dynarray/config.py
"""
Central configuration for the dynamic array package.
"""

import logging

CONFIG = {
    "default_capacity": 8,  # must be a power of two
    "dtype": "int32",
    "check_invariants": True,
    "audit_by_default": False,
    "log_format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
}


def configure_logging(verbose: bool = False) -> None:
    """Route library log records to stderr (DEBUG when verbose)."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=CONFIG["log_format"])
    else:
        logging.basicConfig(level=logging.WARNING, format=CONFIG["log_format"])
