import logging

from bitcrc import catalog
from bitcrc.bits import (
    PrintFormats,
    bits_from_bytes,
    bits_from_int,
    crc_to_bytes,
    get_printable_crc_string,
    int_from_bits,
)
from bitcrc.catalog import *  # noqa: F403  # re-export
from bitcrc.engine import MAX_DEGREE, MIN_DEGREE, compute, register_mask, validate_degree
from bitcrc.exceptions import InvalidDegree, InvalidDegreeError
from bitcrc.version import get_version

__all__ = [
    "MAX_DEGREE",
    "MIN_DEGREE",
    "InvalidDegree",
    "InvalidDegreeError",
    "PrintFormats",
    "bits_from_bytes",
    "bits_from_int",
    "compute",
    "crc_to_bytes",
    "get_lib_logger",
    "get_printable_crc_string",
    "get_version",
    "int_from_bits",
    "register_mask",
    "validate_degree",
]
__all__ += catalog.__all__

__LIB_LOGGER = logging.getLogger(__name__)


def get_lib_logger() -> logging.Logger:
    """Get the library logger. Can be used to modify the library logs or disable the
    propagation."""
    return __LIB_LOGGER
