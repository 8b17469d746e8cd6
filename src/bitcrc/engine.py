"""Bit-serial CRC engine.

The engine simulates a linear-feedback shift register (LFSR) over GF(2), which is the
"textbook" polynomial division model of a CRC: the register starts out cleared, the input
bits are shifted in without reflection and the final register content is returned as is,
without any XOR mask applied.

The register update for each input bit ``b`` is

1. ``feedback = b ^ register[degree - 1]``
2. ``register[i] = register[i - 1] ^ (tap[i] & feedback)`` for ``i`` from ``degree - 1`` down to 1
3. ``register[0] = feedback``

which is the same as shifting the register left by one and XORing in the generator polynomial
whenever the feedback bit is set.

>>> compute([1, 1, 0, 0], polynomial=0b011, degree=3)
2
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bitcrc.exceptions import InvalidDegreeError

if TYPE_CHECKING:
    from collections.abc import Iterable

_LOGGER = logging.getLogger(__name__)

MIN_DEGREE = 1
#: Width of the tap vector container. Wider registers are not supported.
MAX_DEGREE = 64


def validate_degree(degree: int) -> None:
    """Raise :py:class:`InvalidDegreeError` if ``degree`` is not an integer inside
    [:py:const:`MIN_DEGREE`, :py:const:`MAX_DEGREE`]."""
    # bool is an int subclass but never a meaningful register width
    if isinstance(degree, bool) or not isinstance(degree, int):
        raise InvalidDegreeError(degree)
    if degree < MIN_DEGREE or degree > MAX_DEGREE:
        raise InvalidDegreeError(degree)


def register_mask(degree: int) -> int:
    """All-ones mask covering a register of width ``degree``.

    >>> hex(register_mask(16))
    '0xffff'
    """
    validate_degree(degree)
    return (1 << degree) - 1


def compute(bits: Iterable[int], polynomial: int, degree: int) -> int:
    """Compute the CRC of a bit stream.

    :param bits: Ordered bit values, index 0 is shifted in first. Only the least significant
        bit of each element is used. May be empty.
    :param polynomial: Tap vector. Bit ``i`` is the coefficient of ``x**i`` for
        ``0 < i < degree``. The ``x**0`` and ``x**degree`` terms are implicit, so bit 0 and
        all bits at or above ``degree`` are never read.
    :param degree: Generator polynomial degree and register width, inside [1, 64].
    :raises InvalidDegreeError: Invalid ``degree``, raised before any bit is consumed.
    :return: Final register content. Bits at or above ``degree`` are always zero.
    """
    validate_degree(degree)
    mask = (1 << degree) - 1
    if polynomial & ~mask:
        _LOGGER.debug(
            "Ignoring polynomial bits at or above degree %d in 0x%x", degree, polynomial
        )
    taps = (polynomial & mask) | 1
    top_shift = degree - 1
    register = 0
    for bit in bits:
        feedback = (bit & 1) ^ (register >> top_shift)
        register = (register << 1) & mask
        if feedback:
            register ^= taps
    return register
