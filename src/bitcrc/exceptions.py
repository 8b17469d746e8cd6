from __future__ import annotations


class InvalidDegreeError(ValueError):
    """The CRC degree, which is also the register width, was not an integer inside
    [:py:const:`bitcrc.engine.MIN_DEGREE`, :py:const:`bitcrc.engine.MAX_DEGREE`]."""

    def __init__(self, degree: object):
        super().__init__(f"invalid CRC degree {degree!r}, must be an integer between 1 and 64")
        self.degree = degree


InvalidDegree = InvalidDegreeError
