def reference_crc(bits, generator: int) -> int:
    """Remainder of ``M(x) * x**degree`` divided by the full generator polynomial, computed by
    plain long division over GF(2)."""
    degree = generator.bit_length() - 1
    dividend = 0
    for bit in bits:
        dividend = (dividend << 1) | bit
    dividend <<= degree
    while dividend.bit_length() > degree:
        dividend ^= generator << (dividend.bit_length() - generator.bit_length())
    return dividend
