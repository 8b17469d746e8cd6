from bitcrc import (
    CRC16_CCITT,
    PRESETS,
    PrintFormats,
    bits_from_bytes,
    compute,
    crc15_can,
    get_printable_crc_string,
)


def main():
    print("-- CRC engine examples --")
    bits = bits_from_bytes(b"123456789")
    crc = compute(bits, polynomial=0x1021, degree=16)
    print(f"CRC-16-CCITT of '123456789': {get_printable_crc_string(crc, 16)}")

    # CAN frames are not byte aligned, the CRC covers an arbitrary number of bits
    frame_bits = [0, 1, 1, 0, 0, 1, 1, 1, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 1]
    can_crc = crc15_can(frame_bits)
    can_crc_str = get_printable_crc_string(can_crc, 15, PrintFormats.BIN)
    print(f"CRC-15/CAN of a 19 bit frame: {can_crc_str}")

    codeword = CRC16_CCITT.append(bits)
    print(f"Codeword with appended CRC is valid: {CRC16_CCITT.is_codeword(codeword)}")

    print("-- Check values of all catalog entries --")
    for name, preset in PRESETS.items():
        print(f"{name:<18} {get_printable_crc_string(preset.check(), preset.degree)}")


if __name__ == "__main__":
    main()
