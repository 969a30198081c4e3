from bitarray import bitarray


def bytes_to_bitstring(data: bytes) -> str:
    """Convert bytes -> bitstring (8 bits per byte, MSB first)."""
    bits = bitarray(endian="big")
    bits.frombytes(bytes(data))
    return bits.to01()


def bitstring_to_bytes(bits: str) -> bytes:
    """
    Convert bitstring -> bytes.

    A trailing partial byte is zero padded.
    """
    if not set(bits).issubset({"0", "1"}):
        raise ValueError("bitstring_to_bytes expects a bitstring containing only '0' and '1'.")
    return bitarray(bits, endian="big").tobytes()
