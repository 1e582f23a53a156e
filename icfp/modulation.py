"""
Bit-string encoding used on the wire by the alien API.

Values map to Python as follows:

- ``int``: signed number
- ``None``: nil
- ``(head, tail)``: pair (cons cell)
- ``list``: nil-terminated chain of pairs

Encoding, as a string of ``0``/``1`` characters:

- nil is ``00`` and a pair is ``11`` followed by head and tail;
- a number starts with ``01`` (positive) or ``10`` (negative), then the
  width in 4-bit nibbles in unary (``1`` repeated, closed by ``0``), then the
  magnitude big-endian in that many nibbles. Zero is ``010``.

Demodulation turns nil-terminated pair chains back into lists, so
``(1, None)`` and ``[1]`` both demodulate to ``[1]``.
"""

NIL = "00"
PAIR = "11"
POSITIVE = "01"
NEGATIVE = "10"


def modulate_number(value: int) -> str:
    sign = NEGATIVE if value < 0 else POSITIVE
    magnitude = abs(value)
    nibbles = (magnitude.bit_length() + 3) // 4
    bits = format(magnitude, f"0{nibbles * 4}b") if nibbles else ""
    return sign + "1" * nibbles + "0" + bits


def modulate(value) -> str:
    """
    Encode a value to its bit string.

    Raises:
        TypeError: value (or a nested element) is not int, None, pair or list
    """
    if value is None:
        return NIL
    if isinstance(value, int):
        return modulate_number(value)
    if isinstance(value, tuple):
        if len(value) != 2:
            raise TypeError(f"Pairs must have two elements, got {len(value)}")
        return PAIR + modulate(value[0]) + modulate(value[1])
    if isinstance(value, list):
        encoded = "".join(PAIR + modulate(item) for item in value)
        return encoded + NIL
    raise TypeError(f"Cannot modulate {type(value).__name__}")


def _demodulate_at(bits: str, pos: int):
    prefix = bits[pos:pos + 2]
    if len(prefix) < 2:
        raise ValueError(f"Truncated input at bit {pos}")
    pos += 2

    if prefix == NIL:
        return None, pos

    if prefix == PAIR:
        head, pos = _demodulate_at(bits, pos)
        tail, pos = _demodulate_at(bits, pos)
        if tail is None:
            return [head], pos
        if isinstance(tail, list):
            return [head] + tail, pos
        return (head, tail), pos

    # number
    nibbles = 0
    while pos < len(bits) and bits[pos] == "1":
        nibbles += 1
        pos += 1
    if pos >= len(bits):
        raise ValueError("Truncated number width")
    pos += 1  # closing 0

    width = nibbles * 4
    digits = bits[pos:pos + width]
    if len(digits) != width:
        raise ValueError("Truncated number")
    magnitude = int(digits, 2) if width else 0
    pos += width

    return (-magnitude if prefix == NEGATIVE else magnitude), pos


def demodulate(bits: str):
    """
    Decode a bit string produced by :func:`modulate` or by the server.

    Surrounding whitespace is ignored.

    Raises:
        ValueError: bits is malformed, truncated or has trailing data
    """
    bits = bits.strip()
    if set(bits) - {"0", "1"}:
        raise ValueError("Modulated data may only contain 0 and 1")

    value, pos = _demodulate_at(bits, 0)
    if pos != len(bits):
        raise ValueError(f"Trailing data after bit {pos}")
    return value
