"""Value inspection CLI helpers."""

from __future__ import annotations

from ..codec.decoder import inspect_rational
from ..config import CodecConfig
from ..models.info import RationalInfo


def parse_rational(text: str) -> tuple[int, int]:
    """Parse ``"n"`` or ``"n/d"`` into a (numerator, denominator) pair.

    Raises:
        ValueError: If the text is not an integer or a fraction of integers
    """
    num_text, sep, den_text = text.strip().partition("/")
    numerator = int(num_text)
    denominator = int(den_text) if sep else 1
    return numerator, denominator


def parse_hex(text: str) -> bytes:
    """Parse hex bytes, ignoring whitespace, colons and a ``0x`` prefix.

    Raises:
        ValueError: If the text is not valid hex
    """
    cleaned = "".join(text.split()).replace(":", "")
    if cleaned.lower().startswith("0x"):
        cleaned = cleaned[2:]
    return bytes.fromhex(cleaned)


def format_bytes(data: bytes | bytearray | memoryview) -> str:
    """Format bytes as space separated uppercase hex pairs."""
    return bytes(data).hex(" ").upper()


def inspect_stream(data: bytes, config: CodecConfig) -> list[RationalInfo]:
    """Describe every rational in ``data``.

    Raises:
        DecodeError: If the data is corrupt or truncated
    """
    infos: list[RationalInfo] = []
    rest = memoryview(data)
    while len(rest):
        info = inspect_rational(rest, config=config)
        infos.append(info)
        rest = rest[info.size :]
    return infos


def print_inspection(infos: list[RationalInfo]) -> None:
    """Print a field-by-field breakdown of each value."""
    print(f"{len(infos)} value{'s' if len(infos) != 1 else ''} decoded.")
    print()

    offset = 0
    for i, info in enumerate(infos, 1):
        title = f"{i}. {info.as_fraction()}"
        print(f"{'=' * 8} {title} {'=' * max(1, 38 - len(title))}")
        print(f"        offset{'.' * 28}{offset}")
        print(f"        size{'.' * 30}{info.size} bytes")
        print(f"        discriminant{'.' * 22}{info.discriminant:#04x}")
        print(f"        sign{'.' * 30}{'-' if info.negative else '+'}")
        print(
            f"        numerator class{'.' * 19}{int(info.numerator_class)} "
            f"({info.numerator_class.byte_width} bytes)"
        )
        if info.implicit_denominator:
            print(f"        denominator class{'.' * 17}0 (implicit 1)")
        else:
            print(
                f"        denominator class{'.' * 17}{int(info.denominator_class)} "
                f"({info.denominator_class.byte_width} bytes)"
            )
        print(f"        bytes{'.' * 29}{format_bytes(bytes.fromhex(info.hex))}")
        print()
        offset += info.size
