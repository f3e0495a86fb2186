import base64
import binascii
import re

from .errors import InvalidEncoding

_ALPHABET = re.compile(r"[A-Za-z0-9+/]*")


def to_text(data: bytes) -> str:
    """Standard base64 without ``=`` padding or line breaks."""
    return base64.b64encode(data).decode("ascii").rstrip("=")


def from_text(text: str) -> bytes:
    """Decode unpadded base64, rejecting anything ``to_text`` would not emit."""
    if not _ALPHABET.fullmatch(text):
        raise InvalidEncoding("Text contains characters outside the base64 alphabet")
    if len(text) % 4 == 1:
        raise InvalidEncoding(f"Invalid unpadded base64 length: {len(text)}")
    padded = text + "=" * (-len(text) % 4)
    try:
        data = base64.b64decode(padded, validate=True)
    except binascii.Error as exc:
        raise InvalidEncoding(str(exc)) from exc
    # Non-zero trailing bits would decode to the same bytes as another text.
    if to_text(data) != text:
        raise InvalidEncoding("Non-canonical trailing bits in base64 text")
    return data
