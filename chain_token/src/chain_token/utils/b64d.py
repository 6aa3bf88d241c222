import base64
import binascii


def b64d(value: str) -> bytes:
    """URL-safe base64 decode that tolerates missing padding.

    Characters outside the URL-safe alphabet raise ``binascii.Error`` instead of
    being discarded.
    """
    if "=" in value:
        raise binascii.Error("Padding is not allowed in base64url segments")
    pad = "=" * (-len(value) % 4)
    translated = (value + pad).replace("-", "+").replace("_", "/")
    return base64.b64decode(translated.encode("ascii"), validate=True)
