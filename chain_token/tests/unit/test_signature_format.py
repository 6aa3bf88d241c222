import pytest

from chain_token.crypto.signature_format import curve_size_for, der_to_jose, jose_to_der
from chain_token.exceptions import MalformedSignature


def _der(r: bytes, s: bytes) -> bytes:
    body = bytes([0x02, len(r)]) + r + bytes([0x02, len(s)]) + s
    return bytes([0x30, len(body)]) + body


def test_der_to_jose_pads_short_integers() -> None:
    jose = der_to_jose(_der(b"\x01", b"\x7f\xff"), 32)
    assert len(jose) == 64
    assert jose[:32] == b"\x00" * 31 + b"\x01"
    assert jose[32:] == b"\x00" * 30 + b"\x7f\xff"


def test_der_to_jose_strips_sign_byte() -> None:
    r = b"\x00" + b"\x80" + b"\x11" * 31
    s = b"\x22" * 32
    jose = der_to_jose(_der(r, s), 32)
    assert jose == b"\x80" + b"\x11" * 31 + b"\x22" * 32


def test_jose_to_der_adds_sign_byte_and_strips_zeros() -> None:
    jose = b"\x00" * 31 + b"\x05" + b"\xff" * 32
    assert jose_to_der(jose, 32) == _der(b"\x05", b"\x00" + b"\xff" * 32)


def test_jose_to_der_encodes_zero_half_as_single_byte() -> None:
    jose = b"\x00" * 32 + b"\x01" * 32
    assert jose_to_der(jose, 32) == _der(b"\x00", b"\x01" * 32)


def test_round_trip_on_maximal_signature() -> None:
    der = _der(b"\x00" + b"\xf0" * 32, b"\x00" + b"\xf1" * 32)
    assert len(der) == 72
    assert jose_to_der(der_to_jose(der, 32), 32) == der


def test_long_form_length_for_p521() -> None:
    size = curve_size_for("ES512")
    jose = b"\x01" + b"\xaa" * (size - 1) + b"\x01" + b"\xbb" * (size - 1)
    der = jose_to_der(jose, size)
    assert der[:2] == b"\x30\x81"
    assert der_to_jose(der, size) == jose


@pytest.mark.parametrize("length", [0, 63, 65, 128])
def test_jose_to_der_rejects_wrong_length(length: int) -> None:
    with pytest.raises(MalformedSignature):
        jose_to_der(b"\x01" * length, 32)


@pytest.mark.parametrize(
    "der",
    [
        b"",
        b"\x30",
        b"\x31\x06\x02\x01\x01\x02\x01\x01",  # wrong sequence tag
        b"\x30\x07\x02\x01\x01\x02\x01\x01",  # sequence length too long
        b"\x30\x06\x03\x01\x01\x02\x01\x01",  # wrong integer tag
        b"\x30\x06\x02\x01\x01\x02\x02\x01",  # truncated integer
        b"\x30\x05\x02\x00\x02\x01\x01",  # empty integer
        b"\x30\x06\x02\x01\x81\x02\x01\x01",  # negative integer
        b"\x30\x07\x02\x02\x00\x01\x02\x01\x01",  # non-minimal leading zero
        b"\x30\x08\x02\x01\x01\x02\x01\x01\x00\x00",  # trailing bytes inside sequence
        b"\x30\x06\x02\x01\x01\x02\x01\x01\x00",  # trailing bytes after sequence
    ],
)
def test_der_to_jose_rejects_bad_framing(der: bytes) -> None:
    with pytest.raises(MalformedSignature):
        der_to_jose(der, 32)


def test_der_to_jose_rejects_oversized_integer() -> None:
    with pytest.raises(MalformedSignature):
        der_to_jose(_der(b"\x01" * 33, b"\x01"), 32)


def test_curve_size_for_unknown_algorithm() -> None:
    assert curve_size_for("ES256K") == 32
    with pytest.raises(ValueError):
        curve_size_for("RS256")


def test_der_to_jose_rejects_non_minimal_long_form_length() -> None:
    with pytest.raises(MalformedSignature):
        der_to_jose(b"\x30\x81\x06\x02\x01\x01\x02\x01\x01", 32)


def test_der_output_matches_cryptography_encoder() -> None:
    from cryptography.hazmat.primitives.asymmetric.utils import encode_dss_signature

    assert jose_to_der(b"\x00" * 32 + b"\x00" * 31 + b"\x01", 32) == encode_dss_signature(0, 1)
    assert jose_to_der(b"\x00" * 32 + b"\x00" * 31 + b"\x01", 32) == b"\x30\x06\x02\x01\x00\x02\x01\x01"
