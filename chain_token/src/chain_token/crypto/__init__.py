from .algorithms import Algorithm
from .key_encoder import KeyEncoder, get_private_pem, get_public_pem
from .signature_format import curve_size_for, der_to_jose, jose_to_der

__all__ = [
    "Algorithm",
    "KeyEncoder",
    "curve_size_for",
    "der_to_jose",
    "get_private_pem",
    "get_public_pem",
    "jose_to_der",
]
