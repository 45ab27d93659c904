"""
actor_keys.crypto
-----------------
Fingerprint derivation for RSA public keys.

The fingerprint is the SHA-1 digest of the DER encoding of
``SEQUENCE { INTEGER modulus, INTEGER publicExponent }`` (the PKCS#1
``RSAPublicKey`` structure), rendered as 20 colon-separated lowercase hex
pairs. Because the key is parsed and re-encoded, PEM line wrapping and the
outer container (SubjectPublicKeyInfo vs. PKCS#1) do not affect the result.

This is the only module that talks to the ``cryptography`` backend.
"""

from __future__ import annotations
from typing import Union
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from .errors import KeyParseError
from .logger import get_logger
from .utils import colon_hex

log = get_logger("actor_keys.crypto")

KeyMaterial = Union[str, bytes]

_PEM_MARKER = b"-----BEGIN"


# --------- Parsing ----------
def load_rsa_public_key(public_key: KeyMaterial) -> rsa.RSAPublicKey:
    """Parse PEM (or raw DER) text into an RSA public key object."""
    if isinstance(public_key, str):
        data = public_key.strip().encode("utf-8")
    elif isinstance(public_key, bytes):
        data = public_key.strip()
    else:
        raise KeyParseError(f"public key must be str or bytes, got {type(public_key).__name__}")

    if not data:
        raise KeyParseError("public key is empty")

    try:
        if data.startswith(_PEM_MARKER):
            key = serialization.load_pem_public_key(data)
        else:
            key = serialization.load_der_public_key(data)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise KeyParseError(f"could not parse RSA public key: {e}") from e

    if not isinstance(key, rsa.RSAPublicKey):
        raise KeyParseError(f"expected an RSA public key, got {type(key).__name__}")
    return key


# --------- DER re-encoding ----------
def rsa_public_der(public_key: KeyMaterial) -> bytes:
    """DER bytes of SEQUENCE { n, e } for the given key (PKCS#1 RSAPublicKey)."""
    key = load_rsa_public_key(public_key)
    return key.public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.PKCS1,
    )


# --------- Fingerprint ----------
def derive_fingerprint(public_key: KeyMaterial) -> str:
    """
    Compute the colon-separated SHA-1 fingerprint of an RSA public key.

    - Input: PEM text (``PUBLIC KEY`` or ``RSA PUBLIC KEY``) or DER bytes
    - Output: e.g. ``12:3e:33:...:4a`` (20 groups, 59 characters)

    Raises KeyParseError when the input is not an RSA public key.
    """
    digest = hashes.Hash(hashes.SHA1())
    digest.update(rsa_public_der(public_key))
    fpr = colon_hex(digest.finalize())
    log.debug(f"[FPR] derived fingerprint {fpr}")
    return fpr
