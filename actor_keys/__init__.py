"""
actor_keys
==========
Credential records that bind a user or client identity to an RSA public key.

Provides:
- KeyRecord with validated fields and canonical JSON serialization
- RSA public key fingerprints (SHA-1 over the DER-encoded modulus/exponent)
- Completeness check for records about to be sent to the server
"""

from .crypto import derive_fingerprint, load_rsa_public_key, rsa_public_der
from .errors import (
    ActorKeyError,
    AmbiguousActorError,
    IncompleteKeyError,
    InvalidArgument,
    KeyParseError,
    ParseError,
    ValidationError,
)
from .key import ActorKind, KeyRecord
from .submission import ensure_complete, missing_fields
from .utils import INFINITY, format_expiration, parse_expiration

__all__ = [
    "ActorKind",
    "KeyRecord",
    "derive_fingerprint",
    "load_rsa_public_key",
    "rsa_public_der",
    "ensure_complete",
    "missing_fields",
    "INFINITY",
    "format_expiration",
    "parse_expiration",
    "ActorKeyError",
    "AmbiguousActorError",
    "IncompleteKeyError",
    "InvalidArgument",
    "KeyParseError",
    "ParseError",
    "ValidationError",
]
