# actor_keys/submission.py

"""
Completeness check made at the transmission boundary.

A KeyRecord may be incomplete while it is being built; the code that sends
it to the authorization service calls ensure_complete() right before the
request and uses the returned mapping as the body.
"""

from __future__ import annotations
from typing import Dict, List
from .errors import IncompleteKeyError
from .key import KeyRecord
from .logger import get_logger

log = get_logger("actor_keys.submission")

REQUIRED_FIELDS = ("public_key", "expiration_date")


def missing_fields(key: KeyRecord) -> List[str]:
    missing = [f for f in REQUIRED_FIELDS if getattr(key, f) is None]
    # A name can still be derived later as long as there is a public key
    if key.name is None and key.public_key is None:
        missing.insert(0, "name")
    return missing


def ensure_complete(key: KeyRecord, derive_name: bool = True) -> Dict[str, str]:
    """Return the request body for key or raise IncompleteKeyError.

    An unparsable public_key surfaces as KeyParseError from name derivation.
    """
    if derive_name and key.public_key is not None:
        key.derive_default_name()

    missing = missing_fields(key)
    if not derive_name and key.name is None and "name" not in missing:
        missing.insert(0, "name")

    if missing:
        log.warning(f"[SUBMIT] {key.actor_field_name}={key.actor} missing {missing}")
        raise IncompleteKeyError(missing)

    return key.to_mapping()
