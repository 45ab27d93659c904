"""
actor_keys.key
--------------
Defines KeyRecord, the credential record that binds a user or client
identity to an RSA public key, an optional name, and an optional expiration.

Key features:
- Every field is validated when it is assigned, never at serialization time
- Incomplete records are allowed; see actor_keys.submission for the
  completeness check made before transmission
- Default name derived from the public key fingerprint
- Canonical JSON that omits fields that were never set
"""

from __future__ import annotations
import json, re
from datetime import datetime, timezone
from enum import Enum
from re import Pattern
from typing import Any, Dict, Mapping, Optional, Union
from .crypto import derive_fingerprint
from .errors import AmbiguousActorError, InvalidArgument, KeyParseError, ParseError, ValidationError
from .logger import get_logger
from .utils import INFINITY, compact_json, parse_expiration

log = get_logger("actor_keys.key")

ACTOR_PATTERN = re.compile(r"^[a-z0-9\-_]+$")
FINGERPRINT_PATTERN = re.compile(r"^(?:[0-9a-f]{2}:){19}[0-9a-f]{2}$")
EXPIRATION_PATTERN = re.compile(r"^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z|infinity)$")

OPTIONAL_FIELDS = ("name", "public_key", "expiration_date")


class ActorKind(str, Enum):
    USER = "user"
    CLIENT = "client"


def _matches(pattern: Pattern[str], value: str) -> bool:
    # fullmatch so a trailing newline cannot slip past "$"
    return pattern.fullmatch(value) is not None


def _check_str(field: str, value: Any) -> str:
    if not isinstance(value, str):
        log.warning(f"[KEY] rejected {field}: expected str, got {type(value).__name__}")
        raise ValidationError(field, value, reason=f"is not a string ({type(value).__name__})")
    return value


def _check_pattern(field: str, value: Any, *patterns: Pattern[str]) -> str:
    _check_str(field, value)
    if not any(_matches(p, value) for p in patterns):
        log.warning(f"[KEY] rejected {field}: {value!r}")
        raise ValidationError(field, value)
    return value


class KeyRecord:
    """
    A key that belongs to one actor (user or client).

    The actor kind is fixed at construction and decides the JSON key the
    actor is serialized under. All other fields start unset (None).
    """

    def __init__(self, actor_kind: Union[ActorKind, str], actor: str):
        try:
            kind = ActorKind(actor_kind)
        except (ValueError, TypeError):
            raise InvalidArgument(
                f"actor kind must be either 'user' or 'client', got {actor_kind!r}"
            ) from None

        self._actor_kind = kind
        self._actor: str = _check_pattern("actor", actor, ACTOR_PATTERN)
        self._name: Optional[str] = None
        self._public_key: Optional[str] = None
        self._expiration_date: Optional[str] = None

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------
    @property
    def actor_kind(self) -> ActorKind:
        return self._actor_kind

    @property
    def actor_field_name(self) -> str:
        return self._actor_kind.value

    @property
    def actor(self) -> str:
        return self._actor

    @actor.setter
    def actor(self, value: str) -> None:
        self.set_actor(value)

    @property
    def name(self) -> Optional[str]:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self.set_name(value)

    @property
    def public_key(self) -> Optional[str]:
        return self._public_key

    @public_key.setter
    def public_key(self, value: str) -> None:
        self.set_public_key(value)

    @property
    def expiration_date(self) -> Optional[str]:
        return self._expiration_date

    @expiration_date.setter
    def expiration_date(self, value: str) -> None:
        self.set_expiration_date(value)

    # ------------------------------------------------------------------
    # Validated setters
    # ------------------------------------------------------------------
    def set_actor(self, value: str) -> str:
        self._actor = _check_pattern("actor", value, ACTOR_PATTERN)
        return self._actor

    def set_name(self, value: str) -> str:
        """Set the key name; accepts an actor-style name or a fingerprint."""
        self._name = _check_pattern("name", value, ACTOR_PATTERN, FINGERPRINT_PATTERN)
        return self._name

    def set_public_key(self, value: str) -> str:
        self._public_key = _check_str("public_key", value)
        return self._public_key

    def set_expiration_date(self, value: str) -> str:
        self._expiration_date = _check_pattern("expiration_date", value, EXPIRATION_PATTERN)
        return self._expiration_date

    # ------------------------------------------------------------------
    # Default name
    # ------------------------------------------------------------------
    def derive_default_name(self) -> str:
        """
        Set name to the public key's fingerprint if no name is set yet.

        Should be called once public_key is set and before the key is sent
        to the server. Returns the (possibly unchanged) name.
        """
        if self._name is not None:
            return self._name
        if self._public_key is None:
            raise KeyParseError("cannot derive a default name: public_key is not set")

        self._name = derive_fingerprint(self._public_key)
        log.debug(f"[KEY] default name {self._name} for {self.actor_field_name}={self._actor}")
        return self._name

    # ------------------------------------------------------------------
    # Expiration
    # ------------------------------------------------------------------
    def is_expired(self, at: Optional[datetime] = None) -> bool:
        if self._expiration_date is None or self._expiration_date == INFINITY:
            return False
        if at is None:
            at = datetime.now(timezone.utc)
        elif at.tzinfo is None:
            at = at.replace(tzinfo=timezone.utc)
        try:
            expires = parse_expiration(self._expiration_date)
        except ValueError as e:
            raise ValidationError("expiration_date", self._expiration_date, reason="is not a real calendar time") from e
        return expires <= at

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    def to_mapping(self) -> Dict[str, str]:
        # Only fields that were explicitly set are emitted
        result = {self.actor_field_name: self._actor}
        if self._name is not None:
            result["name"] = self._name
        if self._public_key is not None:
            result["public_key"] = self._public_key
        if self._expiration_date is not None:
            result["expiration_date"] = self._expiration_date
        return result

    to_dict = to_mapping

    def to_json(self) -> str:
        return compact_json(self.to_mapping())

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "KeyRecord":
        """Rebuild a KeyRecord from a mapping (inverse of to_mapping).

        Exactly one of "user" / "client" must be present. Every field goes
        through the validating setters, so bad input raises ValidationError.
        """
        if not isinstance(mapping, Mapping):
            raise ParseError(f"expected a JSON object, got {type(mapping).__name__}")

        actor_keys = [k.value for k in ActorKind if k.value in mapping]
        if len(actor_keys) != 1:
            raise AmbiguousActorError(actor_keys)

        kind = actor_keys[0]
        key = cls(kind, mapping[kind])
        for field in OPTIONAL_FIELDS:
            if field in mapping:
                getattr(key, f"set_{field}")(mapping[field])

        log.debug(f"[KEY] reconstructed key for {kind}={key.actor}")
        return key

    from_dict = from_mapping

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "KeyRecord":
        try:
            data = json.loads(text)
        except (ValueError, TypeError, RecursionError) as e:
            raise ParseError(f"malformed key JSON: {e}") from e
        return cls.from_mapping(data)

    json_create = from_json

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyRecord):
            return NotImplemented
        return self._actor_kind is other._actor_kind and self.to_mapping() == other.to_mapping()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self.to_mapping().items() if k != "public_key")
        return f"KeyRecord({fields})"
