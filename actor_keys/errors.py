# actor_keys/errors.py
from __future__ import annotations
from typing import Any, Iterable, List


class ActorKeyError(ValueError):
    pass


class InvalidArgument(ActorKeyError):
    pass


class ValidationError(ActorKeyError):
    """A value was rejected by a field's type or pattern constraint."""

    def __init__(self, field: str, value: Any, reason: str = "does not match the required format"):
        self.field = field
        self.value = value
        super().__init__(f"invalid value for '{field}': {value!r} {reason}")


class KeyParseError(ActorKeyError):
    pass


class ParseError(ActorKeyError):
    pass


class AmbiguousActorError(ParseError):
    def __init__(self, keys: Iterable[str]):
        self.keys: List[str] = sorted(keys)
        if self.keys:
            msg = f"key mapping names more than one actor: {', '.join(self.keys)}"
        else:
            msg = "key mapping must contain exactly one of 'user' or 'client'"
        super().__init__(msg)


class IncompleteKeyError(ActorKeyError):
    def __init__(self, missing: Iterable[str]):
        self.missing: List[str] = list(missing)
        super().__init__(f"key is missing required fields: {', '.join(self.missing)}")
