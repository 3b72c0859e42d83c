"""
Use case: Translate a domain error into an HTTP outcome.

Input: any object-like error value (exception, object or mapping)
Output: Outcome (status code, message, optional data, headers)
Side effects: None.
Failure cases: InvalidArgumentError when the translator is misused
    (null, primitive, sequence or callable input, credentials error
    without a string challenge).
"""

import logging
from collections.abc import Mapping, Sequence, Set
from enum import Enum
from numbers import Number
from typing import Any, Optional

from errorbridge.core.config import settings
from errorbridge.domain.entities import KindRule, Outcome
from errorbridge.domain.errors import InvalidArgumentError
from errorbridge.domain.rules import KIND_CLASSES, KIND_RULES, UNKNOWN_RULE

logger = logging.getLogger(__name__)

_PRIMITIVES = (str, bytes, bytearray, Number)


def validate_error(err: Any) -> None:
    """Reject values that cannot be an error object.

    Error objects are mappings or plain objects. Numbers, strings,
    sequences, sets and callables are not.

    Raises:
        InvalidArgumentError: If ``err`` is not an error object or is None.
    """
    not_keyed = isinstance(err, (Sequence, Set)) and not isinstance(err, Mapping)
    if isinstance(err, _PRIMITIVES) or callable(err) or not_keyed:
        raise InvalidArgumentError('The argument "err" must be an object.')
    if err is None:
        raise InvalidArgumentError('The argument "err" cannot be null.')


def read_field(err: Any, name: str) -> Any:
    """Read a field from an error given as a mapping or as an object."""
    if isinstance(err, Mapping):
        return err.get(name)
    return getattr(err, name, None)


def _name_tags(err: Any) -> set[str]:
    tags = set()
    for field_name in ("kind", "name"):
        value = read_field(err, field_name)
        if isinstance(value, Enum):
            value = value.value
        if isinstance(value, str):
            tags.add(value)
    return tags


class ErrorTranslator:
    """Classifies error values and builds their HTTP outcome.

    Rules are tried in order and the first match wins. An error matches
    a rule when it is an instance of the rule's taxonomy class or when
    its ``kind`` or ``name`` field equals the kind name. The second path
    recovers errors that lost their class, e.g. after a JSON round trip.
    The class name alone never counts, so foreign exceptions that happen
    to share a kind's name fall back to 500.
    """

    def __init__(
        self,
        rules: tuple[KindRule, ...] = KIND_RULES,
        fallback: KindRule = UNKNOWN_RULE,
        content_type: Optional[str] = None,
    ) -> None:
        """Initialize the translator.

        Args:
            rules: Ordered kind rules.
            fallback: Rule used when no kind matches.
            content_type: JSON content type for every outcome.
                Defaults to ``settings.json_content_type``.
        """
        self._rules = rules
        self._fallback = fallback
        self._content_type = content_type or settings.json_content_type

    @property
    def content_type(self) -> str:
        return self._content_type

    def classify(self, err: Any) -> KindRule:
        """Return the first rule matching ``err``, or the fallback rule."""
        tags = _name_tags(err)
        for rule in self._rules:
            kind_class = KIND_CLASSES.get(rule.kind)
            if kind_class is not None and isinstance(err, kind_class):
                return rule
            if rule.kind is not None and rule.kind.value in tags:
                return rule
        return self._fallback

    def translate(self, err: Any) -> Outcome:
        """Translate an error value into an HTTP outcome.

        Already boxed HTTP exceptions are not passed through here; they
        are classified like any other value and map to HTTP 500. Use
        ``boxed_error`` or ``reply_error`` to keep them unchanged.

        Args:
            err: The error to translate.

        Returns:
            A new Outcome. Unrecognized errors map to HTTP 500.

        Raises:
            InvalidArgumentError: If ``err`` is not an object, or is a
                credentials error whose ``data`` is not a string.
        """
        validate_error(err)
        rule = self.classify(err)

        message = read_field(err, "message")
        if not isinstance(message, str) or not message:
            message = rule.default_message

        headers = {"content-type": self._content_type}
        if rule.auth_header:
            challenge = read_field(err, "data")
            if not isinstance(challenge, str):
                raise InvalidArgumentError(
                    'No "data" property provided for specifying auth.'
                )
            headers["www-authenticate"] = challenge

        data = None
        if rule.carries_data:
            data = read_field(err, "data")
            if data is None:
                data = {}

        if rule.kind is None:
            logger.warning(
                "Unrecognized error type %s translated to HTTP %d",
                type(err).__name__,
                rule.status_code,
            )
        else:
            logger.debug(
                "Translated %s to HTTP %d", rule.kind.value, rule.status_code
            )

        return Outcome(
            status_code=rule.status_code,
            message=message,
            kind=rule.kind,
            data=data,
            has_data=rule.carries_data,
            headers=headers,
        )


_default_translator = ErrorTranslator()


def translate(err: Any) -> Outcome:
    """Translate ``err`` with the default rule table."""
    return _default_translator.translate(err)
