"""
codec.py — Interoperabilità JSON per SafeDecimal

Formato sul filo:
    uscita:   numero JSON nudo     {"amount": 123.45}
    ingresso: stringa JSON         {"amount": "123.45"}

Esempio:
    >>> from safe_decimal import SafeDecimal, dumps, loads
    >>> dumps({"amount": SafeDecimal.parse("123.45")})
    '{"amount": 123.45}'
    >>> loads('"123.45"')
    SafeDecimal('123.45')
"""

from __future__ import annotations
from typing import Any
import json
import logging

from .core import SafeDecimal
from .errors import DeserializationError


logger = logging.getLogger(__name__)


def to_json_value(value: SafeDecimal) -> int | float:
    """Valore JSON numerico di un SafeDecimal (vedi SafeDecimal.to_json)."""
    if not isinstance(value, SafeDecimal):
        raise TypeError(f"Atteso SafeDecimal, non {type(value).__name__}")
    return value.to_json()


def from_json_value(value: Any) -> SafeDecimal:
    """SafeDecimal da un valore JSON già decodificato. Solo stringhe."""
    return SafeDecimal.from_json(value)


class SafeDecimalEncoder(json.JSONEncoder):
    """
    JSON encoder che emette SafeDecimal come numero nudo.

    Example:
        >>> json.dumps({"fee": SafeDecimal.new(0, 250000)}, cls=SafeDecimalEncoder)
        '{"fee": 0.25}'
    """

    def default(self, o: Any) -> Any:
        if isinstance(o, SafeDecimal):
            return o.to_json()
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    """json.dumps con SafeDecimalEncoder."""
    kwargs.setdefault("cls", SafeDecimalEncoder)
    return json.dumps(obj, **kwargs)


def loads(text: str | bytes) -> SafeDecimal:
    """
    Decodifica un documento JSON che contiene una sola stringa.

    Raises:
        DeserializationError: JSON malformato, tipo diverso da stringa
            o stringa non valida
    """
    try:
        value = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.debug("Malformed JSON for SafeDecimal: %s", exc)
        raise DeserializationError(str(exc)) from exc
    return from_json_value(value)


def json_schema() -> dict[str, str]:
    """
    JSON schema del valore serializzato.

    Documenta il formato di USCITA (numero). L'ingresso accetta stringhe.
    """
    return {
        "title": "SafeDecimal",
        "type": "number",
        "format": "double",
    }
