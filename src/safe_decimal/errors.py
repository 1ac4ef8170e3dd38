"""
errors.py — Gerarchia delle eccezioni di SafeDecimal

Tutti gli errori di valore derivano da SafeDecimalError (sottoclasse di
ValueError). Overflow e divisione per zero estendono anche i builtin
corrispondenti, così il chiamante può intercettarli in modo generico.

Gli errori di tipo (es. SafeDecimal + float) restano TypeError: sono
errori di programmazione, non di dominio.
"""

from __future__ import annotations


class SafeDecimalError(ValueError):
    """Radice di tutti gli errori di valore di SafeDecimal."""


class DecimalOverflowError(SafeDecimalError, OverflowError):
    """
    Il valore non è rappresentabile.

    Sollevato quando:
    - integral >= 1_000_000_000 o fractional >= 1_000_000
    - il risultato di un'operazione supera MAX_VAL
    - una sottrazione darebbe un risultato negativo
    """

    def __init__(self, message: str = "Value exceeds max safe decimal"):
        super().__init__(message)


class UnexpectedFormatError(SafeDecimalError):
    """Testo che non rispetta la grammatica integer[.fraction]."""

    def __init__(self, message: str = "Unexpected decimal format"):
        super().__init__(message)


class ParseIntError(SafeDecimalError):
    """
    Componente intera o frazionaria non valida.

    Il messaggio identifica la causa precisa (stringa vuota, cifra non
    valida, numero troppo grande) per la diagnostica.
    """

    EMPTY = "cannot parse integer from empty string"
    INVALID_DIGIT = "invalid digit found in string"
    POS_OVERFLOW = "number too large to fit in target type"


class DivisionByZeroError(SafeDecimalError, ZeroDivisionError):
    """Divisione per un SafeDecimal di magnitudine zero."""

    def __init__(self, message: str = "Division by zero safe decimal"):
        super().__init__(message)


class DeserializationError(SafeDecimalError):
    """
    Input JSON non accettato.

    Porta il messaggio dell'errore sottostante; l'errore originale è
    disponibile come __cause__.
    """
