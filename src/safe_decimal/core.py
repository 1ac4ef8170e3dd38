"""
core.py — Domain Primitive per quantità decimali a virgola fissa

================================================================================
DESIGN PRINCIPLES
================================================================================

1. RAPPRESENTAZIONE INTERNA
   Un solo intero non negativo (la "magnitudine") = integral * 10^6 + fractional.
   Mai floating point internamente.

2. PRECISIONE FISSA
   Sei cifre decimali, parte intera < 1_000_000_000.
   Sono costanti di dominio, non parametri runtime.

3. IMMUTABILITA
   Frozen dataclass. Ogni operazione restituisce nuova istanza.
   Nessun side effect, safe per concorrenza.

4. NESSUN WRAPAROUND
   Ogni operazione che uscirebbe dal range (sopra MAX_VAL o sotto zero)
   solleva DecimalOverflowError. Mai troncamenti silenziosi del range.

5. TRONCAMENTO ESPLICITO
   Moltiplicazione e divisione troncano il resto sotto la scala (verso zero).
   Nessuna modalità di arrotondamento configurabile.

6. FORMA CANONICA
   str() produce la forma minima (niente zeri finali, niente punto se la
   parte frazionaria è zero). parse(str(v)) == v per ogni valore.

================================================================================
JSON
================================================================================

Asimmetria VOLUTA:
- in ingresso si accetta solo una stringa JSON ("123.45")
- in uscita si emette un numero JSON nudo (123.45)

Non è un'incoerenza da "sistemare": i consumer leggono numeri, ma i
produttori devono passare stringhe per non perdere precisione lungo la strada.

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, ClassVar
import json
import logging

from .errors import (
    DecimalOverflowError,
    DeserializationError,
    DivisionByZeroError,
    ParseIntError,
    SafeDecimalError,
    UnexpectedFormatError,
)


logger = logging.getLogger(__name__)


def _overflow(message: str, *args: Any) -> DecimalOverflowError:
    logger.debug(message, *args)
    return DecimalOverflowError()


def _check_int(name: str, value: Any) -> None:
    # bool è sottoclasse di int, ma True non è una quantità
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(
            f"{name} deve essere int, non {type(value).__name__}"
        )


def _check_digits(text: str) -> None:
    if not text:
        raise ParseIntError(ParseIntError.EMPTY)
    # isdigit() da solo accetta anche cifre unicode ("٣", "²")
    if not (text.isascii() and text.isdigit()):
        raise ParseIntError(ParseIntError.INVALID_DIGIT)


# ==============================================================================
# SAFE DECIMAL
# ==============================================================================

@dataclass(frozen=True, slots=True, order=False)
class SafeDecimal:
    """
    Quantità non negativa con esattamente 6 cifre decimali.

    INVARIANTI:
    1. _magnitude è sempre int, 0 <= _magnitude <= MAX_VAL
    2. Nessuna operazione restituisce un valore fuori range (solleva invece)
    3. parse(str(v)) == v

    USAGE:
        price = SafeDecimal.parse("19.99")
        qty = SafeDecimal.from_int(3)
        total = price * qty            # SafeDecimal('59.97')

    ERRORI:
        Le operazioni aritmetiche sollevano DecimalOverflowError invece di
        restituire un valore fuori range. Divisione per zero solleva
        DivisionByZeroError.
    """
    _magnitude: int

    MAX: ClassVar[int] = 1_000_000_000
    DECIMALS: ClassVar[int] = 6
    SCALE: ClassVar[int] = 10 ** 6
    MAX_VAL: ClassVar[int] = MAX * SCALE - 1

    # Limite del parser della parte intera (intero senza segno a 32 bit).
    # Valori tra MAX e U32_MAX sono sintatticamente validi ma vanno in overflow.
    U32_MAX: ClassVar[int] = 2 ** 32 - 1

    def __post_init__(self) -> None:
        # Anche SafeDecimal(n) diretto deve rispettare l'invariante 1
        _check_int("magnitude", self._magnitude)
        if not 0 <= self._magnitude <= self.MAX_VAL:
            raise _overflow("SafeDecimal overflow in SafeDecimal(%d)", self._magnitude)

    # -------------------------------------------------------------------------
    # Costruttori
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, integral: int, fractional: int) -> SafeDecimal:
        """
        Costruttore da parte intera e parte frazionaria (in milionesimi).

        SafeDecimal.new(123, 456789) == SafeDecimal.parse("123.456789")

        Raises:
            DecimalOverflowError: se integral >= 10^9, fractional >= 10^6
                o uno dei due è negativo
            TypeError: se uno dei due non è int
        """
        _check_int("integral", integral)
        _check_int("fractional", fractional)
        if not 0 <= integral < cls.MAX or not 0 <= fractional < cls.SCALE:
            raise _overflow("SafeDecimal overflow in new(%d, %d)", integral, fractional)
        return cls(integral * cls.SCALE + fractional)

    @classmethod
    def from_int(cls, value: int) -> SafeDecimal:
        """
        Conversione da intero (parte frazionaria 0).

        Accetta interi di qualsiasi ampiezza, ma solo fino a 999_999_999:
        oltre è overflow, anche se l'intero di partenza è "valido".
        """
        _check_int("value", value)
        if not 0 <= value < cls.MAX:
            raise _overflow("SafeDecimal overflow in from_int(%d)", value)
        return cls.new(value, 0)

    @classmethod
    def from_magnitude(cls, magnitude: int) -> SafeDecimal:
        """
        Costruttore dalla magnitudine grezza (integral * 10^6 + fractional).
        Nessuna conversione, utile per persistenza.

        Raises:
            DecimalOverflowError: se magnitude è fuori da 0..MAX_VAL
        """
        return cls(magnitude)

    @classmethod
    def zero(cls) -> SafeDecimal:
        """Zero. Utile come valore iniziale per accumulare somme."""
        return cls(0)

    # -------------------------------------------------------------------------
    # Parsing
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> SafeDecimal:
        """
        Parsing da testo "<cifre>" o "<cifre>.<cifre>".

        La parte frazionaria viene normalizzata a 6 cifre:
            "5"      -> 500000
            "500000" -> 500000
            "000"    -> 0
        Più di 6 cifre significative (dopo aver tolto gli zeri finali) non
        sono rappresentabili: DecimalOverflowError.

        Raises:
            ParseIntError: componente vuota, con caratteri non cifra
                (segni e spazi inclusi) o parte intera oltre U32_MAX
            UnexpectedFormatError: più di un punto decimale
            DecimalOverflowError: valore fuori range
            TypeError: se text non è str
        """
        if not isinstance(text, str):
            raise TypeError(
                f"SafeDecimal.parse richiede str, non {type(text).__name__}"
            )

        parts = text.split(".")
        integral = cls._parse_integral(parts[0])
        fractional = cls._parse_fractional(parts[1]) if len(parts) > 1 else 0
        if len(parts) > 2:
            raise UnexpectedFormatError()

        return cls.new(integral, fractional)

    # Alias con il nome della conversione standard da stringa
    from_str = parse

    @classmethod
    def _parse_integral(cls, text: str) -> int:
        _check_digits(text)
        # int() rifiuta stringhe troppo lunghe: il limite va verificato prima
        significant = text.lstrip("0") or "0"
        if len(significant) > len(str(cls.U32_MAX)) or int(significant) > cls.U32_MAX:
            raise ParseIntError(ParseIntError.POS_OVERFLOW)
        return int(significant)

    @classmethod
    def _parse_fractional(cls, text: str) -> int:
        _check_digits(text)
        significant = text.rstrip("0")
        if len(significant) > cls.DECIMALS:
            raise _overflow("SafeDecimal overflow in parse: %d fractional digits", len(significant))
        return int(significant.ljust(cls.DECIMALS, "0"))

    # -------------------------------------------------------------------------
    # Operazioni aritmetiche
    # -------------------------------------------------------------------------

    def _check_operand(self, other: object, symbol: str) -> SafeDecimal:
        if not isinstance(other, SafeDecimal):
            raise TypeError(
                f"Operazione non permessa: SafeDecimal {symbol} {type(other).__name__}. "
                f"Usa SafeDecimal.from_int() o SafeDecimal.parse() per convertire."
            )
        return other

    def __add__(self, other: SafeDecimal) -> SafeDecimal:
        other = self._check_operand(other, "+")
        result = self._magnitude + other._magnitude
        if result > self.MAX_VAL:
            raise _overflow("SafeDecimal overflow in %s + %s", self, other)
        return SafeDecimal(result)

    def __sub__(self, other: SafeDecimal) -> SafeDecimal:
        """Sottrazione esatta. Un risultato negativo è overflow (nessun segno)."""
        other = self._check_operand(other, "-")
        if other._magnitude > self._magnitude:
            raise _overflow("SafeDecimal overflow in %s - %s", self, other)
        return SafeDecimal(self._magnitude - other._magnitude)

    def __mul__(self, other: SafeDecimal) -> SafeDecimal:
        """
        (a * b) / SCALE, troncando il resto sotto la scala.

        Esempio: 2.5 * 3 == 7.5; 0.000001 * 0.5 == 0
        """
        other = self._check_operand(other, "*")
        # int Python è a precisione arbitraria: il prodotto intermedio
        # (fino a ~10^30) non può andare in overflow prima del controllo
        result = self._magnitude * other._magnitude // self.SCALE
        if result > self.MAX_VAL:
            raise _overflow("SafeDecimal overflow in %s * %s", self, other)
        return SafeDecimal(result)

    def __truediv__(self, other: SafeDecimal) -> SafeDecimal:
        """
        (a * SCALE) / b, troncando verso zero.

        Raises:
            DivisionByZeroError: se other è zero
            DecimalOverflowError: se il quoziente supera MAX_VAL
        """
        other = self._check_operand(other, "/")
        if other._magnitude == 0:
            logger.debug("SafeDecimal division by zero: %s / 0", self)
            raise DivisionByZeroError()
        result = self._magnitude * self.SCALE // other._magnitude
        if result > self.MAX_VAL:
            raise _overflow("SafeDecimal overflow in %s / %s", self, other)
        return SafeDecimal(result)

    # -------------------------------------------------------------------------
    # Comparazione
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeDecimal):
            return self._magnitude == other._magnitude
        return NotImplemented

    def __lt__(self, other: SafeDecimal) -> bool:
        return self._magnitude < self._check_comparable(other)._magnitude

    def __le__(self, other: SafeDecimal) -> bool:
        return self._magnitude <= self._check_comparable(other)._magnitude

    def __gt__(self, other: SafeDecimal) -> bool:
        return self._magnitude > self._check_comparable(other)._magnitude

    def __ge__(self, other: SafeDecimal) -> bool:
        return self._magnitude >= self._check_comparable(other)._magnitude

    def _check_comparable(self, other: object) -> SafeDecimal:
        if not isinstance(other, SafeDecimal):
            raise TypeError(f"Impossibile comparare SafeDecimal con {type(other).__name__}")
        return other

    def __hash__(self) -> int:
        return hash(self._magnitude)

    # -------------------------------------------------------------------------
    # Proprietà e output
    # -------------------------------------------------------------------------

    @property
    def integral(self) -> int:
        """Parte intera."""
        return self._magnitude // self.SCALE

    @property
    def fractional(self) -> int:
        """Parte frazionaria in milionesimi (0-999999)."""
        return self._magnitude % self.SCALE

    @property
    def magnitude(self) -> int:
        """Magnitudine grezza (integral * 10^6 + fractional). Per persistenza."""
        return self._magnitude

    def is_zero(self) -> bool:
        return self._magnitude == 0

    def __str__(self) -> str:
        integral = self.integral
        fractional = self.fractional
        if fractional == 0:
            return str(integral)
        digits = f"{fractional:0{self.DECIMALS}d}".rstrip("0")
        return f"{integral}.{digits}"

    def __repr__(self) -> str:
        return f"SafeDecimal('{self}')"

    # -------------------------------------------------------------------------
    # Serializzazione JSON
    # -------------------------------------------------------------------------

    def to_json(self) -> int | float:
        """
        Valore JSON: la forma canonica riletta come numero JSON (int o float).

        Lossless: al massimo 15 cifre significative, che un double IEEE 754
        rappresenta e ristampa esattamente. Il testo può cambiare notazione
        ("0.000001" -> 1e-06), il valore no.
        """
        return json.loads(str(self))

    @classmethod
    def from_json(cls, value: Any) -> SafeDecimal:
        """
        Deserializza da valore JSON già decodificato.

        Accetta SOLO stringhe ("123.45"). Un numero JSON viene rifiutato,
        anche se to_json() produce numeri (asimmetria voluta).

        Raises:
            DeserializationError: tipo diverso da str o testo non valido
        """
        if not isinstance(value, str):
            logger.debug("SafeDecimal rejected JSON value of type %s", type(value).__name__)
            raise DeserializationError(
                f"invalid type: {_json_type_name(value)}, expected a string"
            )
        try:
            return cls.parse(value)
        except SafeDecimalError as exc:
            logger.debug("SafeDecimal rejected JSON string %r: %s", value, exc)
            raise DeserializationError(str(exc)) from exc


def _json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return f"boolean `{str(value).lower()}`"
    if isinstance(value, int):
        return f"integer `{value}`"
    if isinstance(value, float):
        return f"floating point `{value}`"
    if isinstance(value, list):
        return "sequence"
    if isinstance(value, dict):
        return "map"
    return type(value).__name__
