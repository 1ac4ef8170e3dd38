#!/usr/bin/env python3
"""
demo.py — SafeDecimal in action

================================================================================
THE BUG
================================================================================

    >>> 0.1 + 0.2
    0.30000000000000004

IEEE 754 floats cannot represent most decimal fractions. For quantities
that must add up exactly (balances, fees, rates), that is a design flaw.

================================================================================
THE FIX
================================================================================

    from safe_decimal import SafeDecimal

    SafeDecimal.parse("0.1") + SafeDecimal.parse("0.2")   # SafeDecimal('0.3')

Six fixed decimals, one integer underneath, and every operation either
returns an in-range value or raises.

================================================================================
"""

import json

from safe_decimal import SafeDecimal, SafeDecimalError, dumps


def demonstrate_exact_arithmetic():
    """Addition and subtraction are exact."""
    print("=" * 60)
    print("EXACT ARITHMETIC")
    print("=" * 60)
    print()
    print(f">>> 0.1 + 0.2           -> {0.1 + 0.2}")
    total = SafeDecimal.parse("0.1") + SafeDecimal.parse("0.2")
    print(f">>> SafeDecimal 0.1+0.2 -> {total}")
    print()


def demonstrate_truncation():
    """Multiplication and division truncate below 10^-6, never round."""
    print("=" * 60)
    print("TRUNCATION")
    print("=" * 60)
    print()

    budget = SafeDecimal.from_int(2026)
    months = SafeDecimal.from_int(12)

    monthly = budget / months
    spent = monthly * months
    remainder = budget - spent

    print(f"Budget:            {budget}")
    print(f"Monthly (2026/12): {monthly}")
    print(f"Monthly * 12:      {spent}")
    print(f"Remainder:         {remainder}")
    print()
    print("The remainder is explicit: nothing is lost silently.")
    print()


def demonstrate_errors():
    """Out of range is an error, never a wrapped value."""
    print("=" * 60)
    print("ERRORS")
    print("=" * 60)
    print()

    cases = [
        (">>> 1 - 2", lambda: SafeDecimal.from_int(1) - SafeDecimal.from_int(2)),
        (">>> 999999999 * 2", lambda: SafeDecimal.from_int(999_999_999) * SafeDecimal.from_int(2)),
        (">>> 1 / 0", lambda: SafeDecimal.from_int(1) / SafeDecimal.zero()),
        (">>> parse('1.2.3')", lambda: SafeDecimal.parse("1.2.3")),
        (">>> parse('-5')", lambda: SafeDecimal.parse("-5")),
    ]
    for label, operation in cases:
        print(label)
        try:
            operation()
        except SafeDecimalError as e:
            print(f"{type(e).__name__}: {e}")
        print()


def demonstrate_json():
    """String in, number out."""
    print("=" * 60)
    print("JSON")
    print("=" * 60)
    print()

    incoming = '{"amount": "123.45"}'
    amount = SafeDecimal.from_json(json.loads(incoming)["amount"])
    print(f"Incoming:  {incoming}")
    print(f"Parsed:    {amount!r}")
    print(f"Outgoing:  {dumps({'amount': amount})}")
    print()
    print("Input must be a string; output is a bare number.")
    print()


def main():
    """Run all demonstrations."""
    demonstrate_exact_arithmetic()
    demonstrate_truncation()
    demonstrate_errors()
    demonstrate_json()


if __name__ == "__main__":
    main()
