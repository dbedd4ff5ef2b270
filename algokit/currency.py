"""Conversion between dollars, rupees, euros and pounds at fixed rates."""

from __future__ import annotations

from enum import Enum


class Currency(Enum):
    """Supported currencies, keyed by the letter used to select them."""

    DOLLAR = "a"
    RUPEES = "b"
    EURO = "c"
    POUND = "d"


_RATES: dict[Currency, dict[Currency, float]] = {
    Currency.DOLLAR: {
        Currency.DOLLAR: 1.0,
        Currency.RUPEES: 73.84,
        Currency.EURO: 0.85,
        Currency.POUND: 0.72,
    },
    Currency.RUPEES: {
        Currency.DOLLAR: 0.01,
        Currency.RUPEES: 1.0,
        Currency.EURO: 0.01,
        Currency.POUND: 0.009,
    },
    Currency.EURO: {
        Currency.DOLLAR: 1.16,
        Currency.RUPEES: 86.37,
        Currency.EURO: 1.0,
        Currency.POUND: 0.85,
    },
    Currency.POUND: {
        Currency.DOLLAR: 1.37,
        Currency.RUPEES: 101.20,
        Currency.EURO: 1.17,
        Currency.POUND: 1.0,
    },
}

_WRONG_VALUE = "you have entered wrong value, please type again"


def _as_currency(value: Currency | str) -> Currency:
    if isinstance(value, Currency):
        return value
    try:
        return Currency(value.lower())
    except (ValueError, AttributeError):
        raise ValueError(f"unknown currency: {value!r}") from None


def convert(amount: float, source: Currency | str, target: Currency | str) -> float:
    """Convert ``amount`` of ``source`` into ``target``.

    Currencies may be given as members of :class:`Currency` or as their letters.
    """
    return amount * _RATES[_as_currency(source)][_as_currency(target)]


def _read_char(prompt: str = "") -> str:
    """Read the first non-blank character of the next non-blank line."""
    while True:
        line = input(prompt).strip()
        if line:
            return line[0]


def _read_amount(prompt: str) -> float:
    while True:
        line = input(prompt).strip()
        if not line:
            continue
        try:
            return float(line.split()[0])
        except ValueError:
            print(_WRONG_VALUE)


def _run_conversion() -> float:
    source_codes = {currency.value: currency for currency in Currency}
    while True:
        code = _read_char("enter the curency name : ")
        print()
        amount = _read_amount("enter the value for that currency : ")
        print()
        source = source_codes.get(code)
        if source is not None:
            break
        print(_WRONG_VALUE)
    while True:
        code = _read_char("enter currency name in which it needs to be converted :")
        print()
        try:
            return convert(amount, source, code)
        except ValueError:
            print(_WRONG_VALUE)


_BANNER = """\
          Welcome To Currency Convertor Application            


          Please Follow The Given Instructiions               

This Convertor Will Work For Dollar,Rupees,Euro,Pound
Give the following character to get the required currency
DOLLAR : a
RUPEES : b
EURO : c
POUND : d

Enter The Currency To Be Converted
Enter The Value For That Currency
Select The Currency In Which The Value Needs To Be Converted

             Please press s to start      """


def main(argv: list[str] | None = None) -> int:
    """Run the interactive converter on standard input and output."""
    try:
        while True:
            print(_BANNER)
            while _read_char().lower() != "s":
                print("You did not pressed s, press s to start")
            result = _run_conversion()
            print(f"The Result Is : {result:g}\n")
            print("do you want to use the application again ? press y for yes or n for no")
            while True:
                answer = _read_char().lower()
                if answer in ("y", "n"):
                    break
                print("You have entered wrong value , please type again")
            if answer == "n":
                print("Thank You For Using The Application")
                return 0
    except EOFError:
        return 1