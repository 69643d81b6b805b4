"""FizzBuzz rule (day 2)."""

from __future__ import annotations

FIZZ = "Fizz"
BUZZ = "Buzz"


def fizzbuzz(number: int) -> str:
    """Return the FizzBuzz answer for *number*.

    Examples:
        >>> [fizzbuzz(n) for n in (3, 5, 15, 7)]
        ['Fizz', 'Buzz', 'FizzBuzz', '7']
    """
    answer = ""
    if number % 3 == 0:
        answer += FIZZ
    if number % 5 == 0:
        answer += BUZZ
    return answer or str(number)
