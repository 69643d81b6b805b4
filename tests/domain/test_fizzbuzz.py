"""Tests for the FizzBuzz rule."""

import pytest

from sixtydays.domain.fizzbuzz import fizzbuzz


class TestFizzBuzz:
    @pytest.mark.parametrize("number", [3, 6, 9])
    def test_fizz(self, number: int) -> None:
        assert fizzbuzz(number) == "Fizz"

    @pytest.mark.parametrize("number", [5, 10, 20])
    def test_buzz(self, number: int) -> None:
        assert fizzbuzz(number) == "Buzz"

    @pytest.mark.parametrize("number", [15, 30, 60])
    def test_fizzbuzz(self, number: int) -> None:
        assert fizzbuzz(number) == "FizzBuzz"

    @pytest.mark.parametrize("number", [1, 2, 7, 98])
    def test_plain_numbers(self, number: int) -> None:
        assert fizzbuzz(number) == str(number)

    def test_zero_is_divisible_by_everything(self) -> None:
        assert fizzbuzz(0) == "FizzBuzz"

    def test_negative(self) -> None:
        assert fizzbuzz(-3) == "Fizz"
        assert fizzbuzz(-7) == "-7"
