"""Rich Console factory and theme for sixtydays output.

Consoles render into a StringIO buffer so formatting stays a pure
``ServiceResult -> str`` function. Outside a terminal (tests, pipes)
Rich drops the color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SIXTY_THEME = Theme(
    {
        "sd.ok": "bold green",
        "sd.error": "bold red",
        "sd.warning": "bold yellow",
        "sd.op": "bold cyan",
        "sd.key": "dim",
        "sd.id": "bold blue",
        "sd.title": "bold",
        "sd.money": "magenta",
        "sd.fizz": "green",
        "sd.buzz": "blue",
        "sd.fizzbuzz": "bold magenta",
    }
)

_ANSWER_STYLES: dict[str, str] = {
    "Fizz": "sd.fizz",
    "Buzz": "sd.buzz",
    "FizzBuzz": "sd.fizzbuzz",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=SIXTY_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_answer(answer: str) -> str:
    """Rich style for a FizzBuzz answer; plain numbers get no style."""
    return _ANSWER_STYLES.get(answer, "")
