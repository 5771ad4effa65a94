"""Prompts de terminal baseados em ``input()``/``print``.

As funções de entrada e saída são injetáveis para testes.
"""

from __future__ import annotations

import getpass
import re
from collections.abc import Callable, Sequence

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

_YES = frozenset({"y", "yes", "s", "sim"})
_NO = frozenset({"n", "no", "nao", "não"})


class Prompt:
    """Prompts interativos: menus numerados, perguntas validadas e confirmação."""

    def __init__(
        self,
        input_fn: InputFn = input,
        output: OutputFn = print,
        secret_fn: InputFn = getpass.getpass,
    ) -> None:
        self._input = input_fn
        self._output = output
        self._secret = secret_fn

    def say(self, text: str = "") -> None:
        self._output(text)

    def header(self, title: str) -> None:
        self._output(f"=== {title} ===")
        self._output("")

    def select(self, question: str, choices: Sequence[tuple[str, str]]) -> str:
        """Menu numerado; devolve a chave da opção escolhida.

        Args:
            question: Título do menu
            choices: Pares ``(rótulo, chave)`` na ordem de exibição
        """
        if not choices:
            raise ValueError("choices must not be empty")
        while True:
            self._output(question)
            for index, (label, _) in enumerate(choices, start=1):
                self._output(f"  {index}) {label}")
            answer = self._input("> ").strip()
            if answer.isdigit() and 1 <= int(answer) <= len(choices):
                return choices[int(answer) - 1][1]
            self._output(f"Choose a number between 1 and {len(choices)}")

    def ask(
        self,
        question: str,
        *,
        required: bool = False,
        default: str | None = None,
        pattern: str | None = None,
        error: str = "Invalid value",
    ) -> str | None:
        """Pergunta livre. Resposta vazia usa ``default``; opcionais vazios viram None."""
        return self._read(self._input, question, required, default, pattern, error)

    def mask(
        self,
        question: str,
        *,
        required: bool = True,
        pattern: str | None = None,
        error: str = "Invalid value",
    ) -> str | None:
        """Como ``ask``, sem eco (tokens)."""
        return self._read(self._secret, question, required, None, pattern, error)

    def ask_float(self, question: str) -> float:
        while True:
            answer = self.ask(question, required=True)
            try:
                return float(answer or "")
            except ValueError:
                self._output("Enter a number (e.g. -23.5505)")

    def yes(self, question: str, default: bool = False) -> bool:
        hint = "Y/n" if default else "y/N"
        while True:
            answer = self._input(f"{question} ({hint}) ").strip().lower()
            if not answer:
                return default
            if answer in _YES:
                return True
            if answer in _NO:
                return False
            self._output("Answer y or n")

    def keypress(self, message: str = "Press Enter to continue...") -> None:
        self._input(message)

    def _read(
        self,
        reader: InputFn,
        question: str,
        required: bool,
        default: str | None,
        pattern: str | None,
        error: str,
    ) -> str | None:
        suffix = f" [{default}]" if default else ""
        while True:
            answer = reader(f"{question}{suffix} ").strip()
            if not answer and default:
                answer = default
            if not answer:
                if not required:
                    return None
                self._output("Value is required")
                continue
            if pattern and not re.fullmatch(pattern, answer):
                self._output(error)
                continue
            return answer
