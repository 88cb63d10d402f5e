import sys

from pygments import highlight  # type: ignore
from pygments.formatters import TerminalFormatter  # type: ignore
from pygments.lexers import JsonLexer  # type: ignore

Lexer = JsonLexer()
Formatter = TerminalFormatter()


class Requester:
    def formatted_output(self, s: str) -> None:
        self.output(highlight(s, Lexer, Formatter).rstrip("\n"))

    def output(self, s: str) -> None:
        print(s)


class PlainRequester(Requester):
    def formatted_output(self, s: str) -> None:
        self.output(s)

    def output(self, s: str) -> None:
        sys.stdout.write(s + "\n")
