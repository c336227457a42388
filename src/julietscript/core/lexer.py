"""
Lexer/Tokenizer for JulietScript.

Converts raw source text into a stream of tokens with zero-based source
ranges. Whitespace and ``#`` line comments are discarded. Malformed input
never raises: it produces lexical diagnostics plus a best-effort token
stream that always ends with a single EOF token.
"""

from dataclasses import dataclass
from enum import Enum

from .errors import Diagnostic, Position, Range, Severity


class TokenType(Enum):
    """Token types in JulietScript."""

    # Literals
    IDENTIFIER = "identifier"
    NUMBER = "number"
    STRING = "string"
    BLOCK_STRING = "blockString"

    # Punctuation
    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"
    LPAREN = "("
    RPAREN = ")"
    EQUALS = "="
    SEMICOLON = ";"
    COMMA = ","
    DOT = "."

    # Special
    EOF = "eof"


PUNCTUATION = frozenset("{}[]()=;,.")

STRING_TYPES = (TokenType.STRING, TokenType.BLOCK_STRING)


@dataclass
class Token:
    """
    A single token in the source.

    Attributes:
        type: Type of token
        value: Literal text (string contents without quotes)
        start: Position of the first character
        end: Position just past the last character
    """

    type: TokenType
    value: str
    start: Position
    end: Position

    @property
    def range(self) -> Range:
        return Range(start=self.start, end=self.end)

    def __repr__(self) -> str:
        return f"Token({self.type.value}, {self.value!r}, {self.start})"


def _is_letter(ch: str) -> bool:
    return "A" <= ch <= "Z" or "a" <= ch <= "z"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_identifier_part(ch: str) -> bool:
    return _is_letter(ch) or _is_digit(ch) or ch == "_"


class Lexer:
    """
    Lexer for JulietScript.

    Usage:
        lexer = Lexer(source_text)
        tokens, diagnostics = lexer.tokenize()
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 0
        self.character = 0
        self.tokens: list[Token] = []
        self.diagnostics: list[Diagnostic] = []

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def current_char(self) -> str | None:
        """Get current character or None if at end."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def peek_char(self, offset: int = 1) -> str | None:
        """Peek ahead at character."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return None
        return self.text[pos]

    def advance(self) -> None:
        """Move to next character, updating line/character."""
        if self.pos >= len(self.text):
            return
        ch = self.text[self.pos]
        self.pos += 1
        if ch == "\n":
            self.line += 1
            self.character = 0
        elif ord(ch) > 0xFFFF:
            # Editors count positions in UTF-16 code units
            self.character += 2
        else:
            self.character += 1

    def position(self) -> Position:
        return Position(line=self.line, character=self.character)

    def error(self, start: Position, message: str) -> None:
        """Record a lexical error spanning from ``start`` to the current position."""
        self.diagnostics.append(
            Diagnostic(
                severity=Severity.ERROR,
                message=message,
                range=Range(start=start, end=self.position()),
            )
        )

    def add_token(self, token_type: TokenType, value: str, start: Position) -> None:
        self.tokens.append(Token(token_type, value, start, self.position()))

    def at_triple_quote(self) -> bool:
        return (
            self.current_char() == '"' and self.peek_char() == '"' and self.peek_char(2) == '"'
        )

    def skip_trivia(self) -> None:
        """Skip whitespace and comments (from # to end of line)."""
        while not self.at_end():
            ch = self.current_char()
            if ch in (" ", "\t", "\r", "\n"):
                self.advance()
            elif ch == "#":
                while not self.at_end() and self.current_char() != "\n":
                    self.advance()
            else:
                break

    def read_identifier(self) -> None:
        start = self.position()
        start_pos = self.pos
        self.advance()
        while not self.at_end() and _is_identifier_part(self.text[self.pos]):
            self.advance()
        self.add_token(TokenType.IDENTIFIER, self.text[start_pos : self.pos], start)

    def read_number(self) -> None:
        start = self.position()
        start_pos = self.pos
        while not self.at_end() and _is_digit(self.text[self.pos]):
            self.advance()
        self.add_token(TokenType.NUMBER, self.text[start_pos : self.pos], start)

    def read_block_string(self) -> None:
        """Read a triple-quoted string. No escape processing is done."""
        start = self.position()
        for _ in range(3):
            self.advance()
        content_start = self.pos

        while not self.at_end():
            if self.at_triple_quote():
                value = self.text[content_start : self.pos]
                for _ in range(3):
                    self.advance()
                self.add_token(TokenType.BLOCK_STRING, value, start)
                return
            self.advance()

        self.error(start, "Unterminated block string.")
        self.add_token(TokenType.BLOCK_STRING, self.text[content_start:], start)

    def read_string(self) -> None:
        """
        Read a double-quoted single-line string.

        A backslash and the character after it are kept verbatim. A newline
        before the closing quote ends the scan; the partial string is still
        emitted so parsing can continue.
        """
        start = self.position()
        self.advance()  # skip opening quote
        content_start = self.pos

        while not self.at_end():
            ch = self.text[self.pos]
            if ch == '"':
                value = self.text[content_start : self.pos]
                self.advance()
                self.add_token(TokenType.STRING, value, start)
                return
            if ch == "\\":
                self.advance()
                self.advance()
                continue
            if ch == "\n":
                self.error(
                    start, "String literals cannot span multiple lines; use triple quotes."
                )
                break
            self.advance()

        self.error(start, "Unterminated string literal.")
        self.add_token(TokenType.STRING, self.text[content_start : self.pos], start)

    def tokenize(self) -> tuple[list[Token], list[Diagnostic]]:
        """
        Tokenize the entire source text.

        Returns:
            Tuple of (tokens ending with EOF, lexical diagnostics)
        """
        while not self.at_end():
            self.skip_trivia()
            ch = self.current_char()
            if ch is None:
                break

            if _is_letter(ch):
                self.read_identifier()

            elif _is_digit(ch):
                self.read_number()

            elif ch == '"':
                if self.at_triple_quote():
                    self.read_block_string()
                else:
                    self.read_string()

            elif ch in PUNCTUATION:
                start = self.position()
                self.advance()
                self.add_token(TokenType(ch), ch, start)

            else:
                start = self.position()
                self.advance()
                self.error(start, f"Unexpected character '{ch}'.")

        eof = self.position()
        self.tokens.append(Token(TokenType.EOF, "", eof, eof))

        return self.tokens, self.diagnostics


def tokenize(text: str) -> tuple[list[Token], list[Diagnostic]]:
    """
    Convenience function to tokenize JulietScript text.

    Args:
        text: Source text

    Returns:
        Tuple of (tokens, lexical diagnostics)
    """
    lexer = Lexer(text)
    return lexer.tokenize()
