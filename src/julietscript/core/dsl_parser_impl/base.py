"""
Base parser class for JulietScript.

Provides the token cursor, expectation helpers, error recovery and the
symbol tables shared by all statement mixins. Expectation failures never
raise: they record a diagnostic against the current token and return None so
the caller can keep going.
"""

from enum import Enum

from ..errors import Diagnostic, Severity
from ..lexer import STRING_TYPES, Token, TokenType

TOP_LEVEL_KEYWORDS = frozenset(
    {"juliet", "policy", "rubric", "cadence", "create", "extend", "halt"}
)


def is_positive_integer(digits: str) -> bool:
    """Check a NUMBER literal is above zero without converting it to int."""
    return digits.strip("0") != ""


class SymbolKind(Enum):
    """Name-spaces for top-level definitions."""

    POLICY = "policy"
    RUBRIC = "rubric"
    CADENCE = "cadence"
    ARTIFACT = "artifact"


class BaseParser:
    """
    Base parser class with token manipulation utilities.

    This class provides the foundation for recursive descent parsing,
    including token navigation, matching, synchronization and diagnostic
    recording. Symbol tables are filled left-to-right as statements are
    parsed, so a reference only resolves against names defined before it.
    """

    def __init__(self, tokens: list[Token], diagnostics: list[Diagnostic] | None = None):
        """
        Initialize parser.

        Args:
            tokens: List of tokens from lexer, terminated by EOF
            diagnostics: Diagnostics already produced by the lexer
        """
        self.tokens = tokens
        self.pos = 0
        self.diagnostics: list[Diagnostic] = list(diagnostics or [])
        self.juliet_declared = False
        self.symbols: dict[SymbolKind, dict[str, Token]] = {kind: {} for kind in SymbolKind}

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    def current_token(self) -> Token:
        """Get current token."""
        if self.pos >= len(self.tokens):
            return self.tokens[-1]  # Return EOF
        return self.tokens[self.pos]

    def peek_token(self, offset: int = 1) -> Token:
        """Peek ahead at token."""
        pos = self.pos + offset
        if pos >= len(self.tokens):
            return self.tokens[-1]  # Return EOF
        return self.tokens[pos]

    def previous_token(self) -> Token:
        """Get the most recently consumed token."""
        return self.tokens[max(self.pos - 1, 0)]

    def is_at_end(self) -> bool:
        return self.current_token().type == TokenType.EOF

    def advance(self) -> Token:
        """Consume and return current token."""
        token = self.current_token()
        if token.type != TokenType.EOF:
            self.pos += 1
        return token

    def check(self, *token_types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self.current_token().type in token_types

    def check_next(self, token_type: TokenType) -> bool:
        """Check the token after the current one."""
        return self.peek_token().type == token_type

    def match(self, token_type: TokenType) -> bool:
        """Consume the current token if it has the given type."""
        if self.check(token_type):
            self.advance()
            return True
        return False

    def check_keyword(self, keyword: str) -> bool:
        token = self.current_token()
        return token.type == TokenType.IDENTIFIER and token.value == keyword

    def match_keyword(self, keyword: str) -> bool:
        """Consume the current token if it is the identifier ``keyword``."""
        if self.check_keyword(keyword):
            self.advance()
            return True
        return False

    # ------------------------------------------------------------------
    # Expectations
    # ------------------------------------------------------------------

    def expect(self, token_type: TokenType, message: str) -> Token | None:
        """Consume a token of the given type, or report ``message``."""
        if self.check(token_type):
            return self.advance()
        self.report_current(message)
        return None

    def expect_identifier(self, message: str) -> Token | None:
        return self.expect(TokenType.IDENTIFIER, message)

    def expect_keyword(self, keyword: str, message: str) -> Token | None:
        if self.match_keyword(keyword):
            return self.previous_token()
        self.report_current(message)
        return None

    def expect_string_literal(self, message: str) -> Token | None:
        """Accept a quoted string or a triple-quoted block string."""
        if self.check(*STRING_TYPES):
            return self.advance()
        self.report_current(message)
        return None

    def expect_value(self, message: str) -> Token | None:
        """Accept any scalar: identifier, string, block string or number."""
        if self.check(
            TokenType.IDENTIFIER, TokenType.STRING, TokenType.BLOCK_STRING, TokenType.NUMBER
        ):
            return self.advance()
        self.report_current(message)
        return None

    def expect_engine_value(self) -> Token | None:
        if self.check(TokenType.IDENTIFIER, TokenType.STRING):
            return self.advance()
        self.report_current("Expected engine value as an identifier or quoted string.")
        return None

    # ------------------------------------------------------------------
    # Error recovery
    # ------------------------------------------------------------------

    def synchronize_top_level(self) -> None:
        """Skip to just past the next ';' or to the next top-level keyword."""
        while not self.is_at_end():
            if self.match(TokenType.SEMICOLON):
                return
            token = self.current_token()
            if token.type == TokenType.IDENTIFIER and token.value in TOP_LEVEL_KEYWORDS:
                return
            self.advance()

    def synchronize_in_block(self) -> None:
        """Skip to the next ';' (consumed) or '}' (left in place)."""
        while not self.is_at_end() and not self.check(TokenType.SEMICOLON, TokenType.RBRACE):
            self.advance()
        self.match(TokenType.SEMICOLON)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def report_token(
        self, token: Token, message: str, severity: Severity = Severity.ERROR
    ) -> None:
        self.diagnostics.append(Diagnostic(severity=severity, message=message, range=token.range))

    def report_current(self, message: str, severity: Severity = Severity.ERROR) -> None:
        self.report_token(self.current_token(), message, severity)

    def report_previous(self, message: str, severity: Severity = Severity.ERROR) -> None:
        self.report_token(self.previous_token(), message, severity)

    def warn(self, token: Token, message: str) -> None:
        self.report_token(token, message, Severity.WARNING)

    # ------------------------------------------------------------------
    # Symbol tables
    # ------------------------------------------------------------------

    def register_definition(self, kind: SymbolKind, token: Token) -> None:
        """
        Record a definition. Repeats warn; the first definition is kept.
        """
        table = self.symbols[kind]
        if token.value in table:
            self.warn(token, f"Duplicate {kind.value} '{token.value}'.")
            return
        table[token.value] = token

    def is_defined(self, kind: SymbolKind, name: str) -> bool:
        return name in self.symbols[kind]
