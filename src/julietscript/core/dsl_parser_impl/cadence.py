"""
Cadence parser mixin for JulietScript.

Parses cadence declarations: the sprint plan used to branch, score and prune
artifact variants.

DSL Syntax:

    cadence ShipLoop {
      engine = codex;
      variants = 3;
      sprints = 2;
      compare using ShipRubric;
      keep best 2;
    }
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..lexer import TokenType
from .base import SymbolKind, is_positive_integer

CADENCE_COUNT_KEYS = ("variants", "sprints")


class CadenceParserMixin:
    """Parser mixin for cadence blocks."""

    if TYPE_CHECKING:
        advance: Any
        expect: Any
        check: Any
        check_next: Any
        match_keyword: Any
        is_at_end: Any
        is_defined: Any
        expect_identifier: Any
        expect_keyword: Any
        expect_value: Any
        expect_engine_value: Any
        synchronize_in_block: Any
        synchronize_top_level: Any
        register_definition: Any
        report_current: Any
        report_token: Any
        warn: Any

    def parse_cadence(self) -> None:
        """
        Parse a cadence declaration (keyword already consumed).

        Grammar:
            cadence IDENTIFIER LBRACE
              ( compare using IDENTIFIER SEMICOLON
              | keep best NUMBER SEMICOLON
              | IDENTIFIER EQUALS value SEMICOLON )*
            RBRACE
        """
        name = self.expect_identifier("Expected cadence name.")
        if name is None:
            self.synchronize_top_level()
            return
        self.register_definition(SymbolKind.CADENCE, name)

        self.expect(TokenType.LBRACE, "Expected '{' after cadence name.")
        seen: set[str] = set()

        while not self.check(TokenType.RBRACE) and not self.is_at_end():
            if self.match_keyword("compare"):
                self._parse_compare_action()
            elif self.match_keyword("keep"):
                self._parse_keep_action()
            elif self.check(TokenType.IDENTIFIER) and self.check_next(TokenType.EQUALS):
                self._parse_cadence_assignment(seen)
            else:
                self.report_current("Expected cadence assignment or action (compare/keep).")
                self.synchronize_in_block()

        self.expect(TokenType.RBRACE, "Expected '}' to close cadence block.")

        for key in CADENCE_COUNT_KEYS:
            if key not in seen:
                self.warn(name, f"Cadence is missing required key '{key}'.")

    def _parse_compare_action(self) -> None:
        self.expect_keyword("using", "Expected 'using' after 'compare'.")
        rubric = self.expect_identifier("Expected rubric name after 'compare using'.")
        if rubric is not None and not self.is_defined(SymbolKind.RUBRIC, rubric.value):
            self.report_token(rubric, f"Unknown rubric '{rubric.value}' in cadence compare action.")
        self.expect(TokenType.SEMICOLON, "Expected ';' after compare statement.")

    def _parse_keep_action(self) -> None:
        self.expect_keyword("best", "Expected 'best' after 'keep'.")
        limit = self.expect(TokenType.NUMBER, "Expected integer keep limit after 'keep best'.")
        if limit is not None and not is_positive_integer(limit.value):
            self.report_token(limit, "'keep best' value should be greater than 0.")
        self.expect(TokenType.SEMICOLON, "Expected ';' after keep statement.")

    def _parse_cadence_assignment(self, seen: set[str]) -> None:
        key = self.advance()
        self.advance()  # '='

        if key.value == "engine":
            self.expect_engine_value()
        elif key.value in CADENCE_COUNT_KEYS:
            value = self.expect(
                TokenType.NUMBER, f"Expected an integer for cadence key '{key.value}'."
            )
            if value is not None and not is_positive_integer(value.value):
                self.report_token(value, f"Cadence '{key.value}' should be greater than 0.")
            seen.add(key.value)
        else:
            self.warn(
                key,
                f"Unknown cadence key '{key.value}'. Supported keys: engine, variants, sprints.",
            )
            self.expect_value("Expected a value after cadence assignment.")

        self.expect(TokenType.SEMICOLON, "Expected ';' after cadence assignment.")
