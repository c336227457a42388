"""
Rubric parser mixin for JulietScript.

Parses rubric declarations: weighted criteria with optional meaning text
and an ordered tiebreaker list.

DSL Syntax:

    rubric ShipRubric {
      criterion "Correctness" points 5 means "Tests pass.";
      criterion "Clarity" points 2;
      tiebreakers ["Correctness", "Clarity"];
    }
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..lexer import Token, TokenType
from .base import SymbolKind, is_positive_integer


@dataclass
class RubricBody:
    """Criterion labels declared in one rubric block and its tiebreaker references."""

    criteria: set[str] = field(default_factory=set)
    tiebreakers: list[Token] = field(default_factory=list)


class RubricParserMixin:
    """Parser mixin for rubric blocks."""

    if TYPE_CHECKING:
        expect: Any
        check: Any
        match: Any
        match_keyword: Any
        is_at_end: Any
        expect_identifier: Any
        expect_keyword: Any
        expect_string_literal: Any
        synchronize_in_block: Any
        synchronize_top_level: Any
        register_definition: Any
        report_current: Any
        warn: Any

    def parse_rubric(self) -> None:
        """
        Parse a rubric declaration (keyword already consumed).

        Grammar:
            rubric IDENTIFIER LBRACE (criterion | tiebreakers)* RBRACE

        Tiebreakers are resolved once the block is closed, so they may name
        criteria declared after them within the same block.
        """
        name = self.expect_identifier("Expected rubric name.")
        if name is None:
            self.synchronize_top_level()
            return
        self.register_definition(SymbolKind.RUBRIC, name)

        self.expect(TokenType.LBRACE, "Expected '{' after rubric name.")
        body = RubricBody()

        while not self.check(TokenType.RBRACE) and not self.is_at_end():
            if self.match_keyword("criterion"):
                self._parse_criterion(body)
            elif self.match_keyword("tiebreakers"):
                self._parse_tiebreakers(body)
            else:
                self.report_current("Expected 'criterion' or 'tiebreakers' inside rubric block.")
                self.synchronize_in_block()

        self.expect(TokenType.RBRACE, "Expected '}' to close rubric block.")

        for tiebreaker in body.tiebreakers:
            if tiebreaker.value not in body.criteria:
                self.warn(
                    tiebreaker,
                    f"Tiebreaker '{tiebreaker.value}' does not match any declared rubric criterion.",
                )

    def _parse_criterion(self, body: RubricBody) -> None:
        """
        Grammar:
            criterion STRING points NUMBER (means STRING)? SEMICOLON
        """
        label = self.expect_string_literal("Expected criterion name string.")
        if label is not None:
            body.criteria.add(label.value)

        self.expect_keyword("points", "Expected 'points' after criterion label.")
        points = self.expect(TokenType.NUMBER, "Expected integer points value.")
        if points is not None and not is_positive_integer(points.value):
            self.warn(points, "Criterion points should be a positive integer.")

        if self.match_keyword("means"):
            meaning = self.expect_string_literal("Expected criterion meaning string after 'means'.")
            if meaning is not None and not meaning.value.strip():
                self.warn(meaning, "Criterion meaning should not be empty.")

        self.expect(TokenType.SEMICOLON, "Expected ';' after criterion definition.")

    def _parse_tiebreakers(self, body: RubricBody) -> None:
        """
        Grammar:
            tiebreakers LBRACKET (STRING (COMMA STRING)*)? RBRACKET SEMICOLON
        """
        self.expect(TokenType.LBRACKET, "Expected '[' after tiebreakers.")
        if not self.check(TokenType.RBRACKET):
            while True:
                label = self.expect_string_literal("Expected criterion name in tiebreakers list.")
                if label is not None:
                    body.tiebreakers.append(label)
                if not self.match(TokenType.COMMA):
                    break
        self.expect(TokenType.RBRACKET, "Expected ']' after tiebreakers list.")
        self.expect(TokenType.SEMICOLON, "Expected ';' after tiebreakers statement.")
