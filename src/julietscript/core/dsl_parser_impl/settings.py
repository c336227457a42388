"""
Settings parser mixin for JulietScript.

Parses the global ``juliet`` defaults block and ``policy`` declarations.

DSL Syntax:

    juliet {
      engine = codex;
    }

    policy FailureTriage = "Capture root cause, then retry once.";
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..errors import Severity
from ..lexer import TokenType
from .base import SymbolKind

JULIET_ALLOWED_KEYS = frozenset({"engine"})


class SettingsParserMixin:
    """Parser mixin for juliet and policy statements."""

    if TYPE_CHECKING:
        juliet_declared: Any
        expect: Any
        check: Any
        is_at_end: Any
        expect_identifier: Any
        expect_value: Any
        expect_engine_value: Any
        expect_string_literal: Any
        synchronize_in_block: Any
        synchronize_top_level: Any
        register_definition: Any
        report_previous: Any
        warn: Any

    def parse_juliet(self) -> None:
        """
        Parse the body of a ``juliet`` block (keyword already consumed).

        Grammar:
            juliet LBRACE (IDENTIFIER EQUALS value SEMICOLON)* RBRACE
        """
        if self.juliet_declared:
            self.report_previous(
                "Duplicate juliet block. Only one top-level juliet block is expected.",
                Severity.WARNING,
            )
        self.juliet_declared = True

        self.expect(TokenType.LBRACE, "Expected '{' after 'juliet'.")
        while not self.check(TokenType.RBRACE) and not self.is_at_end():
            key = self.expect_identifier("Expected a key name in juliet block.")
            if key is None:
                self.synchronize_in_block()
                continue

            if key.value not in JULIET_ALLOWED_KEYS:
                self.warn(key, f"Unknown juliet key '{key.value}'. Supported keys: engine.")

            self.expect(TokenType.EQUALS, "Expected '=' after juliet key.")
            if key.value == "engine":
                self.expect_engine_value()
            else:
                self.expect_value("Expected a value after '='.")
            self.expect(TokenType.SEMICOLON, "Expected ';' after juliet assignment.")
        self.expect(TokenType.RBRACE, "Expected '}' to close juliet block.")

    def parse_policy(self) -> None:
        """
        Parse a policy declaration (keyword already consumed).

        Grammar:
            policy IDENTIFIER EQUALS (STRING | BLOCK_STRING) SEMICOLON
        """
        name = self.expect_identifier("Expected policy name.")
        if name is None:
            self.synchronize_top_level()
            return
        self.register_definition(SymbolKind.POLICY, name)

        self.expect(TokenType.EQUALS, "Expected '=' after policy name.")
        self.expect_string_literal(
            "Expected a string or triple-quoted block string for policy body."
        )
        self.expect(TokenType.SEMICOLON, "Expected ';' after policy declaration.")
