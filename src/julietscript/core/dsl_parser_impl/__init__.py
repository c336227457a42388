"""
JulietScript Parser Package.

This package provides a modular recursive-descent parser for JulietScript.
The parser is built using mixins to separate parsing logic by statement
kind, while the shared cursor, error recovery and symbol tables live in
``BaseParser``.

The main exports are:
- Parser: The complete parser class
- parse_tokens: Convenience function returning the sorted diagnostics

Usage:
    from julietscript.core.lexer import tokenize
    from julietscript.core.dsl_parser_impl import parse_tokens

    tokens, lexical = tokenize(text)
    diagnostics = parse_tokens(tokens, lexical)
"""

from ..errors import Diagnostic, sort_diagnostics
from ..lexer import Token
from .artifact import ArtifactParserMixin
from .base import TOP_LEVEL_KEYWORDS, BaseParser, SymbolKind
from .cadence import CadenceParserMixin
from .rubric import RubricParserMixin
from .settings import SettingsParserMixin


class Parser(
    BaseParser,
    SettingsParserMixin,
    RubricParserMixin,
    CadenceParserMixin,
    ArtifactParserMixin,
):
    """
    Complete JulietScript parser.

    Each mixin handles one group of statements:

    - SettingsParserMixin: juliet defaults block and policy declarations
    - RubricParserMixin: rubric criteria and tiebreakers
    - CadenceParserMixin: cadence assignments and compare/keep actions
    - ArtifactParserMixin: create, extend and halt statements
    """

    def parse(self) -> list[Diagnostic]:
        """
        Parse the whole token stream.

        Returns:
            All lexical, syntax and semantic diagnostics sorted by start position
        """
        while not self.is_at_end():
            if self.match_keyword("juliet"):
                self.parse_juliet()
            elif self.match_keyword("policy"):
                self.parse_policy()
            elif self.match_keyword("rubric"):
                self.parse_rubric()
            elif self.match_keyword("cadence"):
                self.parse_cadence()
            elif self.match_keyword("create"):
                self.parse_create()
            elif self.match_keyword("extend"):
                self.parse_extend()
            elif self.match_keyword("halt"):
                self.parse_halt()
            else:
                self.report_current(
                    "Expected a top-level statement: juliet, policy, rubric, cadence, "
                    "create, extend, or halt."
                )
                self.synchronize_top_level()

        return sort_diagnostics(self.diagnostics)


def parse_tokens(tokens: list[Token], diagnostics: list[Diagnostic] | None = None) -> list[Diagnostic]:
    """
    Parse a token stream.

    Args:
        tokens: Tokens from the lexer, terminated by EOF
        diagnostics: Lexical diagnostics to merge into the result

    Returns:
        Sorted list of diagnostics
    """
    parser = Parser(tokens, diagnostics)
    return parser.parse()


__all__ = [
    "Parser",
    "parse_tokens",
    "BaseParser",
    "SymbolKind",
    "TOP_LEVEL_KEYWORDS",
    "SettingsParserMixin",
    "RubricParserMixin",
    "CadenceParserMixin",
    "ArtifactParserMixin",
]
