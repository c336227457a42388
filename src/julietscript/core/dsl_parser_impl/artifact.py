"""
Artifact parser mixin for JulietScript.

Parses the artifact lifecycle statements: ``create``, ``extend`` and ``halt``.

DSL Syntax:

    create SourceBrief from julietArtifactSourceFiles [
      "../docs/brief.md"
    ];

    create PatchSet from juliet "Produce a patch series."
    using [SourceBrief]
    with {
      preflight = PreflightChecklist;
      cadence = ShipLoop;
    };

    extend PatchSet.rubric with "Check migration safety.";

    halt "Stop after the first accepted PatchSet.";
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..lexer import TokenType
from .base import SymbolKind

# Attachment key -> name-space its reference must resolve in
CREATE_ATTACHMENT_KINDS: dict[str, SymbolKind] = {
    "preflight": SymbolKind.POLICY,
    "failureTriage": SymbolKind.POLICY,
    "cadence": SymbolKind.CADENCE,
    "rubric": SymbolKind.RUBRIC,
}


class ArtifactParserMixin:
    """Parser mixin for create, extend and halt statements."""

    if TYPE_CHECKING:
        expect: Any
        check: Any
        match: Any
        match_keyword: Any
        is_at_end: Any
        is_defined: Any
        previous_token: Any
        expect_identifier: Any
        expect_keyword: Any
        expect_string_literal: Any
        synchronize_in_block: Any
        synchronize_top_level: Any
        register_definition: Any
        report_current: Any
        report_token: Any
        warn: Any

    def parse_create(self) -> None:
        """
        Parse a create statement (keyword already consumed).

        Grammar:
            create IDENTIFIER from
              ( juliet (STRING | BLOCK_STRING)
              | julietArtifactSourceFiles LBRACKET STRING (COMMA STRING)* RBRACKET )
              (using LBRACKET IDENTIFIER (COMMA IDENTIFIER)* RBRACKET)?
              (with LBRACE (IDENTIFIER EQUALS IDENTIFIER SEMICOLON)* RBRACE)?
            SEMICOLON

        The artifact is registered once the statement ends, even if parts of
        it were malformed, so it is never visible to its own ``using`` list.
        """
        artifact = self.expect_identifier("Expected artifact name after 'create'.")
        if artifact is None:
            self.synchronize_top_level()
            return

        self.expect_keyword("from", "Expected 'from' after artifact name.")
        if self.match_keyword("juliet"):
            self.expect_string_literal("Expected prompt string after 'from juliet'.")
        elif self.match_keyword("julietArtifactSourceFiles"):
            self._parse_source_files_list()
        else:
            self.report_current("Expected 'juliet' or 'julietArtifactSourceFiles' after 'from'.")

        if self.match_keyword("using"):
            self._parse_using_list()

        if self.match_keyword("with"):
            self._parse_attachments()

        self.expect(TokenType.SEMICOLON, "Expected ';' after create statement.")
        self.register_definition(SymbolKind.ARTIFACT, artifact)

    def _parse_source_files_list(self) -> None:
        list_start = self.expect(
            TokenType.LBRACKET, "Expected '[' after 'julietArtifactSourceFiles'."
        )
        seen_paths: set[str] = set()
        path_count = 0

        if not self.check(TokenType.RBRACKET):
            while True:
                path = self.expect(
                    TokenType.STRING, "Expected quoted file path in source files list."
                )
                if path is not None:
                    path_count += 1
                    if path.value in seen_paths:
                        self.warn(
                            path,
                            f"Duplicate source file path '{path.value}' "
                            "in julietArtifactSourceFiles list.",
                        )
                    seen_paths.add(path.value)
                if not self.match(TokenType.COMMA):
                    break

        self.expect(TokenType.RBRACKET, "Expected ']' after source files list.")

        if path_count == 0:
            self.report_token(
                list_start or self.previous_token(),
                "Expected at least one file path in julietArtifactSourceFiles list.",
            )

    def _parse_using_list(self) -> None:
        self.expect(TokenType.LBRACKET, "Expected '[' after 'using'.")
        if not self.check(TokenType.RBRACKET):
            while True:
                dependency = self.expect_identifier("Expected artifact name in 'using' list.")
                if dependency is not None and not self.is_defined(
                    SymbolKind.ARTIFACT, dependency.value
                ):
                    self.report_token(
                        dependency, f"Unknown artifact '{dependency.value}' in using list."
                    )
                if not self.match(TokenType.COMMA):
                    break
        self.expect(TokenType.RBRACKET, "Expected ']' after using list.")

    def _parse_attachments(self) -> None:
        self.expect(TokenType.LBRACE, "Expected '{' to begin create attachments block.")
        seen_keys: set[str] = set()

        while not self.check(TokenType.RBRACE) and not self.is_at_end():
            key = self.expect_identifier("Expected attachment key in create with-block.")
            if key is None:
                self.synchronize_in_block()
                continue
            if key.value in seen_keys:
                self.warn(key, f"Duplicate create attachment '{key.value}'.")
            seen_keys.add(key.value)

            self.expect(TokenType.EQUALS, "Expected '=' after create attachment key.")
            reference = self.expect_identifier("Expected reference name after '='.")
            self.expect(TokenType.SEMICOLON, "Expected ';' after create attachment.")

            kind = CREATE_ATTACHMENT_KINDS.get(key.value)
            if kind is None:
                self.warn(
                    key,
                    f"Unknown create attachment key '{key.value}'. "
                    "Supported keys: preflight, failureTriage, cadence, rubric.",
                )
                continue

            if reference is not None and not self.is_defined(kind, reference.value):
                self.report_token(
                    reference,
                    f"Unknown {kind.value} '{reference.value}' referenced by '{key.value}'.",
                )

        self.expect(TokenType.RBRACE, "Expected '}' to close create attachments block.")

    def parse_extend(self) -> None:
        """
        Parse an extend statement (keyword already consumed).

        Grammar:
            extend IDENTIFIER DOT rubric with (STRING | BLOCK_STRING) SEMICOLON
        """
        artifact = self.expect_identifier("Expected artifact name after 'extend'.")
        if artifact is None:
            self.synchronize_top_level()
            return
        if not self.is_defined(SymbolKind.ARTIFACT, artifact.value):
            self.report_token(artifact, f"Unknown artifact '{artifact.value}' in extend statement.")

        self.expect(TokenType.DOT, "Expected '.' after artifact name in extend target.")
        target = self.expect_identifier("Expected extend target after '.'.")
        if target is not None and target.value != "rubric":
            self.report_token(target, "Only '<Artifact>.rubric' is currently supported by extend.")

        self.expect_keyword("with", "Expected 'with' after extend target.")
        self.expect_string_literal("Expected string or block string after 'with'.")
        self.expect(TokenType.SEMICOLON, "Expected ';' after extend statement.")

    def parse_halt(self) -> None:
        """
        Parse a halt statement (keyword already consumed).

        Grammar:
            halt (STRING | BLOCK_STRING)? SEMICOLON
        """
        if not self.check(TokenType.SEMICOLON):
            self.expect_string_literal("Expected optional halt message string before ';'.")
        self.expect(TokenType.SEMICOLON, "Expected ';' after halt statement.")
