# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for documentation block normalization and tag extraction."""

from docslint.analyzer import DocParam, DocReturns, DocThrows, ParsedDoc
from docslint.doc_parser import parse_doc_comment
from docslint.normalizer import clean_multiline_text, normalize_doc_comment

FULL_BLOCK = "\n".join(
    [
        "/**",
        " * @title Transfer circuit",
        " * @description Moves tokens from the caller",
        " * to the recipient.",
        " *",
        " * @remarks",
        " * Requirements:",
        " * - `amount` must be positive.",
        " *",
        " * @circuitInfo k=11, rows=1305",
        " *",
        " * @param {ContractAddress} to - The recipient.",
        " * @param {Uint<64>} amount - The amount",
        " *   to transfer.",
        " *",
        ' * @throws {Error} "insufficient balance" if the caller lacks funds.',
        " *",
        " * @returns {[]} - Nothing.",
        " */",
    ]
)


def test_parse_doc_comment_recovers_every_tag() -> None:
    parsed = parse_doc_comment(FULL_BLOCK)

    assert parsed.title == "Transfer circuit"
    assert parsed.description == "Moves tokens from the caller to the recipient."
    assert parsed.remarks == "Requirements: - `amount` must be positive."
    assert parsed.circuit_info == "k=11, rows=1305"
    assert parsed.params == [
        DocParam(name="to", type="ContractAddress", description="The recipient."),
        DocParam(
            name="amount", type="Uint<64>", description="The amount to transfer."
        ),
    ]
    assert parsed.throws == [
        DocThrows(
            type="Error", message='"insufficient balance" if the caller lacks funds.'
        )
    ]
    assert parsed.returns == DocReturns(type="[]", description="Nothing.")


def test_parse_doc_comment_keeps_nested_generic_param_types() -> None:
    parsed = parse_doc_comment(
        "/**\n"
        " * @param {Either<ZswapCoinPublicKey, ContractAddress>} admin  - The admin.\n"
        " */"
    )

    assert parsed.params == [
        DocParam(
            name="admin",
            type="Either<ZswapCoinPublicKey, ContractAddress>",
            description="The admin.",
        )
    ]


def test_parse_doc_comment_accepts_return_alias_without_type() -> None:
    parsed = parse_doc_comment("/**\n * @return [] - No return values.\n */")

    assert parsed.returns == DocReturns(type="", description="[] - No return values.")


def test_parse_doc_comment_keeps_first_single_valued_tag() -> None:
    parsed = parse_doc_comment(
        "/**\n * @title First\n * @title Second\n */"
    )

    assert parsed.title == "First"


def test_parse_doc_comment_stops_section_at_blank_line() -> None:
    parsed = parse_doc_comment(
        "/**\n * @description First paragraph.\n *\n * Second paragraph.\n */"
    )

    assert parsed.description == "First paragraph."


def test_parse_doc_comment_remarks_run_past_nested_remarks_marker() -> None:
    parsed = parse_doc_comment(
        "\n".join(
            [
                "/**",
                " * @remarks These remarks apply.",
                " * @remarks continued.",
                " * @returns [] - Nothing.",
                " */",
            ]
        )
    )

    assert parsed.remarks == "These remarks apply. @remarks continued."
    assert parsed.returns is not None


def test_parse_doc_comment_ignores_param_and_throws_without_type() -> None:
    parsed = parse_doc_comment(
        "/**\n * @param to - The recipient.\n * @throws if anything fails.\n */"
    )

    assert parsed.params == []
    assert parsed.throws == []


def test_parse_doc_comment_treats_empty_tag_as_absent() -> None:
    parsed = parse_doc_comment("/**\n * @title\n * @description Present.\n */")

    assert parsed.title is None
    assert parsed.description == "Present."


def test_parse_doc_comment_returns_empty_doc_for_empty_block() -> None:
    assert parse_doc_comment("") == ParsedDoc()


def test_normalize_doc_comment_strips_markers_and_line_prefixes() -> None:
    normalized = normalize_doc_comment(
        "/**\n * @title X\n *\n * @description Y\n */"
    )

    assert normalized == "@title X\n\n@description Y"


def test_normalize_doc_comment_handles_single_line_block() -> None:
    assert normalize_doc_comment("/** @description Inline. */") == (
        "@description Inline."
    )


def test_normalize_doc_comment_is_idempotent() -> None:
    normalized = normalize_doc_comment(FULL_BLOCK)

    assert normalize_doc_comment(normalized) == normalized


def test_clean_multiline_text_collapses_whitespace() -> None:
    assert clean_multiline_text("  a\n   b \t c\n") == "a b c"


def test_parse_doc_comment_treats_bare_returns_as_absent() -> None:
    parsed = parse_doc_comment(
        "/**\n * @description D.\n * @circuitInfo k=1, rows=2\n * @returns\n */"
    )

    assert parsed.description == "D."
    assert parsed.returns is None


def test_normalize_doc_comment_keeps_star_prefixed_body_lines_stable() -> None:
    block = "/**\n * @remarks\n * * first item\n * * second item\n */"

    normalized = normalize_doc_comment(block)

    assert normalized == "@remarks\n* first item\n* second item"
    assert normalize_doc_comment(normalized) == normalized
