"""Unit tests for deterministic command line parser."""

from __future__ import annotations

import pytest

from lighthouse.commands.parser import (
    CommandCall,
    CommandParseError,
    parse_artifact_id,
    parse_input,
)


@pytest.mark.unit
@pytest.mark.parametrize("text", ["", "   ", "\t \n"])
def test_blank_input_yields_none(text: str) -> None:
    """Whitespace-only lines should not produce a command."""
    assert parse_input(text) is None


@pytest.mark.unit
def test_command_name_is_lowercased_and_arg_stripped() -> None:
    """Name is case-insensitive; remainder becomes one argument string."""
    call = parse_input("  REMOVE_KEY    5  ")

    assert call is not None
    assert call.name == "remove_key"
    assert call.arg == "5"
    assert call.raw == "  REMOVE_KEY    5  "


@pytest.mark.unit
def test_remainder_is_not_tokenized() -> None:
    """Multi-word remainder should stay one opaque argument."""
    call = parse_input("filter_rarity Epic  Rare")

    assert call is not None
    assert call.arg == "Epic  Rare"


@pytest.mark.unit
def test_command_without_argument_has_empty_arg() -> None:
    call = parse_input("show")

    assert call == CommandCall(name="show", arg="", raw="show")


@pytest.mark.unit
def test_parse_artifact_id_reads_integer() -> None:
    assert parse_artifact_id(CommandCall(name="remove_key", arg="12", raw="")) == 12


@pytest.mark.unit
@pytest.mark.parametrize(
    ("arg", "expected"),
    [("", "requires an artifact id"), ("abc", "expects an integer id")],
)
def test_parse_artifact_id_rejects_bad_input(arg: str, expected: str) -> None:
    """Missing or non-integer ids raise parse errors naming the command."""
    call = CommandCall(name="remove_key", arg=arg, raw="")

    with pytest.raises(CommandParseError, match=expected):
        parse_artifact_id(call)
