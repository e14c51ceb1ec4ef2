"""Tests for justifier configuration objects."""

import dataclasses
import os

import pytest

from justifier.config import FormatOptions, JustifierConfig, is_valid_max_space, is_valid_width


def test_config_defaults():
    config = JustifierConfig()
    assert config.line_separator == os.linesep
    assert config.word_break == "-"
    assert config.paragraph_separator == os.linesep * 2
    assert config.splits_paragraphs


def test_create_overrides_strings_only():
    """Test that only string values replace defaults."""
    config = JustifierConfig.create("\r\n", None, 3)
    assert config.line_separator == "\r\n"
    assert config.word_break == "-"
    assert config.paragraph_separator == os.linesep * 2


def test_create_with_empty_paragraph_separator():
    """An explicit empty separator turns paragraph splitting off."""
    config = JustifierConfig.create(paragraph_separator="")
    assert config.paragraph_separator == ""
    assert not config.splits_paragraphs


def test_config_is_frozen():
    config = JustifierConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.word_break = "~"


def test_options_defaults():
    options = FormatOptions()
    assert options.width == 32
    assert options.max_space == 3


def test_merged_applies_valid_values():
    options = FormatOptions().merged(40, 0)
    assert options == FormatOptions(width=40, max_space=0)


def test_merged_keeps_previous_for_invalid_values():
    """Test that invalid values leave the options untouched."""
    options = FormatOptions(width=11, max_space=2)
    assert options.merged(0, -1) is options
    assert options.merged(None, None) is options
    assert options.merged(True, False) is options
    assert options.merged(12.5, "3") is options


def test_merged_mixes_valid_and_invalid():
    options = FormatOptions(width=11, max_space=2).merged(-3, 5)
    assert options == FormatOptions(width=11, max_space=5)


@pytest.mark.parametrize("value,expected", [
    (1, True),
    (80, True),
    (0, False),
    (-1, False),
    (True, False),
    (10.0, False),
    ("10", False),
    (None, False),
])
def test_is_valid_width(value, expected):
    assert is_valid_width(value) is expected


@pytest.mark.parametrize("value,expected", [
    (0, True),
    (3, True),
    (-1, False),
    (False, False),
    (2.5, False),
])
def test_is_valid_max_space(value, expected):
    assert is_valid_max_space(value) is expected
