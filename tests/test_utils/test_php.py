"""Tests for PHP literal helpers."""

import pytest

from pico_installer.utils.php import PhpParseError, parse_return_array, quote


class TestQuote:
    """Tests for quote."""

    def test_plain_string(self) -> None:
        """Test quoting a string without special characters."""
        assert quote("MyPlugin") == "'MyPlugin'"

    def test_escapes_quotes_and_backslashes(self) -> None:
        """Test that quotes and backslashes are escaped."""
        assert quote("it's") == "'it\\'s'"
        assert quote("a\\b") == "'a\\\\b'"


class TestParseReturnArray:
    """Tests for parse_return_array."""

    def test_keyed_and_list_arrays(self) -> None:
        """Test parsing nested keyed and list arrays."""
        source = "<?php\n// header\nreturn array(\n    'a' => array('x', 'y',),\n    'b' => 'c',\n);\n"

        assert parse_return_array(source) == {"a": ["x", "y"], "b": "c"}

    def test_empty_array(self) -> None:
        """Test that an empty array parses as an empty list."""
        assert parse_return_array("<?php return array();") == []

    def test_unescapes_strings(self) -> None:
        """Test that quoted strings round-trip through quote."""
        value = "it's a\\b"

        assert parse_return_array(f"<?php return array({quote(value)});") == [value]

    def test_comments_and_case(self) -> None:
        """Test that comments are skipped and keywords are case-insensitive."""
        source = "<?php /* block */ RETURN Array( # hash comment\n 'a' );"

        assert parse_return_array(source) == ["a"]

    @pytest.mark.parametrize(
        "source",
        [
            "return array();",
            "<?php array();",
            "<?php return array('a')",
            "<?php return array('a' 'b');",
            "<?php return array(array('a') => 'b');",
            "<?php return array('a' => 'b', 'c');",
            "<?php return array(); echo 'x';",
            "<?php return $config;",
        ],
    )
    def test_rejects_unsupported_source(self, source: str) -> None:
        """Test that anything but a plain data file is rejected."""
        with pytest.raises(PhpParseError):
            parse_return_array(source)
