"""Tests for the ready-made pattern catalog.

Each case is (input, expected) where expected is either the list of token
values or the (character, position) of the first bad token.
"""

import pytest

from lexora import BadTokenError, Tokenizer, common

Expected = list[str] | tuple[str, int]


def check(pattern: tuple[str, str], cases: list[tuple[str, Expected]]) -> None:
    tokenizer = Tokenizer(patterns=[pattern])
    for source, expected in cases:
        errors = [i for i in tokenizer.tokenize_lazy(source) if isinstance(i, BadTokenError)]
        if isinstance(expected, tuple):
            assert errors, f"expected a bad token for {source!r}"
            assert (errors[0].character, errors[0].position) == expected, source
        else:
            assert not errors, f"unexpected {errors[0]} for {source!r}"
            assert [t.value for t in tokenizer.tokenize(source)] == expected, source


# =========================================================================
# Strings and characters
# =========================================================================


class TestStrings:
    def test_single_quoted_string(self) -> None:
        check(
            common.SINGLE_QUOTED_STRING,
            [
                ("'test'", ["'test'"]),
                ("'''", ("'", 2)),
                ("test", ("t", 0)),
                ("'test", ("'", 0)),
                ("\\'test'", ("\\", 0)),
                ("'\\'test'", ["'\\'test'"]),
                ("'test\\'", ("'", 0)),
                ("'test\\ntest'", ["'test\\ntest'"]),
                ("''", ["''"]),
            ],
        )

    def test_double_quoted_string(self) -> None:
        check(
            common.DOUBLE_QUOTED_STRING,
            [
                ('"test"', ['"test"']),
                ('"""', ('"', 2)),
                ("test", ("t", 0)),
                ('"test', ('"', 0)),
                ('\\"test"', ("\\", 0)),
                ('"\\"test"', ['"\\"test"']),
                ('"test\\"', ('"', 0)),
                ('"test\\ntest"', ['"test\\ntest"']),
                ('""', ['""']),
            ],
        )

    def test_string(self) -> None:
        check(common.STRING, [("'test'\"test\"", ["'test'", '"test"'])])

    def test_char(self) -> None:
        check(
            common.CHAR,
            [
                ("'t'", ["'t'"]),
                ("'''", ("'", 0)),
                ("'\\''", ["'\\''"]),
                ("t", ("t", 0)),
                ("t'", ("t", 0)),
                ("'t", ("'", 0)),
                ("\\'t'", ("\\", 0)),
                ("'t\\'", ("'", 0)),
                ("'tt'", ("'", 0)),
                ("''", ("'", 0)),
            ],
        )


# =========================================================================
# Words and names
# =========================================================================


class TestWords:
    def test_letter(self) -> None:
        check(
            common.LETTER,
            [
                ("AZaz", ["A", "Z", "a", "z"]),
                ("Wow!", ("!", 3)),
                ("!", ("!", 0)),
                ("@", ("@", 0)),
                ("|", ("|", 0)),
            ],
        )

    def test_word(self) -> None:
        check(
            common.WORD,
            [
                ("A", ["A"]),
                ("word", ["word"]),
                (" word", (" ", 0)),
                ("-", ("-", 0)),
                ("a-", ("-", 1)),
                ("-a", ("-", 0)),
                ("a-a", ["a-a"]),
                ("a--a", ("-", 1)),
                ("thread-safe", ["thread-safe"]),
                ("thread-", ("-", 6)),
                ("-jack-o", ("-", 0)),
                ("jack-o-lantern", ["jack-o-lantern"]),
            ],
        )

    def test_c_name(self) -> None:
        check(
            common.C_NAME,
            [
                ("W", ["W"]),
                ("_", ["_"]),
                ("word", ["word"]),
                ("two_words", ["two_words"]),
                ("_word", ["_word"]),
                ("_two_words", ["_two_words"]),
                ("0word", ("0", 0)),
                ("word0", ["word0"]),
                ("_0word", ["_0word"]),
                ("_word0", ["_word0"]),
                ("0", ("0", 0)),
                ("2322", ("2", 0)),
                ("wórd", ("ó", 1)),
                ("a٣", ["a٣"]),
                ("٣a", ("٣", 0)),
            ],
        )

    def test_newline(self) -> None:
        check(
            common.NEWLINE,
            [
                ("\n", ["\n"]),
                ("\r\n", ["\r\n"]),
                ("\r", ("\r", 0)),
                ("\\n", ("\\", 0)),
            ],
        )


# =========================================================================
# Numbers
# =========================================================================


class TestIntegers:
    def test_digit(self) -> None:
        check(
            common.DIGIT,
            [
                ("0123456789", list("0123456789")),
                ("٥", ("٥", 0)),
                ("/", ("/", 0)),
                (":", (":", 0)),
            ],
        )

    def test_hexdigit(self) -> None:
        check(
            common.HEXDIGIT,
            [
                ("3Da", ["3", "D", "a"]),
                ("0x", ("x", 1)),
                ("g", ("g", 0)),
            ],
        )

    def test_unsigned_int(self) -> None:
        check(
            common.UNSIGNED_INT,
            [
                ("21", ["21"]),
                ("037", ["037"]),
                ("1_000_000", ["1_000_000"]),
                ("1__0", ["1__0"]),
                ("_1", ("_", 0)),
                ("1_", ("_", 1)),
            ],
        )

    def test_signed_int(self) -> None:
        check(
            common.SIGNED_INT,
            [
                ("+21", ["+21"]),
                ("-37", ["-37"]),
                ("-142+315", ["-142", "+315"]),
                ("13", ("1", 0)),
            ],
        )

    def test_int(self) -> None:
        check(common.INT, [("10+200-3000-4_000", ["10", "+200", "-3000", "-4_000"])])


class TestFloats:
    def test_decimal(self) -> None:
        check(
            common.DECIMAL,
            [
                ("3.14", ["3.14"]),
                ("3.0", ["3.0"]),
                ("21.37", ["21.37"]),
                ("2_1.37", ["2_1.37"]),
                ("2_1.3_7", ["2_1.3_7"]),
                ("0.92", ["0.92"]),
                ("0000.92", ["0000.92"]),
                (".92", [".92"]),
                ("3.", ["3."]),
                ("3..3", ["3.", ".3"]),
                ("3..", (".", 2)),
                ("3", ("3", 0)),
                (".", (".", 0)),
            ],
        )

    def test_unsigned_float(self) -> None:
        check(
            common.UNSIGNED_FLOAT,
            [
                ("13", ("1", 0)),
                ("13.", ["13."]),
                (".13", [".13"]),
                ("1e3", ["1e3"]),
                ("1e+3", ["1e+3"]),
                ("1e+3.5", ["1e+3", ".5"]),
                ("1e-3", ["1e-3"]),
                ("1E3", ["1E3"]),
                (".0e3", [".0e3"]),
                ("1.e5", ["1.e5"]),
                ("1.0e3", ["1.0e3"]),
                ("1.0e+3", ["1.0e+3"]),
                ("1.0e-3", ["1.0e-3"]),
                ("1_0.5_0e-3_0", ["1_0.5_0e-3_0"]),
                ("1.0e", ("e", 3)),
            ],
        )

    def test_signed_float(self) -> None:
        check(
            common.SIGNED_FLOAT,
            [
                ("+1", ("+", 0)),
                ("+1e3", ["+1e3"]),
                ("-1e+3", ["-1e+3"]),
                ("+1e+3.5", (".", 5)),
                ("+1e+3+.5", ["+1e+3", "+.5"]),
                ("-1e-3", ["-1e-3"]),
                ("+1E3", ["+1E3"]),
                ("1E3", ("1", 0)),
                ("-1.0e3", ["-1.0e3"]),
                ("+1.0e+3", ["+1.0e+3"]),
                ("-1.0e-3", ["-1.0e-3"]),
                ("-1_0.5_0e-3_0", ["-1_0.5_0e-3_0"]),
                ("+1.0e", ("e", 4)),
            ],
        )

    def test_float(self) -> None:
        check(
            common.FLOAT,
            [
                ("8_192.8_3-77641702.4", ["8_192.8_3", "-77641702.4"]),
                ("8.83-77641702.4", ["8.83", "-77641702.4"]),
                ("-497e4815.0+19.", ["-497e4815", ".0", "+19."]),
                ("-25.-7.6320036.8", ["-25.", "-7.6320036", ".8"]),
                ("11.9+8e55009.239", ["11.9", "+8e55009", ".239"]),
                (".7e.68732406+ee", ("e", 2)),
                ("5e8336+8.+717.52", ["5e8336", "+8.", "+717.52"]),
                ("5e8336++8.+717.52", ("+", 6)),
            ],
        )


class TestNumbers:
    def test_unsigned_number(self) -> None:
        check(
            common.UNSIGNED_NUMBER,
            [
                ("1", ["1"]),
                ("1.0", ["1.0"]),
                ("1_0.0_0", ["1_0.0_0"]),
            ],
        )

    def test_signed_number(self) -> None:
        check(
            common.SIGNED_NUMBER,
            [
                ("+1", ["+1"]),
                ("+1_0", ["+1_0"]),
                ("-1.0", ["-1.0"]),
                ("1", ("1", 0)),
                ("1.0", ("1", 0)),
            ],
        )

    def test_number(self) -> None:
        check(
            common.NUMBER,
            [
                ("+8_192.8_3", ["+8_192.8_3"]),
                ("45692.+3795+74-e35.+", ("-", 14)),
                ("70-.8-", ("-", 5)),
                ("-", ("-", 0)),
                ("+491814+4.4677-3412.", ["+491814", "+4.4677", "-3412."]),
                (".e2..1", (".", 0)),
                ("484-3+798.", ["484", "-3", "+798."]),
                ("2e6121+15+04", ["2e6121", "+15", "+04"]),
                (".537e0-5.56e097e16", ("e", 15)),
                ("-40e66.84712889820", ["-40e66", ".84712889820"]),
                ("+683011.+8557+e.76", ("+", 13)),
                ("662+2.60.305179", ["662", "+2.60", ".305179"]),
                ("", []),
                ("26286086801-8+.5", ["26286086801", "-8", "+.5"]),
                ("7179", ["7179"]),
            ],
        )


# =========================================================================
# Catalog shape
# =========================================================================


class TestCatalog:
    def test_catalog_keys_match_constant_names(self) -> None:
        for attr in common.__all__:
            if attr == "CATALOG":
                continue
            name, source = getattr(common, attr)
            assert common.CATALOG[name] == source

    @pytest.mark.parametrize("name", sorted(common.CATALOG))
    def test_every_catalog_pattern_compiles(self, name: str) -> None:
        tokenizer = Tokenizer(patterns=[(name, common.CATALOG[name])])
        assert tokenizer.compiled_patterns[0].name == name

    def test_catalog_combination(self) -> None:
        tokenizer = Tokenizer(
            literals=[("lparen", "("), ("rparen", ")"), ("comma", ",")],
            patterns=[common.C_NAME, common.NUMBER, common.STRING],
        )
        tokens = tokenizer.tokenize("f(x,-1.5e3,'a')")
        assert [t.name for t in tokens] == [
            "c_name",
            "lparen",
            "c_name",
            "comma",
            "number",
            "comma",
            "string",
            "rparen",
        ]
