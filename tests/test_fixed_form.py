"""Tests for column-sensitive legacy source handling."""

from __future__ import annotations

import pytest

from locstat.engine import LineKind, classify_fixed_form, classify_line, get_profile
from locstat.engine.analyzer import analyze_lines


class TestCobol:
    def test_star_in_column_seven(self):
        assert classify_fixed_form("      * comment here", get_profile("COBOL")) is LineKind.COMMENT

    def test_marker_wins_over_trailing_content(self):
        kind, _ = classify_line('000100* MOVE "X" TO Y.', get_profile("COBOL"))
        assert kind is LineKind.COMMENT

    def test_slash_in_column_seven(self):
        assert classify_line("      /", get_profile("COBOL"))[0] is LineKind.COMMENT

    def test_without_marker_free_form_applies(self):
        profile = get_profile("COBOL")
        assert classify_fixed_form("       MOVE A TO B.", profile) is None
        assert classify_line("       MOVE A TO B.", profile)[0] is LineKind.CODE
        assert classify_line("       MOVE A TO B. *> note", profile)[0] is LineKind.CODE
        assert classify_line("       *> full line", profile)[0] is LineKind.COMMENT

    def test_short_line_delegates(self):
        assert classify_fixed_form("ab", get_profile("COBOL")) is None

    def test_file_counts(self):
        stats = analyze_lines(
            [
                "000100 IDENTIFICATION DIVISION.",
                "000200* comment",
                "",
                "       PROGRAM-ID. HELLO. *> trailing",
            ],
            get_profile("COBOL"),
        )
        assert (stats.code, stats.comment, stats.blank) == (2, 1, 1)


class TestFortran:
    @pytest.mark.parametrize("line", ["C     comment", "c lower", "* star", "D debug", "! bang"])
    def test_legacy_column_one_markers(self, line):
        assert classify_line(line, get_profile("Fortran Legacy"))[0] is LineKind.COMMENT

    def test_legacy_statement(self):
        profile = get_profile("Fortran Legacy")
        assert classify_line("      X = 1 ! trailing", profile)[0] is LineKind.CODE
        assert classify_line("      ! indented note", profile)[0] is LineKind.COMMENT

    def test_modern_has_no_column_rule(self):
        profile = get_profile("Fortran Modern")
        assert profile.fixed_column is None
        assert classify_line("C = 1", profile)[0] is LineKind.CODE
        assert classify_line("  ! note", profile)[0] is LineKind.COMMENT


class TestAssembly:
    def test_star_in_column_one(self):
        assert classify_line("* IBM style", get_profile("Assembly"))[0] is LineKind.COMMENT

    def test_free_form_tokens(self):
        profile = get_profile("Assembly")
        assert classify_line("  mov ax, 1 ; load", profile)[0] is LineKind.CODE
        assert classify_line("; full", profile)[0] is LineKind.COMMENT
        assert classify_line("  # gas", profile)[0] is LineKind.COMMENT
        assert classify_line("  // also", profile)[0] is LineKind.COMMENT

    def test_star_elsewhere_is_not_a_marker(self):
        assert classify_line("  mul *ptr", get_profile("Assembly"))[0] is LineKind.CODE


class TestFreeFormLegacy:
    def test_dcl(self):
        profile = get_profile("DCL")
        assert classify_line("$! comment", profile)[0] is LineKind.COMMENT
        assert classify_line("$ SET DEFAULT [X] ! trailing", profile)[0] is LineKind.CODE

    def test_iplan(self):
        stats = analyze_lines(["! one", "/* two", "three */", "x = 1"], get_profile("IPLAN"))
        assert (stats.code, stats.comment, stats.blank) == (1, 3, 0)


class TestAdapterContract:
    def test_profiles_without_rule_delegate(self):
        assert classify_fixed_form("* anything", get_profile("C/C++")) is None

    def test_state_untouched_by_marker_line(self):
        profile = get_profile("COBOL")
        state = classify_line("      * x", profile)[1]
        assert not state.in_block
