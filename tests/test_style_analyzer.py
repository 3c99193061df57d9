"""Tests for the style analyzer (tabs and line length)."""

from pathlib import Path

import pytest

from tablen.analyzers.style import StyleAnalyzer, scan_bytes
from tablen.model import ViolationKind


def _scan(data: bytes, max_line_length: int = 120):
    return scan_bytes(data, "f.c", max_line_length)


class TestTabRuns:
    """Consecutive tab lines collapse into one range."""

    def test_single_tab_line(self):
        """A single tab line reports once, at line 1."""
        violations = _scan(b"a\tb\n")

        assert len(violations) == 1
        v = violations[0]
        assert v.kind == ViolationKind.TAB_FOUND
        assert v.message == "Tab Found!"
        assert (v.location.line_start, v.location.line_end) == (1, 1)
        assert v.render() == "f.c(1): Tab Found!"

    def test_two_consecutive_tab_lines(self):
        """Two tab lines become one span with the plural message."""
        violations = _scan(b"x\ty\nx\ty\n")

        assert len(violations) == 1
        v = violations[0]
        assert v.message == "Tabs Found!"
        assert (v.location.line_start, v.location.line_end) == (1, 2)
        assert v.render() == "f.c(1 - 2): Tabs Found!"

    @pytest.mark.parametrize("k", [1, 3, 7])
    def test_run_of_k_lines_after_clean_line(self, k: int):
        data = b"clean\n" + b"\tx\n" * k + b"clean\n"
        violations = _scan(data)

        assert len(violations) == 1
        assert violations[0].location.line_start == 2
        assert violations[0].location.line_end == 2 + k - 1

    def test_clean_line_splits_runs(self):
        """A tab-free line flushes the active run before a new one starts."""
        violations = _scan(b"\ta\n\tb\nok\n\tc\nok\n")

        assert [v.render() for v in violations] == [
            "f.c(1 - 2): Tabs Found!",
            "f.c(4): Tab Found!",
        ]

    def test_empty_line_also_flushes(self):
        violations = _scan(b"\ta\n\n\tb\n")

        assert [v.render() for v in violations] == [
            "f.c(1): Tab Found!",
            "f.c(3): Tab Found!",
        ]

    def test_multiple_tabs_on_one_line_count_once(self):
        violations = _scan(b"\t\t\tx\t\n")

        assert len(violations) == 1
        assert violations[0].message == "Tab Found!"

    def test_trailing_run_without_final_newline_not_reported(self):
        """The last line never ends, so its open run is dropped."""
        assert _scan(b"a\tb") == []
        assert _scan(b"ok\nx\ty\nx\ty") == []

    def test_closed_run_then_unterminated_clean_line_not_reported(self):
        assert _scan(b"x\ty\nabc") == []

    def test_no_tabs_no_violations(self):
        assert _scan(b"int main() {\n  return 0;\n}\n") == []

    def test_empty_file(self):
        assert _scan(b"") == []


class TestLineLength:
    """Over-long lines are flagged once, at the first offending byte."""

    def test_exactly_max_is_not_flagged(self):
        assert _scan(b"x" * 120 + b"\n") == []

    def test_one_over_max_is_flagged_once(self):
        violations = _scan(b"x" * 121 + b"\n")

        assert len(violations) == 1
        v = violations[0]
        assert v.kind == ViolationKind.LINE_TOO_LONG
        assert v.location.line_start == 1
        assert v.render() == "f.c(1): Line is greater than 120 characters!"

    def test_130_chars_flagged_once(self):
        violations = _scan(b"x" * 130 + b"\n")

        assert len(violations) == 1
        assert violations[0].kind == ViolationKind.LINE_TOO_LONG

    def test_reported_at_correct_line(self):
        data = b"short\n" + b"y" * 50 + b"\n" + b"z" * 30 + b"\n"
        violations = _scan(data, max_line_length=40)

        assert [v.render() for v in violations] == [
            "f.c(2): Line is greater than 40 characters!",
        ]

    def test_each_long_line_reported(self):
        violations = _scan(b"a" * 25 + b"\n" + b"b" * 25 + b"\n", max_line_length=20)

        assert [v.location.line_start for v in violations] == [1, 2]

    def test_last_line_without_newline_still_checked(self):
        violations = _scan(b"x" * 121)

        assert len(violations) == 1

    def test_tab_counts_toward_length(self):
        violations = _scan(b"\t" * 20 + b"x" + b"\n", max_line_length=20)

        kinds = [v.kind for v in violations]
        assert kinds == [ViolationKind.LINE_TOO_LONG, ViolationKind.TAB_FOUND]

    def test_tab_past_max_does_not_trigger_check(self):
        """Only non-tab bytes trigger the length check."""
        violations = _scan(b"x" * 20 + b"\t\n", max_line_length=20)

        assert [v.kind for v in violations] == [ViolationKind.TAB_FOUND]

    def test_carriage_return_is_an_ordinary_byte(self):
        assert _scan(b"x" * 20 + b"\n", max_line_length=20) == []
        assert len(_scan(b"x" * 20 + b"\r\n", max_line_length=20)) == 1

    def test_multibyte_utf8_counts_bytes(self):
        data = "é".encode("utf-8") * 11 + b"\n"  # 22 bytes, 11 chars
        violations = _scan(data, max_line_length=20)

        assert len(violations) == 1

    def test_detection_order_within_file(self):
        data = b"\ta\n" + b"x" * 30 + b"\n" + b"\tb\n" + b"ok\n"
        violations = _scan(data, max_line_length=20)

        assert [v.render() for v in violations] == [
            "f.c(2): Line is greater than 20 characters!",
            "f.c(1): Tab Found!",
            "f.c(3): Tab Found!",
        ]


class TestStyleAnalyzer:
    """File-level behaviour of StyleAnalyzer."""

    def test_analyzer_protocol(self):
        analyzer = StyleAnalyzer()
        assert analyzer.id == "style"
        assert analyzer.max_line_length == 120
        assert callable(analyzer.check_file)

    def test_check_file_reads_bytes(self, tmp_path: Path):
        src = tmp_path / "a.c"
        src.write_bytes(b"int\tx;\n")

        violations = StyleAnalyzer().check_file(src)

        assert [v.render() for v in violations] == [f"{src}(1): Tab Found!"]

    def test_unreadable_file_reports_io_error(self, tmp_path: Path):
        missing = tmp_path / "missing.c"

        violations = StyleAnalyzer().check_file(missing)

        assert len(violations) == 1
        v = violations[0]
        assert v.kind == ViolationKind.IO_ERROR
        assert v.location is None
        assert v.render() == f"Unable to process file: {missing}"

    def test_directory_path_reports_io_error(self, tmp_path: Path):
        violations = StyleAnalyzer().check_file(tmp_path)

        assert [v.kind for v in violations] == [ViolationKind.IO_ERROR]
