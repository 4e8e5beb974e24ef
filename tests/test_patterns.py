"""Tests for the plaintext, RLE and Life 1.05 pattern loaders."""

import numpy as np
import pytest

from lifecanvas.core.errors import DegenerateGridError, PatternFileError, PatternFormatError
from lifecanvas.core.pattern import Pattern
from lifecanvas.patterns import detect_format, life105, load_pattern, parse_pattern, plaintext, rle

GLIDER_ROWS = [
    [False, True, False],
    [False, False, True],
    [True, True, True],
]


class TestPattern:
    """Test the Pattern record."""

    def test_from_strings(self):
        """Strings of '.', 'O', 'o' and '*' become rows of booleans."""
        pattern = Pattern.from_strings([".O.", "..o", "*O*"])
        assert pattern.width == 3
        assert pattern.height == 3
        assert np.array_equal(pattern.to_array(), np.array(GLIDER_ROWS))

    def test_cells_are_read_only(self):
        """Pattern cells can't be modified after construction."""
        pattern = Pattern(2, 1, [True, False])
        with pytest.raises(ValueError):
            pattern.cells[0] = False

    def test_cell_count_checked(self):
        """Cell count must match the dimensions."""
        with pytest.raises(ValueError):
            Pattern(2, 2, [True])

    def test_empty_pattern(self):
        """Zero-sized patterns are degenerate."""
        with pytest.raises(DegenerateGridError):
            Pattern(0, 0, [])

    def test_equality(self):
        """Patterns compare by dimensions and cells."""
        assert Pattern(1, 2, [True, False]) == Pattern.from_strings(["O", "."])
        assert Pattern(2, 1, [True, False]) != Pattern(1, 2, [True, False])


class TestPlaintext:
    """Test the plaintext (.cells) parser."""

    def test_glider(self):
        """Glider with comments parses to a 3x3 pattern."""
        text = "!Name: Glider\n!\n.O.\n..O\nOOO\n"
        pattern = plaintext.parse(text)
        assert (pattern.width, pattern.height) == (3, 3)
        assert np.array_equal(pattern.to_array(), np.array(GLIDER_ROWS))

    def test_hash_comments_and_star_cells(self):
        """'#' lines are comments and '*' is alive."""
        pattern = plaintext.parse("# comment\n**\n*.\n")
        assert np.array_equal(pattern.to_array(), np.array([[True, True], [True, False]]))

    def test_short_rows_padded(self):
        """Rows shorter than the widest row are padded with dead cells."""
        pattern = plaintext.parse(".O\n..O\nOOO\n")
        assert pattern.width == 3
        assert np.array_equal(pattern.to_array(), np.array(GLIDER_ROWS))

    def test_blank_line_is_dead_row(self):
        """An empty line inside the pattern is a row of dead cells."""
        pattern = plaintext.parse("O.O\n\nO.O\n")
        assert pattern.height == 3
        assert pattern.to_array()[1].tolist() == [False, False, False]

    def test_invalid_character(self):
        """Unknown characters are fatal and report the line."""
        with pytest.raises(PatternFormatError, match="line 2"):
            plaintext.parse("...\n.x.\n")

    def test_no_rows(self):
        """A file of only comments has no pattern."""
        with pytest.raises(PatternFormatError, match="no rows"):
            plaintext.parse("!only a comment\n")


class TestRle:
    """Test the RLE parser."""

    def test_glider(self):
        """Canonical glider decodes row-major."""
        pattern = rle.parse("x = 3, y = 3\nbo$2bo$3o!")
        assert (pattern.width, pattern.height) == (3, 3)
        assert pattern.cells.tolist() == [False, True, False, False, False, True, True, True, True]

    def test_comments_and_rule(self):
        """Comment lines are skipped and extra header keys ignored."""
        text = "#N Glider\n#C A comment\nx = 3, y = 3, rule = B3/S23\nbo$2bo$3o!\n"
        assert np.array_equal(rle.parse(text).to_array(), np.array(GLIDER_ROWS))

    def test_stream_over_several_lines(self):
        """Runs may continue across lines."""
        pattern = rle.parse("x = 3, y = 3\nbo$2b\no$3o\n!")
        assert np.array_equal(pattern.to_array(), np.array(GLIDER_ROWS))

    def test_row_end_count(self):
        """'n$' ends the row and adds n - 1 dead rows."""
        pattern = rle.parse("x = 2, y = 4\n2o3$2o!")
        assert pattern.to_array().tolist() == [
            [True, True],
            [False, False],
            [False, False],
            [True, True],
        ]

    def test_missing_rows_padded(self):
        """Rows not written before '!' are dead."""
        pattern = rle.parse("x = 4, y = 3\no!")
        assert pattern.count_alive() == 1
        assert pattern.cells.size == 12

    def test_text_after_terminator_ignored(self):
        """Anything after '!' is ignored."""
        pattern = rle.parse("x = 1, y = 1\no!\nthis is trailing text\n")
        assert pattern.cells.tolist() == [True]

    def test_rule_value_with_comma(self):
        """Commas inside the rule value don't split the header."""
        pattern = rle.parse("x = 3, y = 3, rule = B3/S23:P10,10\nbo$2bo$3o!")
        assert pattern.count_alive() == 5
        assert np.array_equal(pattern.to_array(), np.array(GLIDER_ROWS))

    def test_header_rule_with_comma(self):
        """parse_header keeps only x and y from a bounded-grid rule header."""
        assert rle.parse_header("x=4,y=2,rule=B3/S23:T10,8") == (4, 2)

    def test_header_without_spaces(self):
        """Header may omit spaces."""
        assert rle.parse_header("x=5,y=2") == (5, 2)

    def test_stream_before_header(self):
        """Stream content before the size header is fatal."""
        with pytest.raises(PatternFormatError, match="before"):
            rle.parse("bo$2bo$3o!\nx = 3, y = 3\n")

    def test_missing_header(self):
        """Empty RLE has no header."""
        with pytest.raises(PatternFormatError, match="Missing"):
            rle.parse("#C nothing here\n")

    @pytest.mark.parametrize("header,message", [
        ("x = 3", "missing 'y"),
        ("y = 3, z = 1", "missing 'x"),
        ("x = a, y = 3", "not an integer"),
        ("x = 0, y = 3", "must be positive"),
        ("x = 3 y = 3", "not an integer"),
    ])
    def test_bad_header(self, header, message):
        """Malformed headers are fatal."""
        with pytest.raises(PatternFormatError, match=message):
            rle.parse(header + "\no!")

    def test_unknown_symbol(self):
        """Unknown stream symbols are fatal."""
        with pytest.raises(PatternFormatError, match="Unknown symbol 'z'"):
            rle.parse("x = 3, y = 1\noz!")

    def test_row_wider_than_declared(self):
        """A run past the declared width is fatal."""
        with pytest.raises(PatternFormatError, match="wider"):
            rle.parse("x = 2, y = 1\n3o!")

    def test_more_rows_than_declared(self):
        """Rows past the declared height are fatal."""
        with pytest.raises(PatternFormatError, match="more rows"):
            rle.parse("x = 1, y = 1\no$o!")

    def test_dangling_count(self):
        """A count without a tag before '!' is fatal."""
        with pytest.raises(PatternFormatError, match="not followed"):
            rle.parse("x = 2, y = 1\no2!")


class TestLife105:
    """Test the Life 1.05 parser."""

    def test_glider(self):
        """Header, description and position lines are comments."""
        text = "#Life 1.05\n#D Glider\n#N\n#P -1 -1\n.*.\n..*\n***\n"
        assert np.array_equal(life105.parse(text).to_array(), np.array(GLIDER_ROWS))

    def test_non_square_pattern(self):
        """Width comes from line length, not a square assumption."""
        pattern = life105.parse("#Life 1.05\n*.*.*\n.*.*.\n")
        assert (pattern.width, pattern.height) == (5, 2)

    def test_o_is_not_a_cell(self):
        """Only '.' and '*' are valid in Life 1.05."""
        with pytest.raises(PatternFormatError, match="'O'"):
            life105.parse("#Life 1.05\n.O.\n")

    def test_sniff(self):
        """The header line identifies the format."""
        assert life105.sniff("#Life 1.05\n*\n")
        assert not life105.sniff("#Life 1.06\n0 0\n")
        assert not life105.sniff("!Name: x\n*\n")


class TestLoader:
    """Test format detection and file loading."""

    def test_detect_by_extension(self):
        """Extension picks the format, unknown extensions fall back to plaintext."""
        assert detect_format("glider.rle", "x = 3, y = 3") == "rle"
        assert detect_format("glider.cells", ".O.") == "plaintext"
        assert detect_format("glider.lif", ".*.") == "life105"
        assert detect_format("glider.pattern", ".O.") == "plaintext"

    def test_detect_by_header(self):
        """Life 1.05 header wins over the extension."""
        assert detect_format("glider.txt", "#Life 1.05\n.*.\n") == "life105"

    def test_load_rle_file(self, tmp_path):
        """RLE file on disk loads by extension."""
        path = tmp_path / "glider.rle"
        path.write_text("#N Glider\nx = 3, y = 3\nbo$2bo$3o!\n")
        pattern = load_pattern(path)
        assert np.array_equal(pattern.to_array(), np.array(GLIDER_ROWS))

    def test_load_with_explicit_format(self, tmp_path):
        """Explicit format overrides detection."""
        path = tmp_path / "glider.dat"
        path.write_text("x = 3, y = 3\nbo$2bo$3o!\n")
        assert load_pattern(path, "rle").count_alive() == 5

    def test_every_format_agrees(self, tmp_path):
        """The same glider loads identically from all three formats."""
        files = {
            "glider.cells": "!Name: Glider\n.O.\n..O\nOOO\n",
            "glider.rle": "x = 3, y = 3\nbo$2bo$3o!\n",
            "glider.lif": "#Life 1.05\n.*.\n..*\n***\n",
        }
        patterns = []
        for name, text in files.items():
            path = tmp_path / name
            path.write_text(text)
            patterns.append(load_pattern(path))
        assert patterns[0] == patterns[1] == patterns[2]

    @pytest.mark.parametrize("module,name,text", [
        (plaintext, "glider.cells", ".O.\n..O\nOOO\n"),
        (rle, "glider.rle", "x = 3, y = 3\nbo$2bo$3o!\n"),
        (life105, "glider.lif", "#Life 1.05\n.*.\n..*\n***\n"),
    ])
    def test_format_load_reads_file(self, tmp_path, module, name, text):
        """Each format's load() reads and parses a file from disk."""
        path = tmp_path / name
        path.write_text(text)
        pattern = module.load(path)
        assert np.array_equal(pattern.to_array(), np.array(GLIDER_ROWS))

    def test_format_load_missing_file(self, tmp_path):
        """Format load() reports missing files as PatternFileError."""
        with pytest.raises(PatternFileError):
            rle.load(tmp_path / "missing.rle")

    def test_non_utf8_file_is_format_error(self, tmp_path):
        """A readable file that isn't UTF-8 text is a parse failure, not a read failure."""
        path = tmp_path / "binary.cells"
        path.write_bytes(b"\xff\xfe\x00O.")
        with pytest.raises(PatternFormatError, match="not a UTF-8 text file") as exc_info:
            load_pattern(path)
        assert not isinstance(exc_info.value, PatternFileError)
        assert exc_info.value.stage == "pattern parse"

    def test_missing_file(self, tmp_path):
        """Missing files raise PatternFileError."""
        with pytest.raises(PatternFileError, match="Could not open file"):
            load_pattern(tmp_path / "missing.rle")

    def test_file_error_is_os_error(self, tmp_path):
        """PatternFileError is also an OSError."""
        with pytest.raises(OSError):
            load_pattern(tmp_path / "missing.cells")

    def test_unknown_format_name(self):
        """Unknown format names are rejected."""
        with pytest.raises(PatternFormatError, match="Unknown pattern format"):
            parse_pattern(".O.", "mcell")
