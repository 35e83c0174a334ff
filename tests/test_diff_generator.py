import pytest

from models.diff import DiffKind, DiffLine
from services.diff_generator import DiffGenerator, split_lines


@pytest.fixture
def differ():
    return DiffGenerator()


def test_split_keeps_carriage_returns():
    assert split_lines("a\r\nb") == ["a\r", "b"]
    assert split_lines("") == [""]
    assert split_lines("a\n") == ["a", ""]


@pytest.mark.parametrize(
    "left, right",
    [
        ("", ""),
        ("SELECT 1", ""),
        ("", "a\nb\nc"),
        ("a\nb\nc\nd", "x\ny"),
        ("same\n", "same"),
    ],
)
def test_length_is_longest_side(differ, left, right):
    lines = differ.generate_diff(left, right)
    assert len(lines) == max(len(split_lines(left)), len(split_lines(right)))


def test_identical_texts_are_all_equal(differ):
    text = "SELECT name\nFROM employees\nWHERE salary > 100000"
    lines = differ.generate_diff(text, text)

    assert all(line.kind == DiffKind.EQUAL for line in lines)
    stats = differ.statistics(lines)
    assert stats.unchanged == 3
    assert stats.additions == 0
    assert stats.deletions == 0


def test_two_empty_texts(differ):
    lines = differ.generate_diff("", "")
    assert lines == [
        DiffLine(kind=DiffKind.EQUAL, left_text="", right_text="", left_line_number=1, right_line_number=1)
    ]


def test_trailing_line_is_insert(differ):
    left = "SELECT *\nFROM orders"
    lines = differ.generate_diff(left, left + "\nLIMIT 5")

    assert [line.kind for line in lines] == [DiffKind.EQUAL, DiffKind.EQUAL, DiffKind.INSERT]
    assert lines[2].right_text == "LIMIT 5"
    assert lines[2].right_line_number == 3
    assert lines[2].left_text is None
    assert lines[2].left_line_number is None


def test_leading_insert_does_not_realign(differ):
    lines = differ.generate_diff("a\nb", "new\na\nb")
    assert [line.kind for line in lines] == [DiffKind.REPLACE, DiffKind.REPLACE, DiffKind.INSERT]


def test_replace_scenario(differ):
    lines = differ.generate_diff("SELECT a\nSELECT b", "SELECT a\nSELECT c")

    assert lines == [
        DiffLine(
            kind=DiffKind.EQUAL,
            left_text="SELECT a",
            right_text="SELECT a",
            left_line_number=1,
            right_line_number=1,
        ),
        DiffLine(
            kind=DiffKind.REPLACE,
            left_text="SELECT b",
            right_text="SELECT c",
            left_line_number=2,
            right_line_number=2,
        ),
    ]
    stats = differ.statistics(lines)
    assert (stats.additions, stats.deletions, stats.unchanged) == (1, 1, 1)


def test_delete_scenario(differ):
    lines = differ.generate_diff("A\nB", "A")

    assert lines[0] == DiffLine(kind=DiffKind.EQUAL, left_text="A", right_text="A", left_line_number=1, right_line_number=1)
    assert lines[1] == DiffLine(kind=DiffKind.DELETE, left_text="B", left_line_number=2)
    assert lines[1].right_line_number is None
    stats = differ.statistics(lines)
    assert (stats.additions, stats.deletions, stats.unchanged) == (0, 1, 1)


def test_carriage_return_makes_lines_differ(differ):
    lines = differ.generate_diff("SELECT 1\r\nFROM t", "SELECT 1\nFROM t")
    assert lines[0].kind == DiffKind.REPLACE
    assert lines[0].left_text == "SELECT 1\r"
    assert lines[1].kind == DiffKind.EQUAL


@pytest.mark.parametrize(
    "left, right",
    [
        ("a\nb\nc", "a\nx"),
        ("a", "b\nc\nd"),
        ("1\n2\n3\n4", "1\n2\n3\n4"),
        ("q\nw", "e\nr"),
    ],
)
def test_statistics_formulas(differ, left, right):
    lines = differ.generate_diff(left, right)
    kinds = [line.kind for line in lines]
    stats = differ.statistics(lines)

    assert stats.additions == kinds.count(DiffKind.INSERT) + kinds.count(DiffKind.REPLACE)
    assert stats.deletions == kinds.count(DiffKind.DELETE) + kinds.count(DiffKind.REPLACE)
    assert stats.unchanged == kinds.count(DiffKind.EQUAL)


def test_line_numbers_follow_presence(differ):
    for i, line in enumerate(differ.generate_diff("a\nb\nc", "a")):
        assert (line.left_line_number == i + 1) == (line.left_text is not None)
        assert (line.right_line_number == i + 1) == (line.right_text is not None)


def test_render_unified(differ):
    lines = differ.generate_diff("SELECT a\nFROM t\nWHERE x", "SELECT a\nFROM u")
    assert differ.render_unified(lines) == "  SELECT a\n- FROM t\n+ FROM u\n- WHERE x"


def test_render_split(differ):
    lines = differ.generate_diff("a", "a\nb")
    assert differ.render_split(lines) == [("a", "a"), ("", "b")]
