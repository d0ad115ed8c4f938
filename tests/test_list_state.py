import pytest

from samlib.events import MockValue
from samlib.list_state import ListState, has_match


def _five():
    return ListState(
        [
            MockValue(1, "one"),
            MockValue(2, "two"),
            MockValue(3, "three"),
            MockValue(4, "four"),
            MockValue(5, "five"),
        ]
    )


def test_navigation():
    state = _five()
    state.up()
    state.down()
    state.down()
    state.up()
    state.mark()
    state.update_filter("o")
    state.down()
    state.mark()
    marked = state.marked_values()
    assert MockValue(2, "two") in marked
    assert MockValue(4, "four") in marked


@pytest.mark.parametrize(
    "needle, haystack, expected",
    [
        ("", "anything", True),
        ("o", "two", True),
        ("tw", "two", True),
        ("ow", "two", False),
        ("TWO", "two", True),
        ("1", "elem 2", False),
        ("1", "elem 12", True),
    ],
)
def test_has_match(needle, haystack, expected):
    assert has_match(needle, haystack) is expected


def test_empty_list_has_no_highlight():
    state = ListState([])
    assert state.highlighted_line is None
    state.down()
    state.up()
    assert state.highlighted_line is None
    assert state.mark() is None
    assert state.entr() is None


def test_cursor_stays_within_bounds():
    state = _five()
    for _ in range(10):
        state.down()
    assert state.highlighted_line == 4
    for _ in range(10):
        state.up()
    assert state.highlighted_line == 0


def test_filter_resets_cursor_when_out_of_range():
    state = _five()
    for _ in range(4):
        state.down()
    state.update_filter("o")
    assert [v.text() for v in state.current_displayed_values] == ["one", "two", "four"]
    assert state.highlighted_line == 0


def test_filter_with_no_match_clears_highlight_and_backspace_restores():
    state = _five()
    state.update_filter("z")
    assert state.current_displayed_values == []
    assert state.highlighted_line is None
    state.remove_last_char_from_filter()
    assert state.search_filter() == ""
    assert len(state.current_displayed_values) == 5
    assert state.highlighted_line == 0


def test_backspace_on_empty_filter_is_harmless():
    state = _five()
    state.remove_last_char_from_filter()
    assert state.search_filter() == ""


def test_mark_toggles():
    state = _five()
    assert state.mark() is True
    assert state.mark() is False
    assert state.marked_values() == set()


def test_entr_does_not_unmark():
    state = _five()
    assert state.entr() is True
    assert state.entr() is False
    assert state.marked_values() == {MockValue(1, "one")}


def test_mark_all_marks_displayed_only():
    state = _five()
    state.update_filter("f")
    state.mark_all()
    assert state.marked_values() == {MockValue(4, "four"), MockValue(5, "five")}
    assert all(marked for marked, _ in state.displayed_values())


def test_displayed_values_flags():
    state = _five()
    state.down()
    state.mark()
    flags = [(marked, v.text()) for marked, v in state.displayed_values()]
    assert flags[1] == (True, "two")
    assert sum(marked for marked, _ in flags) == 1