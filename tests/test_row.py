from grafboard import row as r
from grafboard import text as text_mod


def _board():
    return r.Board("")


def test_new_rows_can_be_created():
    panel = r.Row(_board(), "Some row")

    assert panel.builder.title == "Some row"
    assert panel.builder.show_title is True


def test_row_is_added_to_board():
    board = _board()
    panel = r.Row(board, "Some row")

    assert board.rows == [panel.builder]


def test_board_add_row_appends_in_order():
    board = _board()
    first = board.add_row("a")
    second = board.add_row("b")

    assert [row.title for row in board.rows] == ["a", "b"]
    assert board.rows[0] is first
    assert board.rows[1] is second


def test_rows_can_have_hidden_title():
    panel = r.Row(_board(), "", r.hide_title())

    assert panel.builder.show_title is False


def test_rows_can_have_visible_title():
    panel = r.Row(_board(), "", r.show_title())

    assert panel.builder.show_title is True


def test_rows_can_have_time_series():
    panel = r.Row(_board(), "", r.with_time_series("HTTP Rate"))

    assert len(panel.builder.panels) == 1
    assert panel.builder.panels[0].type == "timeseries"
    assert panel.builder.panels[0].title == "HTTP Rate"


def test_rows_can_have_text_panels():
    panel = r.Row(_board(), "", r.with_text("HTTP Rate"))

    assert len(panel.builder.panels) == 1
    assert panel.builder.panels[0].type == "text"


def test_text_panel_options_are_applied():
    panel = r.Row(_board(), "", r.with_text("Notes", text_mod.markdown("*lala*")))

    assert panel.builder.panels[0].settings.content == "*lala*"
    assert panel.builder.panels[0].settings.mode == "markdown"


def test_rows_can_have_table_panels():
    panel = r.Row(_board(), "", r.with_table("Some table"))

    assert len(panel.builder.panels) == 1
    assert panel.builder.panels[0].type == "table"


def test_rows_can_have_single_stat_panels():
    panel = r.Row(_board(), "", r.with_single_stat("Some stat"))

    assert len(panel.builder.panels) == 1
    assert panel.builder.panels[0].type == "singlestat"


def test_panels_keep_their_order():
    panel = r.Row(
        _board(),
        "",
        r.with_text("first"),
        r.with_table("second"),
        r.with_single_stat("third"),
    )

    assert [p.title for p in panel.builder.panels] == ["first", "second", "third"]


def test_rows_can_have_repeated_panels():
    panel = r.Row(_board(), "", r.repeat_for("repeated"))

    assert panel.builder.repeat == "repeated"


def test_rows_can_be_collapsed_by_default():
    panel = r.Row(_board(), "", r.collapse())

    assert panel.builder.collapse is True


def test_rows_are_not_collapsed_unless_asked():
    panel = r.Row(_board(), "")

    assert panel.builder.collapse is False
    assert panel.builder.repeat is None