from grafboard.panel import Panel


def test_panel_keeps_title_and_type():
    panel = Panel(title="Some panel", type="text")

    assert panel.title == "Some panel"
    assert panel.type == "text"


def test_optional_properties_are_unset_by_default():
    panel = Panel(title="", type="text")

    assert panel.height is None
    assert panel.description is None
    assert panel.datasource is None
    assert panel.repeat is None
    assert panel.transparent is False
    assert panel.targets == []


def test_panels_do_not_share_targets():
    first = Panel(title="a", type="text")
    second = Panel(title="b", type="text")

    first.targets.append("query")

    assert second.targets == []
    assert first.targets == ["query"]


def test_panels_compare_by_value():
    assert Panel(title="a", type="table", span=6) == Panel(title="a", type="table", span=6)
    assert Panel(title="a", type="table", span=6) != Panel(title="a", type="table", span=4)