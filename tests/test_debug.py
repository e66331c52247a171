import pytest

from raycer.debug import ENABLED_GROUPS, debug_log


@pytest.mark.parametrize("group", sorted(ENABLED_GROUPS))
def test_enabled_group_is_printed(group, capsys):
    debug_log(group, "loading level 'map_test'")
    out = capsys.readouterr().out
    assert out == f"# DEBUG: {group}: loading level 'map_test'\n"


def test_disabled_group_is_silent(capsys):
    debug_log("PHYSICS", "ignored")
    assert capsys.readouterr().out == ""


def test_group_names_are_case_sensitive(capsys):
    debug_log("menu", "ignored")
    assert capsys.readouterr().out == ""


def test_message_is_printed_verbatim(capsys):
    debug_log("GENERAL", "value {x} 100%")
    assert capsys.readouterr().out == "# DEBUG: GENERAL: value {x} 100%\n"


def test_each_call_prints_one_line(capsys):
    debug_log("UI", "first")
    debug_log("CONTROL", "second")
    assert capsys.readouterr().out.splitlines() == [
        "# DEBUG: UI: first",
        "# DEBUG: CONTROL: second",
    ]