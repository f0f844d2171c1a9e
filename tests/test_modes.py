import io

import pytest

from fakeprinter.modes import AutomaticMode, SupervisedMode, UserMode


def _supervised(text):
    out = io.StringIO()
    return SupervisedMode(io.StringIO(text), out), out


def test_user_mode_is_abstract():
    with pytest.raises(TypeError):
        UserMode()


def test_new_mode_does_not_stop():
    mode, _ = _supervised("")
    assert mode.stop_printing() is False


def test_update_print_status_round_trip():
    mode = AutomaticMode(io.StringIO())
    mode.update_print_status(True)
    assert mode.stop_printing() is True
    mode.update_print_status(False)
    assert mode.stop_printing() is False


def test_continue_print_waits_for_empty_line():
    mode, out = _supervised("abc\n\nleftover\n")
    mode.continue_print()
    lines = out.getvalue().splitlines()
    assert lines == [
        "Inspect layer + Hit Enter to continue",
        "Invalid input. Please hit enter to continue",
        "Printing next layer",
    ]


def test_continue_print_at_end_of_input_proceeds():
    mode, out = _supervised("")
    mode.continue_print()
    assert out.getvalue().splitlines()[-1] == "Printing next layer"


def test_encountered_error_yes_stops():
    mode, out = _supervised("maybe\n\nY\n")
    mode.encountered_error()
    assert mode.stop_printing() is True
    text = out.getvalue()
    assert text.count("Invalid input. Please enter [y/n]") == 2
    assert "You chose Yes" in text


def test_encountered_error_no_continues():
    mode, out = _supervised("no\n")
    mode.update_print_status(True)
    mode.encountered_error()
    assert mode.stop_printing() is False
    assert "You chose No" in out.getvalue()


def test_encountered_error_without_input_raises():
    mode, _ = _supervised("")
    with pytest.raises(EOFError):
        mode.encountered_error()


def test_supervised_start_and_input_messages():
    mode, out = _supervised("")
    mode.start("Job1")
    mode.get_user_input()
    assert out.getvalue().splitlines() == [
        "Supervised Start: Printing file Job1",
        "Supervised GetUserInput",
    ]


def test_automatic_error_does_not_stop():
    out = io.StringIO()
    mode = AutomaticMode(out)
    mode.update_print_status(True)
    mode.encountered_error()
    assert mode.stop_printing() is False
    assert out.getvalue().strip() == "Error Encountered: Stopping printing immediately"


def test_automatic_messages():
    out = io.StringIO()
    mode = AutomaticMode(out)
    mode.continue_print()
    mode.start("Job1")
    mode.get_user_input()
    assert out.getvalue().splitlines() == [
        "Auto Mode: Continuing without user input",
        "Automatic Start: Printing file Job1",
        "Automatic GetUserInput",
    ]