"""
Tests for the terminal client view.
"""
from __future__ import annotations

import pytest

from jokebook_console import handle_command, prompt_new_person, render, run
from jokebook_state import ClientState, LocalStorage, Mode

from .test_client_state import FakeAPI, people


def scripted(*answers):
    answers = list(answers)
    asked = []

    def ask(question):
        asked.append(question)
        if not answers:
            raise EOFError
        return answers.pop(0)

    ask.asked = asked
    return ask


@pytest.fixture()
def state(tmp_path):
    return ClientState(FakeAPI(people(7)), LocalStorage(tmp_path / "cache.json"))


def test_render_jokes(state):
    state.show_jokes()
    screen = render(state)
    assert "JOKES: 1" in screen
    assert "setup" in screen and "delivery" in screen


def test_render_persons_first_page(state):
    state.show_persons()
    screen = render(state)
    assert "Persons: 7" in screen
    assert "P0" in screen and "P4" in screen
    assert "P5" not in screen
    assert "page 1/2" in screen
    assert "Next >" in screen
    assert "< Previous" not in screen


def test_render_loading_and_error(state):
    assert "Loading..." in render(state)
    state.api.fail_persons = True
    state.show_persons()
    assert "Failed to fetch persons. Please try again later." in render(state)


def test_prompt_new_person_submits_answers(state):
    state.show_persons()
    ask = scripted("Alice", "90", "21", "2003-01-01")
    assert prompt_new_person(state, ask) == "User added successfully!"
    assert ask.asked == ["Enter Name: ", "Enter Marks: ", "Enter Age: ", "Enter DOB (YYYY-MM-DD): "]
    assert state.persons[-1]["name"] == "Alice"


def test_prompt_new_person_stops_at_first_empty_answer(state):
    ask = scripted("Alice", "")
    assert prompt_new_person(state, ask) == "Invalid Marks"
    assert ask.asked == ["Enter Name: ", "Enter Marks: "]
    assert ("add" not in [call[0] for call in state.api.calls if isinstance(call, tuple)])


def test_prompt_new_person_empty_name_is_silent(state):
    assert prompt_new_person(state, scripted("")) is None


def added(state):
    return [call for call in state.api.calls if isinstance(call, tuple) and call[0] == "add"]


def test_prompt_new_person_stops_right_after_invalid_marks(state):
    ask = scripted("Alice", "ninety", "21", "2003-01-01")
    assert prompt_new_person(state, ask) == "Invalid Marks"
    assert ask.asked == ["Enter Name: ", "Enter Marks: "]
    assert added(state) == []


def test_prompt_new_person_stops_right_after_invalid_age(state):
    ask = scripted("Alice", "90", "1_000", "2003-01-01")
    assert prompt_new_person(state, ask) == "Invalid Age"
    assert ask.asked == ["Enter Name: ", "Enter Marks: ", "Enter Age: "]
    assert added(state) == []


def test_prompt_new_person_empty_dob(state):
    ask = scripted("Alice", "90", "21", " ")
    assert prompt_new_person(state, ask) == "Invalid DOB"
    assert len(ask.asked) == 4
    assert added(state) == []


def test_handle_command_navigation(state):
    assert handle_command(state, "p") is None
    assert state.mode is Mode.PERSONS
    assert handle_command(state, "b") == "Already on the first page"
    assert handle_command(state, "n") is None
    assert state.page == 1
    assert handle_command(state, "n") == "Already on the last page"
    assert handle_command(state, "r") == "Refresh is only available in the jokes view"
    assert handle_command(state, "x") == "Unknown command: x"
    assert handle_command(state, "j") is None
    assert state.mode is Mode.JOKES
    assert handle_command(state, "a") == "Switch to the persons view (p) to add a person"


def test_run_loop_until_quit(state):
    screens = []
    run(state, ask=scripted("p", "n", "q"), out=screens.append)
    assert "JOKES: 1" in screens[0]
    assert "Persons: 7" in screens[1]
    assert "page 2/2" in screens[2]


def test_run_loop_ends_on_eof(state):
    screens = []
    run(state, ask=scripted(), out=screens.append)
    assert len(screens) == 2
