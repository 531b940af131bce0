"""Interactive terminal front end for the Jokebook API.

The console shows one of two views, the jokes feed or the paginated
person cards, and reads single-letter commands:

* ``j`` – show jokes (fetches a fresh batch)
* ``r`` – refresh jokes
* ``p`` – show persons
* ``n`` / ``b`` – next / previous person page
* ``a`` – add a person (four sequential prompts)
* ``q`` – quit

Usage:
    python jokebook_console.py --base-url http://localhost:3000
"""

from __future__ import annotations

import argparse
import logging
import os
from typing import Callable, List, Optional

from jokebook_client import JokebookAPI
from jokebook_state import ClientState, LocalStorage, Mode, page_count, parse_number

Prompt = Callable[[str], str]

DEFAULT_CACHE_FILE = os.path.join(os.path.expanduser("~"), ".jokebook_cache.json")

HELP = "[j] jokes  [r] refresh  [p] persons  [n] next  [b] previous  [a] add  [q] quit"


def render_jokes(state: ClientState) -> List[str]:
    lines = [f"JOKES: {len(state.jokes)}"]
    for joke in state.jokes:
        lines.append("")
        lines.append(f"  {joke.get('title', '')}")
        lines.append(f"    {joke.get('content', '')}")
    return lines


def render_persons(state: ClientState) -> List[str]:
    lines = [f"Persons: {len(state.persons)}"]
    for person in state.page_items():
        lines.append("")
        lines.append(f"  {str(person.get('name', '')).upper()}")
        lines.append(f"    Marks: {person.get('marks')}")
        lines.append(f"    Age: {person.get('age')}")
        lines.append(f"    DOB: {person.get('dob')}")
    lines.append("")
    previous = "< Previous" if state.has_previous() else "  --------"
    following = "Next >" if state.has_next() else "------"
    lines.append(
        f"{previous}   page {state.page + 1}/{page_count(len(state.persons), state.page_size)}   {following}"
    )
    return lines


def render(state: ClientState) -> str:
    """Return the full screen for the current state."""
    header = "== Jokebook ==  " + ("[Jokes]  Persons" if state.mode is Mode.JOKES else "Jokes  [Persons]")
    lines = [header, ""]
    if state.loading:
        lines.append("Loading...")
    elif state.error:
        lines.append(f"Error: {state.error}")
    elif state.mode is Mode.JOKES:
        lines.extend(render_jokes(state))
    else:
        lines.extend(render_persons(state))
    lines.extend(["", HELP])
    return "\n".join(lines)


def prompt_new_person(state: ClientState, ask: Prompt = input) -> Optional[str]:
    """Ask for the four fields one after another and submit them.

    Each answer is checked as soon as it is given, so the user is not
    asked for the age after typing an invalid mark.  Returns the message
    to show, or ``None`` if the user left the name empty (nothing to
    report).
    """
    name = ask("Enter Name: ").strip()
    if not name:
        return None
    marks = ask("Enter Marks: ").strip()
    if parse_number(marks) is None:
        return "Invalid Marks"
    age = ask("Enter Age: ").strip()
    if parse_number(age) is None:
        return "Invalid Age"
    dob = ask("Enter DOB (YYYY-MM-DD): ").strip()
    if not dob:
        return "Invalid DOB"
    _, message = state.add_person(name, marks, age, dob)
    return message


def handle_command(state: ClientState, command: str, ask: Prompt = input) -> Optional[str]:
    """Apply one command to ``state``; returns a message for the user, if any."""
    command = command.strip().lower()
    if command == "j":
        state.show_jokes()
    elif command == "r":
        if state.mode is not Mode.JOKES:
            return "Refresh is only available in the jokes view"
        state.refresh_jokes()
    elif command == "p":
        state.show_persons()
    elif command == "n":
        if state.mode is Mode.PERSONS and not state.next_page():
            return "Already on the last page"
    elif command == "b":
        if state.mode is Mode.PERSONS and not state.previous_page():
            return "Already on the first page"
    elif command == "a":
        if state.mode is not Mode.PERSONS:
            return "Switch to the persons view (p) to add a person"
        return prompt_new_person(state, ask)
    elif command:
        return f"Unknown command: {command}"
    return None


def run(state: ClientState, ask: Prompt = input, out: Callable[[str], None] = print) -> None:
    """Main loop: render, read a command, repeat until ``q`` or EOF."""
    state.start()
    while True:
        out(render(state))
        try:
            command = ask("> ")
        except (EOFError, KeyboardInterrupt):
            out("")
            break
        if command.strip().lower() == "q":
            break
        message = handle_command(state, command, ask)
        if message:
            out(message)


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Browse jokes and person records from a Jokebook server.")
    ap.add_argument(
        "--base-url",
        default=os.getenv("JOKEBOOK_BASE_URL", "http://localhost:3000"),
        help="Server base URL (default: $JOKEBOOK_BASE_URL or http://localhost:3000)",
    )
    ap.add_argument("--cache-file", default=DEFAULT_CACHE_FILE, help="Where the last joke batch is cached")
    ap.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    api = JokebookAPI(base_url=args.base_url)
    state = ClientState(api, LocalStorage(args.cache_file))
    try:
        run(state)
    finally:
        api.session.close()


if __name__ == "__main__":
    main()
