# run_interactive.py

from __future__ import annotations

import logging
import sys

from santa_draw.config import LOG_FORMAT
from santa_draw.errors import ResolutionFailed, SantaError
from santa_draw.group import Group
from santa_draw.resolution.exact import has_valid_assignment

# Move up one line and clear it, so a revealed name disappears again
HIDE_LINE = "\x1b[1A\x1b[K"


def _prompt(text: str) -> str:
    return input(text).strip()


def _get_name(number: int, group: Group) -> str | None:
    """Ask for a group member; empty input means 'done'."""
    while True:
        name = _prompt(f"Name {number}: ")
        if not name:
            return None
        if not group.contains_name(name):
            print(f"Invalid name: {name}")
            continue
        return name


def _collect_exclusions(group: Group, directed: bool) -> None:
    arrow = "->" if directed else "<->"
    while True:
        name1 = _get_name(1, group)
        if name1 is None:
            return
        name2 = _get_name(2, group)
        if name2 is None:
            return
        try:
            if directed:
                group.exclude(name1, name2)
            else:
                group.exclude_pair(name1, name2)
        except SantaError as e:
            print(f"Error: {e}")
            continue
        print(f"OK, excluding the pair {name1} {arrow} {name2}")
        print("Someone else?")


def interactive_build_group() -> Group:
    """
    Prompt loop:
      - names, one per line, empty line ends the list
      - pairs that should not give each other gifts
      - pairs where person 1 should not give person 2 a gift
    """
    group = Group()

    print("\nWho's in?")
    print("(List one name per line and press enter, end the list with an empty line.)\n")
    while True:
        name = _prompt("Name: ")
        if not name:
            break
        try:
            group.add(name)
        except SantaError as e:
            print(f"Error: {e}")

    print("\nAlright. Are there any pairs that should not give each other gifts?")
    print("If you're done, just press enter.")
    _collect_exclusions(group, directed=False)

    print("\nAnd now, are there any pairs where person 1 should not give person 2 a gift?")
    print("If you're done, just press enter.")
    _collect_exclusions(group, directed=True)

    return group


def main():
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)

    print("Secret Santa basket draw")

    # 1) Build the group interactively
    group = interactive_build_group()

    print("\nGreat! Now we'll draw the names.")

    # 2) Draw
    try:
        assignment = group.assign()
    except ResolutionFailed as e:
        print(f"\nHmm, I'm sorry. {e}")
        if has_valid_assignment(group):
            print("A valid assignment does exist, though. Just run the draw again.")
        else:
            print("There is no assignment at all that satisfies these exclusions.")
        sys.exit(1)
    except SantaError as e:
        print(f"Error: {e}")
        sys.exit(1)

    # 3) Reveal one by one
    print("I'll show a name, first. That person should come to the computer,")
    print("without other people seeing the screen.")
    print("Press enter to reveal the name, press enter again to hide it.\n")

    for giver, recipient in assignment:
        input(f"{giver}, are you ready? Press enter to see the name.")
        input(f"You'll give a gift to {recipient}! (Press enter to hide the name)")
        print(f"{HIDE_LINE}******\n")

    print("Happy gift-giving!")


if __name__ == "__main__":
    main()
