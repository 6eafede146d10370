"""Interactive prompts for choosing and editing profiles."""

from __future__ import annotations

from collections.abc import Iterable

from prompt_toolkit import prompt
from prompt_toolkit.application import get_app
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.validation import Validator

from .config import Profile

PAGE_SIZE = 10
SELECT_HELP = "↑↓ to move, enter to select, type to filter"
NAME_HELP = "Enter a unique name for this profile"
BACKEND_HELP = "e.g., s3://my-bucket/state, file://./state, https://api.pulumi.com"


def format_profile_display(profile: Profile) -> str:
    """Return the line shown for a profile in listings and menus."""
    return f"{profile.name} -> {profile.backend}"


def _open_menu() -> None:
    get_app().current_buffer.start_completion(select_first=False)


class ProfileSelector:
    """Lets the user pick one profile from a filterable menu."""

    def __init__(self, profiles: Iterable[Profile]) -> None:
        self.profiles = list(profiles)

    def run(self) -> str | None:
        """Return the chosen profile's name, or None if nothing was chosen."""
        if not self.profiles:
            return None

        options = [format_profile_display(profile) for profile in self.profiles]
        completer = WordCompleter(options, sentence=True, match_middle=True)
        validator = Validator.from_callable(
            lambda text: text in options,
            error_message="Select one of the listed profiles",
            move_cursor_to_end=True,
        )

        try:
            answer = prompt(
                "Select Pulumi Profile: ",
                completer=completer,
                complete_while_typing=True,
                validator=validator,
                validate_while_typing=False,
                bottom_toolbar=SELECT_HELP,
                reserve_space_for_menu=PAGE_SIZE,
                pre_run=_open_menu,
            )
        except (KeyboardInterrupt, EOFError):
            return None

        return next(
            (profile.name for profile in self.profiles if format_profile_display(profile) == answer),
            None,
        )


def prompt_for_profile_details() -> tuple[str, str]:
    """Ask for a new profile's name and backend URL."""
    name = prompt("Profile name: ", bottom_toolbar=NAME_HELP)
    backend = prompt("Backend URL: ", bottom_toolbar=BACKEND_HELP)
    return name, backend


def prompt_for_backend_url() -> str:
    """Ask for a replacement backend URL."""
    return prompt("New backend URL: ", bottom_toolbar=BACKEND_HELP)