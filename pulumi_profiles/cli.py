"""Command-line entry point for selecting and managing Pulumi profiles."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .config import (
    Profile,
    add_profile,
    delete_profile,
    edit_profile,
    read_pulumi_profiles,
)
from .ui import ProfileSelector, prompt_for_backend_url, prompt_for_profile_details

VERSION = "0.1.0"
ENV_VAR = "PULUMI_BACKEND_URL"


def current_profile_path() -> Path:
    """Return the file that records the active profile's name."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise RuntimeError("Unable to determine home directory") from exc
    return home / ".pulumi" / "current_profile"


def shell_command(backend_url: str | None, shell: str) -> str:
    """Return the command that sets or clears the backend variable in the given shell."""
    if "nu" in shell:
        if backend_url is None:
            return f"hide-env {ENV_VAR}"
        return f'$env.{ENV_VAR} = "{backend_url}"'
    if "fish" in shell:
        if backend_url is None:
            return f"set -e {ENV_VAR}"
        return f'set -gx {ENV_VAR} "{backend_url}"'
    if backend_url is None:
        return f"unset {ENV_VAR}"
    return f'export {ENV_VAR}="{backend_url}"'


def print_shell_command_with_backend(backend_url: str | None) -> None:
    """Print the shell command for the shell named by $SHELL, without a newline."""
    sys.stdout.write(shell_command(backend_url, os.environ.get("SHELL", "")))
    sys.stdout.flush()


def print_shell_command(profile_name: str | None) -> None:
    """Print the shell command for a profile, looked up by name."""
    if profile_name is None:
        print_shell_command_with_backend(None)
        return
    try:
        profiles = read_pulumi_profiles()
    except (OSError, ValueError, RuntimeError):
        profiles = []
    backend = next((p.backend for p in profiles if p.name == profile_name), profile_name)
    print_shell_command_with_backend(backend)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pulumi-profile-selector",
        description="Interactive Pulumi profile selector",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument(
        "-a", "--activate", metavar="PROFILE",
        help="Activate a specific profile by name (skips interactive selection)",
    )
    parser.add_argument(
        "-d", "--deactivate", action="store_true", help="Deactivate PULUMI_BACKEND_URL"
    )
    parser.add_argument(
        "-n", "--new", metavar="PROFILE",
        help="Set a profile name that is not available in the list",
    )
    parser.add_argument(
        "-c", "--current", action="store_true",
        help="Output the profile name only (for setting in current shell)",
    )
    parser.add_argument("--add", action="store_true", help="Add a new profile interactively")
    parser.add_argument(
        "--edit", metavar="PROFILE", help="Edit an existing profile's backend URL"
    )
    parser.add_argument("--delete", metavar="PROFILE", help="Delete a profile")
    parser.add_argument("-l", "--list", action="store_true", help="List all profiles")
    return parser


def _write_current(path: Path, name: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(name, encoding="utf-8")


def _find(profiles: list[Profile], name: str | None) -> Profile | None:
    return next((p for p in profiles if p.name == name), None)


def _run(args: argparse.Namespace) -> int:
    current_path = current_profile_path()
    shell_mode = args.current

    if args.add:
        name, backend = prompt_for_profile_details()
        add_profile(name, backend)
        print(f"Profile '{name}' added successfully")
        return 0

    if args.edit is not None:
        new_backend = prompt_for_backend_url()
        edit_profile(args.edit, new_backend)
        print(f"Profile '{args.edit}' updated successfully")
        return 0

    if args.delete is not None:
        delete_profile(args.delete)
        print(f"Profile '{args.delete}' deleted successfully")
        return 0

    if args.list:
        profiles = read_pulumi_profiles()
        if not profiles:
            print("No profiles found.")
        else:
            print("Available profiles:")
            for profile in profiles:
                print(f"  {profile.name} -> {profile.backend}")
        return 0

    if args.deactivate:
        if shell_mode:
            print_shell_command(None)
        elif current_path.exists():
            current_path.unlink()
            print("Pulumi profile deactivated")
        else:
            print("No active Pulumi profile to deactivate")
        return 0

    if args.new is not None:
        if shell_mode:
            print_shell_command(args.new)
        else:
            _write_current(current_path, args.new)
            print(f"Pulumi profile activated: {args.new}")
        return 0

    profiles = read_pulumi_profiles()
    if not profiles:
        print("No Pulumi profiles found in ~/.pulumi/profiles.json", file=sys.stderr)
        print("Use --add to create your first profile", file=sys.stderr)
        return 1

    if args.activate is not None:
        selected = _find(profiles, args.activate)
        if selected is None:
            print(f"Profile '{args.activate}' not found in Pulumi profiles", file=sys.stderr)
            print("Available profiles:", file=sys.stderr)
            for profile in profiles:
                print(f"  {profile.name}", file=sys.stderr)
            return 1
    else:
        chosen_name = ProfileSelector(profiles).run()
        selected = _find(profiles, chosen_name) if chosen_name is not None else None

    if selected is None:
        print("No profile selected")
        return 1

    if shell_mode:
        print_shell_command_with_backend(selected.backend)
    else:
        _write_current(current_path, selected.name)
        print(f"Pulumi profile activated: {selected.name} ({selected.backend})")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the profile selector and return the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        return _run(args)
    except (OSError, ValueError, LookupError, RuntimeError, KeyboardInterrupt, EOFError) as exc:
        message = str(exc) or type(exc).__name__
        print(f"Error: {message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())