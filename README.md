# pulumi-profiles

A small command-line tool for switching between Pulumi backends. Each profile
pairs a name with a backend URL (`s3://my-bucket/state`, `file://./state`,
`https://api.pulumi.com`, ...). Profiles are stored as pretty-printed JSON in
`~/.pulumi/profiles.json`. The file is created empty the first time it is read
and does not exist yet. The name of the active profile is written to
`~/.pulumi/current_profile`.

## Installation

```sh
pip install .
```

This installs the `pulumi-profile-selector` command.

## Usage

Choose a profile from a menu. Type to filter the entries (`name -> backend`)
and press enter to select. Ctrl-C or Ctrl-D cancels. In that case the tool
prints `No profile selected` and exits with status 1.

```sh
pulumi-profile-selector
```

Manage profiles:

```sh
pulumi-profile-selector --add              # prompts for a name and a backend URL
pulumi-profile-selector --edit dev         # prompts for a new backend URL
pulumi-profile-selector --delete dev
pulumi-profile-selector --list             # or -l
```

Activate a profile without the menu, or record a name that is not in the list:

```sh
pulumi-profile-selector --activate prod    # or -a prod
pulumi-profile-selector --new scratch      # or -n scratch
pulumi-profile-selector --deactivate       # or -d; removes current_profile
pulumi-profile-selector --version          # or -V
```

If no profiles exist, the tool exits with status 1 unless you use one of the
management options, `--new` or `--deactivate`. `--activate` with an unknown
name also exits with status 1 and lists the available names on stderr. Errors
such as adding a duplicate name are reported as `Error: ...` on stderr, and
the exit status is 1.

### Setting `PULUMI_BACKEND_URL` in your shell

With `--current` (`-c`), the tool prints a shell command with no trailing
newline and does not touch `current_profile`. Evaluate that command in your
shell. The syntax depends on `$SHELL`:

- nushell, when `$SHELL` contains `nu`
- fish, when it contains `fish`
- POSIX `export` / `unset` otherwise

```sh
eval "$(pulumi-profile-selector -c -a prod)"     # export the backend of "prod"
eval "$(pulumi-profile-selector -c -n prod)"     # the same, looked up by name
eval "$(pulumi-profile-selector -c -d)"          # unset PULUMI_BACKEND_URL
```

With `-n`, the named profile's backend is exported if the profile exists.
Otherwise the name itself is exported as the value.

In fish:

```fish
pulumi-profile-selector -c -a prod | source
```

## Library use

```python
from pulumi_profiles.config import add_profile, read_pulumi_profiles

add_profile("dev", "s3://pulumi-state-dev")
for profile in read_pulumi_profiles():
    print(profile.name, profile.backend)
```

`pulumi_profiles.config` also provides `Profile`, `save_pulumi_profiles`,
`edit_profile`, `delete_profile` and `pulumi_profiles_path`.

- `add_profile` raises `ValueError` if the name already exists.
- `edit_profile` and `delete_profile` raise `LookupError` if the name does not
  exist.
- `read_pulumi_profiles` raises `ValueError` if the file is not a valid list of
  profiles.

`pulumi_profiles.cli.shell_command(backend_url, shell)` returns the command
text for a given shell path. A `backend_url` of `None` produces the unset
form.