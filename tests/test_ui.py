from unittest.mock import patch

import pytest
from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError

from pulumi_profiles.config import Profile
from pulumi_profiles.ui import (
    ProfileSelector,
    format_profile_display,
    prompt_for_backend_url,
    prompt_for_profile_details,
)

PROFILES = [
    Profile("dev", "s3://pulumi-state-dev"),
    Profile("prod", "s3://pulumi-state-prod"),
]


def test_format_profile_display():
    assert format_profile_display(Profile("test", "file://./state")) == "test -> file://./state"


def test_run_with_no_profiles_returns_none():
    with patch("pulumi_profiles.ui.prompt") as fake_prompt:
        assert ProfileSelector([]).run() is None
    assert fake_prompt.call_count == 0


def test_run_returns_selected_name():
    with patch("pulumi_profiles.ui.prompt", return_value=format_profile_display(PROFILES[1])):
        assert ProfileSelector(PROFILES).run() == "prod"


@pytest.mark.parametrize("error", [KeyboardInterrupt, EOFError])
def test_run_cancelled_returns_none(error):
    with patch("pulumi_profiles.ui.prompt", side_effect=error):
        assert ProfileSelector(PROFILES).run() is None


def test_run_unknown_answer_returns_none():
    with patch("pulumi_profiles.ui.prompt", return_value="nothing"):
        assert ProfileSelector(PROFILES).run() is None


def test_validator_only_accepts_listed_options():
    with patch("pulumi_profiles.ui.prompt", return_value="") as fake_prompt:
        ProfileSelector(PROFILES).run()
    validator = fake_prompt.call_args.kwargs["validator"]
    validator.validate(Document(format_profile_display(PROFILES[0])))
    with pytest.raises(ValidationError):
        validator.validate(Document("staging"))


def test_completer_filters_options():
    with patch("pulumi_profiles.ui.prompt", return_value="") as fake_prompt:
        ProfileSelector(PROFILES).run()
    completer = fake_prompt.call_args.kwargs["completer"]
    texts = [c.text for c in completer.get_completions(Document("prod"), CompleteEvent())]
    assert texts == [format_profile_display(PROFILES[1])]


def test_prompt_for_profile_details():
    with patch("pulumi_profiles.ui.prompt", side_effect=["dev", "s3://bucket"]):
        assert prompt_for_profile_details() == ("dev", "s3://bucket")


def test_prompt_for_profile_details_cancel_propagates():
    with patch("pulumi_profiles.ui.prompt", side_effect=KeyboardInterrupt):
        with pytest.raises(KeyboardInterrupt):
            prompt_for_profile_details()


def test_prompt_for_backend_url():
    with patch("pulumi_profiles.ui.prompt", return_value="file://./state"):
        assert prompt_for_backend_url() == "file://./state"