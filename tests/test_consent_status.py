import pytest

from apps.domains.consent.models import ConsentStatus
from apps.domains.consent.status import is_recognized_status, parse_consent_status


@pytest.mark.parametrize("raw", ["동의", "AGREED", "agreed", " Agreed "])
def test_agree_tokens(raw):
    assert parse_consent_status(raw) == ConsentStatus.AGREED


@pytest.mark.parametrize("raw", ["비동의", "미동의", "반대", "DISAGREED", "", None, "보류", "Y"])
def test_everything_else_is_disagreed(raw):
    assert parse_consent_status(raw) == ConsentStatus.DISAGREED


def test_recognized_tokens():
    assert is_recognized_status("동의")
    assert is_recognized_status("disagreed")
    assert is_recognized_status("반대")
    assert not is_recognized_status("보류")
    assert not is_recognized_status("")
