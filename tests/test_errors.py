import pytest

from sodiumbox.errors import (
    Base64DecodeError,
    FailedToOpenSealedBox,
    FailedToOpenSecretBox,
    InvalidBoxKeyLength,
    InvalidBoxNonceLength,
    InvalidConfiguration,
    InvalidContent,
    SodiumError,
    ValidationError,
)


@pytest.mark.parametrize(
    "cls,parent",
    [
        (InvalidBoxKeyLength, InvalidConfiguration),
        (InvalidBoxNonceLength, InvalidConfiguration),
        (InvalidContent, ValidationError),
        (FailedToOpenSecretBox, ValidationError),
        (FailedToOpenSealedBox, ValidationError),
        (Base64DecodeError, ValidationError),
    ],
)
def test_hierarchy(cls, parent):
    err = cls("boom", {"field": "value"})
    assert isinstance(err, parent)
    assert isinstance(err, SodiumError)
    assert err.message == "boom"
    assert err.details == {"field": "value"}
    with pytest.raises(parent) as excinfo:
        raise err
    assert excinfo.value.message == "boom"


def test_message_and_details_kept():
    details = {"request": "abc", "attempt": 2}
    err = FailedToOpenSecretBox("Decryption failed", details)
    assert err.message == "Decryption failed"
    assert str(err) == "Decryption failed"
    assert err.details == details


def test_details_are_copied():
    details = {"request": "abc"}
    err = InvalidContent("bad", details)
    details["other"] = 1
    assert err.details == {"request": "abc"}


def test_defaults():
    err = InvalidBoxKeyLength()
    assert err.message == "InvalidBoxKeyLength"
    assert err.details == {}


def test_configuration_is_not_validation():
    nonce_err = InvalidBoxNonceLength("nonce", {"field": "nonce"})
    content_err = InvalidContent("content", {})
    assert not isinstance(nonce_err, ValidationError)
    assert not isinstance(content_err, InvalidConfiguration)
    assert isinstance(nonce_err, InvalidConfiguration)
    assert isinstance(content_err, ValidationError)

    caught = None
    try:
        raise nonce_err
    except ValidationError:
        caught = "validation"
    except InvalidConfiguration as exc:
        caught = exc.message
    assert caught == "nonce"
    assert nonce_err.details == {"field": "nonce"}