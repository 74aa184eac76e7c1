from __future__ import annotations

from hypothesis import given, strategies as st

from breeze.factories import failure, success, text_failure, text_success
from breeze.result import Failable
from breeze.text import TextFailable


@given(st.integers())
def test_success_helper_matches_constructor(value: int) -> None:
    res: Failable[int, ValueError] = success(value)
    assert type(res) is Failable
    assert res == Failable.of_success(value)
    assert res.get_success() == value


def test_failure_helper_carries_any_payload() -> None:
    err: OSError = FileNotFoundError("config.toml")
    res: Failable[bytes, OSError] = failure(err)
    assert type(res) is Failable
    assert not res.is_success()
    assert res.get_failure() is err


def test_text_helpers_build_text_failables() -> None:
    ok: TextFailable[int] = text_success(42)
    bad: TextFailable[int] = text_failure("error")
    assert isinstance(ok, TextFailable)
    assert isinstance(bad, TextFailable)
    assert ok.get_success() == 42
    assert bad.get_failure() == "error"


def test_guid_like_payload_transforms_to_text() -> None:
    guid: bytes = bytes(range(16))
    res: TextFailable[str] = text_success(guid).if_success(lambda g: g.hex())
    assert res.is_success()
    assert isinstance(res.get_success(), str)
    assert res.get_success() == guid.hex()


def test_failure_propagates_through_helper_chain() -> None:
    res: TextFailable[bytes] = text_failure("Message").if_success(lambda g: bytes(g))
    assert not res.is_success()
    assert res.get_failure() == "Message"
