import pytest

from leadgen.utils import (
    contact_first_name,
    domain_from_url,
    is_valid_email,
    pick,
    simple_hash,
    split_contact_name,
    strip_scheme,
)


def test_simple_hash_known_values() -> None:
    assert simple_hash("") == 0
    assert simple_hash("a") == 97
    assert simple_hash("ab") == 97 * 31 + 98
    assert simple_hash("hello") == 99162322


def test_simple_hash_wraps_to_32_bits() -> None:
    # h * 31 + c overflows to exactly -2**31 for this string
    assert simple_hash("polygenelubricants") == 2**31
    assert all(0 <= simple_hash(text) <= 2**31 for text in ["TechFlow Solutions", "x" * 500, "ñandú", "🚀 rocket"])


def test_simple_hash_is_stable() -> None:
    assert simple_hash("DataVault Inc") == simple_hash("DataVault Inc")
    assert simple_hash("DataVault Inc") != simple_hash("DataVault inc")


def test_pick_uses_hash_modulo() -> None:
    options = ["a", "b", "c"]
    assert pick(options, "ab") == options[(97 * 31 + 98) % 3]
    assert pick(options, "") == "a"


@pytest.mark.parametrize(
    "email,expected",
    [
        ("sarah.johnson@techflow.com", "Sarah"),
        ("m.chen@datavault.com", "M"),
        ("john_doe@acme.com", "John"),
        ("mary-jane@acme.com", "Mary"),
        ("emma@growthtech.io", "there"),
        (".hidden@acme.com", "there"),
        ("", "there"),
        (None, "there"),
    ],
)
def test_contact_first_name(email, expected) -> None:
    assert contact_first_name(email) == expected


def test_split_contact_name() -> None:
    assert split_contact_name("sarah.johnson@techflow.com") == ("sarah", "johnson")
    assert split_contact_name("a.b.c@x.com") == ("a", "b c")
    assert split_contact_name("emma@growthtech.io") == ("emma", "")
    assert split_contact_name(None) == ("", "")


def test_email_regex() -> None:
    assert is_valid_email("sarah@techflow.com")
    assert not is_valid_email("sarah@techflow")
    assert not is_valid_email("sarah techflow@x.com")
    assert not is_valid_email("")


def test_url_helpers() -> None:
    assert strip_scheme("https://techflow.com") == "techflow.com"
    assert strip_scheme("http://growthtech.io/") == "growthtech.io/"
    assert domain_from_url("https://www.Acme.com/about") == "acme.com"
    assert domain_from_url("") == ""
