from __future__ import annotations

import re
from typing import Sequence, TypeVar
from urllib.parse import urlparse

T = TypeVar("T")

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
NAME_SEPARATORS = re.compile(r"[._-]")


def simple_hash(text: str) -> int:
    """Stable 32-bit string hash used for every deterministic content choice.

    Iterates UTF-16 code units computing ``h = h * 31 + code`` wrapped to a
    signed 32-bit integer, and returns the absolute value. The same input
    always gives the same index, across processes and interpreter versions
    (unlike the builtin ``hash``).
    """
    value = 0
    units = (text or "").encode("utf-16-le")
    for i in range(0, len(units), 2):
        code = units[i] | (units[i + 1] << 8)
        value = (value * 31 + code) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return abs(value)


def pick(options: Sequence[T], key: str) -> T:
    return options[simple_hash(key) % len(options)]


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email or ""))


def contact_first_name(email: str | None, fallback: str = "there") -> str:
    if not email:
        return fallback
    local_part = email.split("@")[0]
    parts = NAME_SEPARATORS.split(local_part)
    if len(parts) >= 2 and parts[0]:
        return parts[0][0].upper() + parts[0][1:]
    return fallback


def split_contact_name(email: str | None) -> tuple[str, str]:
    """First/last name guess from ``first.last@`` style addresses."""
    local_part = (email or "").split("@")[0]
    first, *rest = local_part.split(".")
    return first, " ".join(rest)


def domain_from_url(url: str) -> str:
    if not url:
        return ""
    parsed = urlparse(url)
    host = parsed.netloc or parsed.path
    host = host.lower().strip()
    if host.startswith("www."):
        host = host[4:]
    return host.split("/")[0]


def strip_scheme(url: str) -> str:
    return re.sub(r"^https?://", "", url or "", count=1)
