"""Loading colour settings from the X resource database text."""

from __future__ import annotations

from typing import Mapping, Optional

_HEX = frozenset("0123456789abcdefABCDEF")

COLOR_NAMES = (
    "normfgcolor",
    "normbgcolor",
    "normbordercolor",
    "normfloatcolor",
    "selfgcolor",
    "selbgcolor",
    "selbordercolor",
    "selfloatcolor",
    "titlenormfgcolor",
    "titlenormbgcolor",
    "titlenormbordercolor",
    "titlenormfloatcolor",
    "titleselfgcolor",
    "titleselbgcolor",
    "titleselbordercolor",
    "titleselfloatcolor",
    "tagsnormfgcolor",
    "tagsnormbgcolor",
    "tagsnormbordercolor",
    "tagsnormfloatcolor",
    "tagsselfgcolor",
    "tagsselbgcolor",
    "tagsselbordercolor",
    "tagsselfloatcolor",
    "hidnormfgcolor",
    "hidnormbgcolor",
    "hidselfgcolor",
    "hidselbgcolor",
    "urgfgcolor",
    "urgbgcolor",
    "urgbordercolor",
    "urgfloatcolor",
)

RESOURCE_PREFIX = "dwm"


def is_valid_color(value: Optional[str]) -> bool:
    """True for exactly '#' followed by six hexadecimal digits."""
    if value is None or len(value) != 7 or value[0] != "#":
        return False
    return all(ch in _HEX for ch in value[1:])


def _logical_lines(text: str):
    pending = ""
    for raw in text.splitlines():
        if raw.endswith("\\"):
            pending += raw[:-1]
            continue
        yield pending + raw
        pending = ""
    if pending:
        yield pending


def parse_resources(text: str) -> dict:
    """Parse resource-manager text ("name: value" lines) into a dict.

    Blank lines and lines starting with '!' are ignored; a trailing
    backslash continues a line. Later entries override earlier ones.
    """
    resources: dict = {}
    for line in _logical_lines(text):
        stripped = line.lstrip()
        if not stripped or stripped.startswith("!") or ":" not in stripped:
            continue
        name, value = stripped.split(":", 1)
        name = name.strip()
        if name:
            resources[name] = value.lstrip(" \t")
    return resources


def _lookup(resources: Mapping[str, str], name: str) -> Optional[str]:
    for key in (f"{RESOURCE_PREFIX}.{name}", f"{RESOURCE_PREFIX}*{name}", f"*{name}"):
        if key in resources:
            return resources[key]
    return None


def load_colors(resources: Mapping[str, str], colors: Mapping[str, str]) -> dict:
    """Return ``colors`` updated with every valid colour found in ``resources``."""
    result = dict(colors)
    for name in COLOR_NAMES:
        value = _lookup(resources, name)
        if is_valid_color(value):
            result[name] = value[:7]
    return result