"""Key normalization: raw keypresses to canonical shortcut strings.

A canonical shortcut is the modifier prefixes in the fixed order
Alt (``a-``), Control (``c-``), Super (``m-``), Shift (``s-``) followed by
the lower-cased key name, e.g. Control+Shift+A -> ``c-s-a``.
"""

from collections.abc import Iterable
from enum import Flag, auto


class Modifier(Flag):
    """Modifier keys that take part in a shortcut."""

    NONE = 0
    ALT = auto()
    CONTROL = auto()
    SUPER = auto()
    SHIFT = auto()


# Emission order of prefixes, independent of press order
MODIFIER_PREFIXES: tuple[tuple[Modifier, str], ...] = (
    (Modifier.ALT, "a-"),
    (Modifier.CONTROL, "c-"),
    (Modifier.SUPER, "m-"),
    (Modifier.SHIFT, "s-"),
)

# Host modifier names (Textual key strings, CLI arguments) -> Modifier
MODIFIER_NAMES: dict[str, Modifier] = {
    "alt": Modifier.ALT,
    "option": Modifier.ALT,
    "ctrl": Modifier.CONTROL,
    "control": Modifier.CONTROL,
    "super": Modifier.SUPER,
    "meta": Modifier.SUPER,
    "cmd": Modifier.SUPER,
    "shift": Modifier.SHIFT,
}

ESCAPE = "escape"


def modifiers_from_names(names: Iterable[str]) -> Modifier:
    """Combine modifier names into a flag set; unknown names are skipped."""
    modifiers = Modifier.NONE
    for name in names:
        modifiers |= MODIFIER_NAMES.get(name.lower(), Modifier.NONE)
    return modifiers


def normalize(key_name: str, modifiers: Modifier | Iterable[Modifier] = Modifier.NONE) -> str:
    """
    Build the canonical shortcut for a key and a modifier set.

    Args:
        key_name: Host key name, any case
        modifiers: A Modifier flag set or an iterable of Modifier members,
            in any order

    Returns:
        Canonical shortcut string, e.g. ``normalize("A", {SHIFT, CONTROL}) == "c-s-a"``
    """
    if not isinstance(modifiers, Modifier):
        combined = Modifier.NONE
        for modifier in modifiers:
            combined |= modifier
        modifiers = combined

    prefix = "".join(text for flag, text in MODIFIER_PREFIXES if flag in modifiers)
    return prefix + key_name.lower()


def parse_key_binding(key: str) -> tuple[str, Modifier]:
    """
    Split a host key string such as ``"ctrl+shift+a"`` into name and modifiers.

    A single upper-case character is reported the way a shifted letter
    arrives from the keyboard: the name as typed plus Shift.

    Returns:
        Tuple of (key_name, modifiers)
    """
    *modifier_names, key_name = key.split("+") if key != "+" else ["+"]
    if not key_name:
        # "ctrl++" style strings bind the plus key itself
        key_name = "+"
        modifier_names = [name for name in modifier_names if name]

    modifiers = modifiers_from_names(modifier_names)
    if len(key_name) == 1 and key_name.isupper():
        modifiers |= Modifier.SHIFT
    return key_name, modifiers
