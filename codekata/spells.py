"""Spells, their counterspells, and the longest common subsequence."""

from __future__ import annotations

from typing import ClassVar


class Spell:
    """A spell known only by the name of its scroll."""

    def __init__(self, scroll_name: str = "") -> None:
        self.scroll_name = scroll_name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.scroll_name!r})"


class _ElementalSpell(Spell):
    label: ClassVar[str]

    def __init__(self, power: int) -> None:
        super().__init__()
        self.power = power

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.power!r})"


class Fireball(_ElementalSpell):
    """A fire spell with a power."""

    label = "Fireball"


class Frostbite(_ElementalSpell):
    """A frost spell with a power."""

    label = "Frostbite"


class Thunderstorm(_ElementalSpell):
    """A thunder spell with a power."""

    label = "Thunderstorm"


class Waterbolt(_ElementalSpell):
    """A water spell with a power."""

    label = "Waterbolt"


_ELEMENTS: dict[str, type[_ElementalSpell]] = {
    "fire": Fireball,
    "frost": Frostbite,
    "water": Waterbolt,
    "thunder": Thunderstorm,
}


def longest_common_subsequence(first: str, second: str) -> int:
    """Return the length of the longest common subsequence of two strings."""
    previous = [0] * (len(second) + 1)
    for a in first:
        current = [0]
        for j, b in enumerate(second, start=1):
            current.append(previous[j - 1] + 1 if a == b else max(current[j - 1], previous[j]))
        previous = current
    return previous[-1]


def cast(name: str, power: int) -> Spell:
    """Create the spell named by a word; unknown words become plain scroll spells."""
    element = _ELEMENTS.get(name)
    if element is None:
        return Spell(name)
    return element(power)


def counterspell(spell: Spell, journal: str = "") -> str:
    """Describe the counter to a spell.

    Elemental spells reveal their power; any other spell is answered with the
    longest common subsequence of its scroll name and the journal.
    """
    if isinstance(spell, _ElementalSpell):
        return f"{spell.label}: {spell.power}"
    return str(longest_common_subsequence(spell.scroll_name, journal))