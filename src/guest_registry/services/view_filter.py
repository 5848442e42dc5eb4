"""Local search and sort over a fetched guest list."""

import locale
import unicodedata
from collections.abc import Sequence
from dataclasses import dataclass, field

from guest_registry.domain.guests import GuestRecord, SortKey


def matches(guest: GuestRecord, search_term: str) -> bool:
    """Return True when the term appears in the guest's full name or email."""
    needle = search_term.lower()
    return needle in guest.full_name.lower() or needle in guest.email.lower()


def collation_key(text: str) -> tuple[str, str]:
    """Order by base letters first, then by the active ``LC_COLLATE`` rules.

    Accents and case only break ties, so ``Émile`` sorts next to ``Eve``
    whatever locale the process runs under.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(char for char in decomposed if not unicodedata.combining(char))
    return base.casefold(), locale.strxfrm(text.lower())


def sort_value(guest: GuestRecord, sort_key: SortKey) -> tuple[str, str]:
    """Return the collation key for a guest."""
    if sort_key is SortKey.NAME:
        return collation_key(guest.full_name)
    return collation_key(guest.email)


def filter_guests(
    guests: Sequence[GuestRecord],
    search_term: str = "",
    sort_key: SortKey = SortKey.NAME,
) -> list[GuestRecord]:
    """Filter guests by search term and sort them by the chosen key."""
    selected = [guest for guest in guests if matches(guest, search_term)]
    return sorted(selected, key=lambda guest: sort_value(guest, sort_key))


@dataclass
class GuestListFilter:
    """Memoized ``filter_guests`` keyed on the guest set, term and sort key."""

    _key: tuple[tuple[GuestRecord, ...], str, SortKey] | None = field(
        default=None, init=False
    )
    _result: list[GuestRecord] = field(default_factory=list, init=False)
    computations: int = field(default=0, init=False)

    def apply(
        self,
        guests: Sequence[GuestRecord],
        search_term: str,
        sort_key: SortKey,
    ) -> list[GuestRecord]:
        """Return the filtered list, recomputing only when an input changed."""
        key = (tuple(guests), search_term, SortKey(sort_key))
        if key != self._key:
            self._result = filter_guests(key[0], search_term, key[2])
            self._key = key
            self.computations += 1
        return list(self._result)
