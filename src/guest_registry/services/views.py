"""Screen state for the guest list, creation form and detail form."""

from collections.abc import Callable
from dataclasses import dataclass, field

from guest_registry.domain.errors import GuestError
from guest_registry.domain.guests import (
    GUEST_FIELDS,
    GuestDraft,
    GuestRecord,
    SortKey,
)
from guest_registry.services.sync import SyncController
from guest_registry.services.view_filter import GuestListFilter

LIST_PATH = "/guests"
CANCEL_CREATE_PROMPT = (
    "Are you sure you want to cancel? Any unsaved changes will be lost."
)

Confirm = Callable[[str], bool]


@dataclass(frozen=True)
class Navigation:
    """Where the caller should go next.

    ``show_loading`` asks the list screen to show its indicator on arrival.
    ``guest`` hands a known record forward so the detail screen can skip
    its fetch.
    """

    path: str
    show_loading: bool = False
    guest: GuestRecord | None = None


def detail_path(guest_id: str) -> str:
    return f"{LIST_PATH}/{guest_id}"


@dataclass
class GuestListView:
    """State of the guest list screen."""

    controller: SyncController
    show_loading: bool = False
    guests: list[GuestRecord] = field(default_factory=list)
    search_term: str = ""
    sort_key: SortKey = SortKey.NAME
    error: str | None = None
    loading: bool = field(init=False)
    _filter: GuestListFilter = field(default_factory=GuestListFilter, init=False)

    def __post_init__(self) -> None:
        self.loading = self.show_loading

    async def load(self) -> None:
        """Fetch the full list; failures leave a terminal error message."""
        self.loading = True
        try:
            self.guests = await self.controller.fetch_all()
            self.error = None
        except GuestError as exc:
            self.error = exc.message
        finally:
            self.loading = False

    def set_search(self, term: str) -> None:
        self.search_term = term

    def clear_search(self) -> None:
        self.search_term = ""

    def set_sort(self, sort_key: SortKey | str) -> None:
        self.sort_key = SortKey(sort_key)

    @property
    def visible(self) -> list[GuestRecord]:
        """Guests matching the search term, in the chosen order."""
        return self._filter.apply(self.guests, self.search_term, self.sort_key)

    def open(self, guest: GuestRecord) -> Navigation:
        return Navigation(path=detail_path(guest.id), guest=guest)


@dataclass
class GuestCreateView:
    """State of the guest creation form."""

    controller: SyncController
    draft: GuestDraft = field(default_factory=GuestDraft)
    submitting: bool = False
    error: str | None = None
    created: GuestRecord | None = None

    def change(self, name: str, value: str) -> None:
        _check_field(name)
        setattr(self.draft, name, value)

    async def submit(self) -> Navigation | None:
        """Create the guest; return the list navigation on success."""
        if self.submitting:
            return None
        self.submitting = True
        self.error = None
        try:
            self.created = await self.controller.create(self.draft)
        except GuestError as exc:
            self.error = exc.message
            return None
        finally:
            self.submitting = False
        return Navigation(path=LIST_PATH)

    def cancel(self, confirm: Confirm) -> Navigation | None:
        if self.submitting or not confirm(CANCEL_CREATE_PROMPT):
            return None
        return Navigation(path=LIST_PATH)


@dataclass
class GuestDetailView:
    """State of the guest detail and edit form.

    ``initial`` is the record handed over from the list, if any. When it
    matches ``guest_id`` the screen renders it straight away and never
    fetches.
    """

    controller: SyncController
    guest_id: str
    initial: GuestRecord | None = None
    guest: GuestRecord | None = field(default=None, init=False)
    draft: GuestDraft | None = field(default=None, init=False)
    loading: bool = field(init=False)
    updating: bool = field(default=False, init=False)
    deleting: bool = field(default=False, init=False)
    error: str | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        if self.initial is not None and self.initial.id == self.guest_id:
            self._show(self.initial)
        self.loading = self.guest is None

    async def load(self) -> None:
        if self.guest is not None:
            self.loading = False
            return
        self.loading = True
        try:
            record = await self.controller.fetch_one(self.guest_id, self.initial)
        except GuestError as exc:
            self.error = exc.message
        else:
            self._show(record)
            self.error = None
        finally:
            self.loading = False

    def change(self, name: str, value: str) -> None:
        if self.draft is None:
            return
        _check_field(name)
        setattr(self.draft, name, value)

    async def save(self) -> Navigation | None:
        """Send the edited copy; return to the list on success."""
        if self.draft is None or self.updating:
            return None
        self.updating = True
        self.error = None
        try:
            record = await self.controller.update(self.guest_id, self.draft)
        except GuestError as exc:
            self.error = exc.message
            return None
        finally:
            self.updating = False
        self.guest = record
        return Navigation(path=LIST_PATH, show_loading=True)

    async def delete(self, confirm: Confirm) -> Navigation | None:
        """Delete after confirmation; stay on this screen when it fails."""
        if self.guest is None or self.updating or self.deleting:
            return None
        prompt = f"Are you sure you want to delete {self.guest.full_name}?"
        self.deleting = True
        try:
            deleted = await self.controller.delete(
                self.guest_id, confirmed=confirm(prompt)
            )
        except GuestError as exc:
            self.error = exc.message
            return None
        finally:
            self.deleting = False
        if not deleted:
            return None
        return Navigation(path=LIST_PATH, show_loading=True)

    def back(self) -> Navigation:
        return Navigation(path=LIST_PATH, show_loading=True)

    def _show(self, record: GuestRecord) -> None:
        self.guest = record
        self.draft = GuestDraft.from_record(record)


def _check_field(name: str) -> None:
    if name not in GUEST_FIELDS:
        raise ValueError(f"Unknown guest field: {name}")
