"""Page root: owns the currently playing id, the active modal id and the toasts."""
from typing import Dict, List

from acappella.core import content
from acappella.core.forms import DonationForm, QuotationForm
from acappella.core.modal import ModalController
from acappella.core.notifications import Notifier
from acappella.core.player import AudioPlayer, PlaybackCoordinator
from acappella.core.record_store import RecordStore
from acappella.models.playback import PlaybackState
from acappella.models.record import Event, Member, Song

QUOTATION_MODAL = "quotation"
DONATION_MODAL = "donation"


class PageState:
    """Shared state for one page, passed explicitly to the players and forms it builds."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store
        self.notifier = Notifier()
        self.playback = PlaybackCoordinator()
        self.modals = ModalController()
        self.modals.register(
            QUOTATION_MODAL,
            "Request a Quotation",
            lambda on_close: QuotationForm(store.quotations.create, self.notifier, on_close=on_close),
        )
        self.modals.register(
            DONATION_MODAL,
            "Support Our Ministry",
            lambda on_close: DonationForm(store.donations.create, self.notifier, on_close=on_close),
        )
        self._players: Dict[str, AudioPlayer] = {}

    def player_for(self, song: Song) -> AudioPlayer:
        """Player instance for a song, created on first use."""
        player = self._players.get(song.id)
        if player is None:
            player = AudioPlayer(song, self.playback)
            self._players[song.id] = player
        return player

    def playback_states(self) -> List[PlaybackState]:
        """What each mounted player currently shows: play state, time display, progress."""
        return [player.snapshot() for player in self._players.values()]

    def open_modal(self, name: str):
        return self.modals.open(name)

    def close_modal(self) -> None:
        self.modals.close()

    def donation_section_form(self) -> DonationForm:
        """Donation form embedded in the page body (not modal-hosted, stays open on success)."""
        return DonationForm(self.store.donations.create, self.notifier)

    def members(self) -> List[Member]:
        return content.display_members(self.store)

    def events(self) -> List[Event]:
        return content.display_events(self.store)

    def songs(self, category: str) -> List[Song]:
        return content.display_songs(self.store, category)

    def close(self) -> None:
        for player in self._players.values():
            player.close()
        self._players.clear()
        self.modals.close()
