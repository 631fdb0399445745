"""Single active modal and form state discarded on close."""
import pytest

from acappella.core.forms import DonationForm, QuotationForm
from acappella.core.modal import ModalController
from acappella.core.page import DONATION_MODAL, QUOTATION_MODAL, PageState


@pytest.fixture
def page(store):
    page = PageState(store)
    yield page
    page.close()


def test_opening_another_modal_replaces_active(page):
    page.open_modal(QUOTATION_MODAL)
    page.open_modal(DONATION_MODAL)
    assert page.modals.active == DONATION_MODAL
    assert not page.modals.is_open(QUOTATION_MODAL)
    assert isinstance(page.modals.content, DonationForm)
    assert page.modals.title == "Support Our Ministry"


def test_close_discards_in_progress_form(page):
    form = page.open_modal(QUOTATION_MODAL)
    form.set_field("full_name", "Jane Wanjiku")
    page.close_modal()
    assert page.modals.active is None
    assert page.modals.content is None
    assert not form.mounted

    reopened = page.open_modal(QUOTATION_MODAL)
    assert reopened is not form
    assert reopened.fields["full_name"] == ""


def test_reopening_active_modal_keeps_content(page):
    form = page.open_modal(QUOTATION_MODAL)
    assert page.open_modal(QUOTATION_MODAL) is form
    assert isinstance(form, QuotationForm)


def test_unknown_modal_raises():
    modals = ModalController()
    with pytest.raises(KeyError):
        modals.open("gallery")
    assert modals.active is None


def test_close_without_open_modal_is_harmless():
    modals = ModalController()
    modals.close()
    assert modals.active is None


def test_playback_states_reflect_single_player(page, song_factory):
    first = page.player_for(song_factory("a", duration="4:32"))
    second = page.player_for(song_factory("b", duration="5:18"))
    assert page.player_for(song_factory("a")) is first
    first.request_play()
    second.request_play()
    states = {s.song_id: s for s in page.playback_states()}
    assert not states["a"].is_playing
    assert states["b"].is_playing
    assert states["b"].display_time == "0:00 / 5:18"
    assert states["b"].progress_percentage == 0.0
