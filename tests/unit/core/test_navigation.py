import pytest

from talias.core.navigation import NavigationState
from talias.core.tree import MAIN_MENU_TITLE

pytestmark = pytest.mark.unit_core


def test_initial_state(sample_options) -> None:
    nav = NavigationState(sample_options)
    assert nav.current == sample_options
    assert nav.stack == []
    assert nav.title == MAIN_MENU_TITLE
    assert nav.at_root


def test_descend_pushes_one_level(sample_options) -> None:
    nav = NavigationState(sample_options)
    work = sample_options[0]

    assert nav.descend(work) is True
    assert nav.stack == [sample_options]
    assert nav.current == work.children
    assert nav.title == "Work"


def test_descend_into_leaf_is_refused(sample_options) -> None:
    nav = NavigationState(sample_options)
    assert nav.descend(sample_options[2]) is False
    assert nav.stack == []


def test_back_undoes_descend(sample_options) -> None:
    nav = NavigationState(sample_options)
    docs = sample_options[1]
    nav.descend(docs)
    nav.descend(docs.children[0])
    assert nav.title == "Manuals"

    assert nav.back() is True
    assert nav.current is docs.children
    assert nav.title == "Docs"

    assert nav.back() is True
    assert nav.current is sample_options
    assert nav.title == MAIN_MENU_TITLE


def test_back_at_root_signals_quit(sample_options) -> None:
    nav = NavigationState(sample_options)
    assert nav.back() is False
    assert nav.current == sample_options
    assert nav.title == MAIN_MENU_TITLE
