"""Tests for the Streamlit playground."""

from pathlib import Path

from streamlit.testing.v1 import AppTest

APP = str(Path(__file__).parent.parent / "app.py")


def run_app(hands_text):
    at = AppTest.from_file(APP, default_timeout=30).run()
    at.text_area[0].set_value(hands_text).run()
    at.button[0].click().run()
    return at


def test_empty_input_warns():
    at = run_app("")
    assert not at.exception
    assert [w.value for w in at.warning] == ["Enter at least one hand"]


def test_showdown_picks_winner():
    at = run_app("Ah Kh Qh Jh 10h\n9c 8d 7h 6s 5c")
    assert not at.exception
    assert at.success[0].value.startswith("🏆 Hand 0 wins")
