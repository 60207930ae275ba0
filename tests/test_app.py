from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP = str(Path(__file__).resolve().parents[1] / "app.py")


def run_app(**params):
    at = AppTest.from_file(APP, default_timeout=30)
    for k, v in params.items():
        at.query_params[k] = v
    return at.run()


def test_default_page_renders():
    at = run_app()
    assert not at.exception
    assert not at.error
    assert at.title[0].value == "Foil Setup Tuner"


def test_rejected_link_banner_survives_reruns():
    at = run_app(discipline="kite")
    assert not at.exception
    assert "kite" in at.error[0].value

    at.sidebar.number_input(key="riderKg").set_value(80.0).run()
    assert not at.exception
    assert "kite" in at.error[0].value
    assert at.session_state["discipline"] == "prone"


@pytest.mark.parametrize("params", [
    dict(frontAreaCm2="0"),
    dict(riderKg="0"),
    dict(riderKg="-5"),
])
def test_non_positive_link_values_do_not_crash(params):
    at = run_app(**params)
    assert not at.exception
    assert at.session_state["riderKg"] == 75
    assert at.session_state["frontAreaCm2"] == 1200
