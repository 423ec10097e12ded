import pytest

from color_scale.app import create_app
from color_scale.tokens import UI_TOKEN_TARGETS


@pytest.fixture()
def client():
    app = create_app({"TESTING": True})
    return app.test_client()


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok"}


def test_scale_from_hex(client):
    res = client.get("/scale", query_string={"color": "#2a6db6", "name": "primary"})
    assert res.status_code == 200
    data = res.get_json()
    assert data["name"] == "primary"
    assert data["base"]["hex"] == "#2a6db6"
    assert [s["step"] for s in data["steps"]][0] == 50
    assert len(data["steps"]) == 11
    assert sum(s["is_base"] for s in data["steps"]) == 1
    assert "--primary-950: oklch(" in data["css"]


def test_scale_from_sliders(client):
    res = client.get("/scale", query_string={"l": "0.62", "c": "0.12", "h": "30"})
    assert res.status_code == 200
    data = res.get_json()
    assert data["name"] == "brand"
    assert data["base"]["oklch"] == "oklch(0.620 0.120 30.0)"


def test_scale_default_color(client):
    assert client.get("/scale").get_json()["base"]["hex"] == "#2a6db6"


@pytest.mark.parametrize(
    "query",
    [
        {"color": "not-a-color"},
        {"color": "#2a6db6", "name": "1bad"},
        {"l": "x", "c": "0.1", "h": "30"},
        {"l": "0.5", "c": "0.1", "h": "nan"},
        {"l": "0.5", "c": "0.1", "h": "inf"},
        {"l": "1e999", "c": "0.1", "h": "30"},
    ],
)
def test_scale_rejects_bad_input(client, query):
    res = client.get("/scale", query_string=query)
    assert res.status_code == 400
    assert "error" in res.get_json()


def test_contrast(client):
    res = client.get("/contrast", query_string={"fg": "#000000", "bg": "#ffffff"})
    data = res.get_json()
    assert data["ratio"] == 21.0
    assert set(data["levels"].values()) == {"Pass"}


def test_tokens(client):
    res = client.get("/tokens", query_string={"color": "#2a6db6", "mode": "dark"})
    data = res.get_json()
    assert data["background"] == "#000000"
    assert set(data["tokens"]) == set(UI_TOKEN_TARGETS)


def test_tokens_unknown_mode(client):
    res = client.get("/tokens", query_string={"mode": "sepia"})
    assert res.status_code == 400


def test_unknown_route_stays_404(client):
    assert client.get("/nope").status_code == 404


def test_scale_flags_out_of_gamut_base(client):
    res = client.get("/scale", query_string={"l": "0.62", "c": "0.4", "h": "30"})
    data = res.get_json()
    assert data["base"]["in_gamut"] is False
    # the base step carries the chroma clamped to the gamut edge
    assert data["base"]["oklch"] != "oklch(0.620 0.400 30.0)"


def test_scale_in_gamut_base(client):
    data = client.get("/scale", query_string={"color": "#2a6db6"}).get_json()
    assert data["base"]["in_gamut"] is True


def test_scale_dark_steps(client):
    data = client.get("/scale", query_string={"color": "#2a6db6"}).get_json()
    light, dark = data["steps"], data["dark_steps"]
    assert [s["step"] for s in dark] == [s["step"] for s in light]
    assert dark[0]["hex"] == light[-1]["hex"]
    assert dark[-1]["l"] == light[0]["l"]
