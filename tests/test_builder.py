import pytest
import requests
from unittest.mock import patch, MagicMock

from jokers import builder as builder_mod
from jokers.builder import JokeBuilder
from jokers.errors import ApiResponseError, DeserializationError, TransportError
from jokers.joke import SingleJoke, TwopartJoke
from jokers.params import Category, Flag, Format, JokeType

BASE = "https://v2.jokeapi.dev/joke"


@pytest.fixture(autouse=True)
def default_base_url(monkeypatch):
    monkeypatch.setattr(builder_mod.config, "BASE_URL", BASE)


def test_default_url():
    assert JokeBuilder().url() == f"{BASE}/Any?blacklistFlags=&format=json&type=&amount=1"


def test_category_and_flag_url():
    b = JokeBuilder().add_category(Category.DARK).add_flag(Flag.NSFW)
    assert b.url() == f"{BASE}/Dark?blacklistFlags=nsfw&format=json&type=&amount=1"


def test_format_type_and_amount_url():
    b = (JokeBuilder()
         .add_category(Category.DARK)
         .add_flag(Flag.NSFW)
         .joke_type(JokeType.SINGLE)
         .format(Format.TXT))
    assert b.url() == f"{BASE}/Dark?blacklistFlags=nsfw&format=txt&type=single&amount=1"

    b = JokeBuilder().add_category(Category.DARK).add_flag(Flag.NSFW).format(Format.TXT).amount(10)
    assert b.url() == f"{BASE}/Dark?blacklistFlags=nsfw&format=txt&type=&amount=10"


def test_any_after_specific_category():
    b = JokeBuilder().add_category(Category.DARK).add_category(Category.PUN).add_category(Category.ANY)
    assert b.url().startswith(f"{BASE}/Any?")


def test_amount_is_not_validated():
    assert JokeBuilder().amount(0).url().endswith("&amount=0")


def test_base_url_override():
    b = JokeBuilder(base_url="http://localhost:8080/joke/")
    assert b.url() == "http://localhost:8080/joke/Any?blacklistFlags=&format=json&type=&amount=1"


@patch("jokers.builder.requests.get")
def test_get_single(mock_get):
    resp = MagicMock()
    resp.status_code = 200
    resp.text = '{"error": false, "category": "Pun", "type": "single", "joke": "A pun", "safe": true}'
    mock_get.return_value = resp

    jokes = JokeBuilder().add_category(Category.PUN).get(timeout=2.0)

    assert jokes == [SingleJoke(category=Category.PUN, safe=True, joke="A pun")]
    mock_get.assert_called_once_with(
        f"{BASE}/Pun?blacklistFlags=&format=json&type=&amount=1", timeout=2.0
    )


@patch("jokers.builder.requests.get")
def test_get_multiple_yaml(mock_get):
    resp = MagicMock()
    resp.status_code = 200
    resp.text = (
        "error: false\n"
        "amount: 2\n"
        "jokes:\n"
        "  - category: Misc\n"
        "    type: single\n"
        "    joke: one\n"
        "    safe: true\n"
        "  - category: Spooky\n"
        "    type: twopart\n"
        "    setup: two\n"
        "    delivery: three\n"
        "    safe: false\n"
    )
    mock_get.return_value = resp

    jokes = JokeBuilder().format(Format.YAML).amount(2).get()

    assert jokes == [
        SingleJoke(category=Category.MISC, safe=True, joke="one"),
        TwopartJoke(category=Category.SPOOKY, safe=False, setup="two", delivery="three"),
    ]


@patch("jokers.builder.requests.get")
def test_get_non_2xx(mock_get):
    resp = MagicMock()
    resp.status_code = 500
    resp.text = "Internal Server Error"
    mock_get.return_value = resp

    with pytest.raises(TransportError) as exc:
        JokeBuilder().get()
    assert exc.value.status == 500


@patch("jokers.builder.requests.get", side_effect=requests.ConnectionError("refused"))
def test_get_network_failure(mock_get):
    with pytest.raises(TransportError) as exc:
        JokeBuilder().get()
    assert isinstance(exc.value.__cause__, requests.ConnectionError)


@patch("jokers.builder.requests.get")
def test_get_api_error(mock_get):
    resp = MagicMock()
    resp.status_code = 200
    resp.text = '{"error": true, "code": 106, "message": "No matching joke found"}'
    mock_get.return_value = resp

    with pytest.raises(ApiResponseError) as exc:
        JokeBuilder().add_category(Category.CHRISTMAS).get()
    assert str(exc.value) == "error:true"
    assert exc.value.code == 106


@patch("jokers.builder.requests.get")
def test_get_bad_body(mock_get):
    resp = MagicMock()
    resp.status_code = 200
    resp.text = "<html>not json</html>"
    mock_get.return_value = resp

    with pytest.raises(DeserializationError):
        JokeBuilder().get()


@patch("jokers.builder.requests.get")
def test_get_api_error_with_400_status(mock_get):
    resp = MagicMock()
    resp.status_code = 400
    resp.text = '{"error": true, "internalError": false, "code": 106, "message": "No matching joke found"}'
    mock_get.return_value = resp

    with pytest.raises(ApiResponseError) as exc:
        JokeBuilder().add_category(Category.CHRISTMAS).get()
    assert str(exc.value) == "error:true"
    assert exc.value.code == 106
    assert exc.value.api_message == "No matching joke found"


@patch("jokers.builder.requests.get")
def test_get_non_2xx_with_joke_body(mock_get):
    resp = MagicMock()
    resp.status_code = 503
    resp.text = '{"error": false, "category": "Pun", "type": "single", "joke": "x", "safe": true}'
    mock_get.return_value = resp

    with pytest.raises(TransportError) as exc:
        JokeBuilder().get()
    assert exc.value.status == 503


def test_empty_base_url_is_kept():
    assert JokeBuilder(base_url="").url() == "/Any?blacklistFlags=&format=json&type=&amount=1"
