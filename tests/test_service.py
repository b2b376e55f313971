import threading

import pytest
import requests
from hangman.service import create_app, GameStore, HangmanClient, HangmanAPIError, play_game
from hangman.service import protocol
from hangman.solvers import StrategicSolver, BaseSolver

BASE = "http://hangman.test"


@pytest.fixture
def client():
    return create_app(["APPLE"], seed=0).test_client()


def _new(client):
    r = client.get("/")
    assert r.status_code == 200
    return r.get_json()


def test_create_game(client):
    body = _new(client)
    assert body["word"] == "*****" and body["guesses"] == 7
    assert len(body["id"]) == 36


def test_guess_updates_mask(client):
    gid = _new(client)["id"]
    r = client.put(f"/{gid}", json={"letter": "p"})
    assert r.get_json() == {"word": "*PP**", "guesses": 7}
    r = client.put(f"/{gid}", json={"letter": "z"})
    assert r.get_json() == {"word": "*PP**", "guesses": 6}
    assert client.get(f"/{gid}").get_json() == {"word": "*PP**", "guesses": 6}


@pytest.mark.parametrize("payload,fragment", [
    ({"letter": "ab"}, "single ASCII character"),
    ({}, "single ASCII character"),
    ({"letter": "P"}, "has already been guessed"),
])
def test_rejections(client, payload, fragment):
    gid = _new(client)["id"]
    client.put(f"/{gid}", json={"letter": "P"})
    r = client.put(f"/{gid}", json=payload)
    assert r.status_code == 400
    assert fragment in r.get_json()["error"]


def test_unknown_game(client):
    r = client.put("/no-such-game", json={"letter": "A"})
    assert r.status_code == 400
    assert r.get_json()["error"] == "game not found for id no-such-game"


def test_flawless_win_then_gloat(client):
    gid = _new(client)["id"]
    for ch in "APL":
        client.put(f"/{gid}", json={"letter": ch})
    final = client.put(f"/{gid}", json={"letter": "E"}).get_json()
    assert final == {"victory": True, "message": protocol.WIN_FLAWLESS, "word": "APPLE"}
    again = client.put(f"/{gid}", json={"letter": "Q"}).get_json()
    assert again["message"] == protocol.ALREADY_WON


def test_narrow_win_and_loss(client):
    gid = _new(client)["id"]
    for ch in "BCDFG":
        client.put(f"/{gid}", json={"letter": ch})
    for ch in "APL":
        client.put(f"/{gid}", json={"letter": ch})
    assert client.put(f"/{gid}", json={"letter": "E"}).get_json()["message"] == protocol.WIN

    gid = _new(client)["id"]
    for ch in "BCDFGH":
        client.put(f"/{gid}", json={"letter": ch})
    final = client.put(f"/{gid}", json={"letter": "I"}).get_json()
    assert final == {"victory": False, "message": protocol.LOSE, "word": "APPLE"}
    assert client.get(f"/{gid}").get_json()["message"] == protocol.ALREADY_LOST


def test_store_requires_words():
    with pytest.raises(ValueError):
        GameStore([])


def test_store_concurrent_creates():
    store = GameStore(["APPLE", "GRAPE"], seed=1)
    threads = [threading.Thread(target=store.create) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(store) == 16


# --- end-to-end: the real client routed through Flask's test client ---

class _Response:
    def __init__(self, resp):
        self._resp = resp
        self.status_code = resp.status_code
        self.text = resp.get_data(as_text=True)

    def json(self):
        body = self._resp.get_json(silent=True)
        if body is None:
            raise ValueError("no JSON body")
        return body

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code}")


class FlaskSession:
    def __init__(self, app):
        self.client = app.test_client()
        self.headers = {}

    def request(self, method, url, timeout=None, json=None):
        path = url[len(BASE):] or "/"
        return _Response(self.client.open(path, method=method, json=json))


def _api(words, seed=0):
    return HangmanClient(BASE, session=FlaskSession(create_app(words, seed=seed)))


def test_client_round_trip():
    api = _api(["GRAPE"])
    created = api.new_game()
    update = api.guess(created["id"], "r")
    assert update == protocol.GameUpdate("*R***", 7)
    assert api.read_game(created["id"]) == update

    with pytest.raises(HangmanAPIError) as e:
        api.guess(created["id"], "R")
    assert e.value.is_duplicate and e.value.status == 400

    with pytest.raises(HangmanAPIError) as e:
        api.guess("missing", "R")
    assert not e.value.is_duplicate


def test_play_game_strategic_wins():
    solver = StrategicSolver(["APPLE", "GRAPE", "BERRY"], seed=2)
    outcome = play_game(_api(["GRAPE"]), solver)
    assert outcome.victory is True
    assert outcome.word == "GRAPE"
    assert outcome.turns <= 8


class _Scripted(BaseSolver):
    id = "scripted"

    def __init__(self, letters):
        super().__init__()
        self.letters = iter(letters)
        self.seen = []

    def select_next_letter(self, masked_word, remaining_wrong_guesses):
        self.seen.append(masked_word)
        return next(self.letters)


def test_play_game_retries_duplicates():
    solver = _Scripted("AABCDE")
    outcome = play_game(_api(["ABCDE"]), solver)
    assert outcome.victory and outcome.turns == 5
    # the retried turn sees the same pattern again
    assert solver.seen[1] == solver.seen[2] == "A****"


def test_play_game_gives_up_on_endless_duplicates():
    with pytest.raises(HangmanAPIError):
        play_game(_api(["ABCDE"]), _Scripted("A" * 10), max_retries=3)
