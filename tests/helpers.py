"""
Shared fakes for the gist-log tests.
"""
import requests

from gist_log.prompts import AnswerSet


def make_answers(did=("Wrote spec",), nxt=("Review",), block=("None",), score="4"):
    return AnswerSet(list(did), list(nxt), list(block), score)


def scripted_ask(lines):
    """Return an ``ask`` callable that replays ``lines`` and records prompts."""
    remaining = list(lines)
    prompts = []

    def ask(prompt=""):
        prompts.append(prompt)
        return remaining.pop(0)

    ask.prompts = prompts
    ask.remaining = remaining
    return ask


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    def __init__(self, responses=None):
        self.headers = {}
        self.responses = list(responses or [])
        self.calls = []

    def _respond(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        return self.responses.pop(0)

    def get(self, url, **kwargs):
        return self._respond("GET", url, **kwargs)

    def patch(self, url, **kwargs):
        return self._respond("PATCH", url, **kwargs)


class FakeStore:
    def __init__(self, content="", error=None, save_error=None):
        self.content = content
        self.error = error
        self.save_error = save_error
        self.saved = []
        self.fetched = []

    def fetch(self, name):
        self.fetched.append(name)
        if self.error:
            raise self.error
        return self.content

    def save(self, name, text):
        if self.save_error:
            raise self.save_error
        self.saved.append((name, text))
