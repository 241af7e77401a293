import pytest
from requests.structures import CaseInsensitiveDict


class FakeResponse:
    def __init__(self, headers=None, status_code=200):
        self.headers = CaseInsensitiveDict(headers or {})
        self.status_code = status_code
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self):
        self.closed = True


class FakeSession:
    """
    Stand-in for requests.Session that replays scripted outcomes.
    Each outcome is either an exception instance (raised) or a header dict.
    """
    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.calls = []
        self.responses = []
        self.closed = False

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        outcome = self.outcomes[len(self.calls) - 1]
        if isinstance(outcome, BaseException):
            raise outcome
        resp = FakeResponse(outcome)
        self.responses.append(resp)
        return resp

    def close(self):
        self.closed = True


@pytest.fixture
def make_session():
    return FakeSession
