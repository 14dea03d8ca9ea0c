import pytest

from TroveClient.errors import ApiError


class FakeServiceClient:
    """Records every call and replies from a queue of (body, headers) or ApiError."""

    def __init__(self):
        self.calls = []
        self.replies = []

    def url(self, *parts):
        return "https://trove.test/v1.0/p1/" + "/".join(parts)

    def _reply(self, method, url, json_body=None, ok_codes=None):
        self.calls.append({"method": method, "url": url, "json": json_body, "ok_codes": ok_codes})
        reply = self.replies.pop(0) if self.replies else (None, {})
        if isinstance(reply, ApiError):
            raise reply
        return reply

    def get(self, url, *, ok_codes=None):
        return self._reply("GET", url, ok_codes=ok_codes)

    def post(self, url, json_body=None, *, ok_codes=None):
        return self._reply("POST", url, json_body, ok_codes)

    def put(self, url, json_body=None, *, ok_codes=None):
        return self._reply("PUT", url, json_body, ok_codes)

    def delete(self, url, *, ok_codes=None):
        return self._reply("DELETE", url, ok_codes=ok_codes)


@pytest.fixture
def fake_client():
    return FakeServiceClient()


@pytest.fixture
def instance_body():
    return {
        "instance": {
            "id": "abc",
            "name": "db1",
            "status": "BUILD",
            "created": "2024-05-01T10:00:00Z",
            "updated": "2024-05-01T10:00:05",
            "flavor": {"id": "2", "links": [{"href": "https://trove.test/flavors/2", "rel": "self"}]},
            "volume": {"size": 2, "used": 0.12},
            "datastore": {"type": "mysql", "version": "5.6"},
            "ip": ["10.0.0.5"],
            "links": [{"href": "https://trove.test/v1.0/p1/instances/abc", "rel": "self"}],
        }
    }
