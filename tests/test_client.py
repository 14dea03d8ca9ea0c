import pytest
import requests

from TroveClient.client import TroveV1Client
from TroveClient.errors import (
    ApiError,
    BadRequestError,
    NotFoundError,
    UnauthorizedError,
    UnexpectedResponseCodeError,
)


def _response(mocker, status, json_data=None, text=""):
    resp = mocker.Mock()
    resp.status_code = status
    resp.headers = {"Content-Type": "application/json"}
    if json_data is None:
        resp.content = text.encode()
        resp.text = text
        resp.json.side_effect = ValueError("no json")
    else:
        resp.content = b"{...}"
        resp.text = str(json_data)
        resp.json.return_value = json_data
    return resp


@pytest.fixture
def client():
    return TroveV1Client("trove.test:8779/v1.0", "tok", project_id="p1")


def test_base_url_and_headers(client):
    assert client.base_url == "https://trove.test:8779/v1.0/p1/"
    assert client.url("instances", "abc") == "https://trove.test:8779/v1.0/p1/instances/abc"
    assert client.session.headers["X-Auth-Token"] == "tok"


def test_post_returns_body_and_headers(mocker, client):
    req = mocker.patch.object(
        requests.Session, "request", return_value=_response(mocker, 200, {"instance": {"id": "abc"}})
    )
    body, headers = client.post(client.url("instances"), {"instance": {}}, ok_codes=[200])
    assert body == {"instance": {"id": "abc"}}
    assert headers["Content-Type"] == "application/json"
    kwargs = req.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["json"] == {"instance": {}}
    assert kwargs["timeout"] == 10.0


def test_default_ok_codes_accept_202_for_actions(mocker, client):
    mocker.patch.object(requests.Session, "request", return_value=_response(mocker, 202))
    body, _ = client.post(client.url("instances", "abc", "action"), {"restart": {}})
    assert body is None


def test_unexpected_success_code_rejected(mocker, client):
    mocker.patch.object(requests.Session, "request", return_value=_response(mocker, 202))
    with pytest.raises(UnexpectedResponseCodeError) as exc:
        client.post(client.url("instances"), {}, ok_codes=[200])
    assert exc.value.details.status == 202


def test_trove_fault_body_is_decoded(mocker, client):
    fault = {"itemNotFound": {"code": 404, "message": "Instance abc could not be found."}}
    mocker.patch.object(requests.Session, "request", return_value=_response(mocker, 404, fault))
    with pytest.raises(NotFoundError) as exc:
        client.get("instances/abc")
    d = exc.value.details
    assert d.code == "itemNotFound"
    assert d.message == "Instance abc could not be found."
    assert d.method == "GET"
    assert d.url.endswith("/instances/abc")


@pytest.mark.parametrize("status,cls", [(400, BadRequestError), (401, UnauthorizedError), (500, UnexpectedResponseCodeError)])
def test_status_mapping(mocker, client, status, cls):
    mocker.patch.object(requests.Session, "request", return_value=_response(mocker, status, text="oops"))
    with pytest.raises(cls):
        client.delete("instances/abc")


def test_transport_error_wrapped(mocker, client):
    mocker.patch.object(requests.Session, "request", side_effect=requests.ConnectionError("refused"))
    with pytest.raises(ApiError) as exc:
        client.get("instances")
    assert isinstance(exc.value.__cause__, requests.ConnectionError)
    assert exc.value.details.status is None


def test_debug_output(mocker, capsys):
    c = TroveV1Client("https://trove.test/v1.0", "tok", debug=True)
    mocker.patch.object(requests.Session, "request", return_value=_response(mocker, 200, {"rootEnabled": False}))
    c.get("instances/abc/root")
    err = capsys.readouterr().err
    assert "[DEBUG] HTTP GET https://trove.test/v1.0/instances/abc/root" in err
    assert "status = 200" in err
