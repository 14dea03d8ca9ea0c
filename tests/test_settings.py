from TroveClient.settings import TroveSettings


def test_from_env(monkeypatch):
    monkeypatch.setenv("TROVE_ENDPOINT", " https://trove.test/v1.0 ")
    monkeypatch.setenv("TROVE_TOKEN", "tok")
    monkeypatch.setenv("TROVE_PROJECT_ID", "p1")
    monkeypatch.setenv("TROVE_VERIFY_TLS", "no")
    monkeypatch.setenv("TROVE_TIMEOUT", "30")
    s = TroveSettings.from_env()
    assert s == TroveSettings(endpoint="https://trove.test/v1.0", token="tok", project_id="p1", verify_tls=False, timeout=30.0)


def test_from_env_defaults(monkeypatch):
    for var in ("TROVE_ENDPOINT", "TROVE_TOKEN", "TROVE_PROJECT_ID", "TROVE_VERIFY_TLS", "TROVE_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)
    s = TroveSettings.from_env()
    assert s.endpoint == ""
    assert s.project_id is None
    assert s.verify_tls is True
    assert s.timeout == 10.0


def test_with_overrides_keeps_unset_values():
    s = TroveSettings(endpoint="https://a", token="t1", project_id="p1")
    o = s.with_overrides(token="t2", verify_tls=False)
    assert (o.endpoint, o.token, o.project_id, o.verify_tls) == ("https://a", "t2", "p1", False)
