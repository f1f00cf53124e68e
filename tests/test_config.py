from heyflow_trello.config import Settings


def test_reads_short_key_and_token_names(monkeypatch):
    monkeypatch.delenv("TRELLO_KEY", raising=False)
    monkeypatch.delenv("TRELLO_TOKEN", raising=False)
    monkeypatch.setenv("KEY", "short-key")
    monkeypatch.setenv("TOKEN", "short-token")

    settings = Settings(_env_file=None)

    assert settings.trello_key == "short-key"
    assert settings.trello_token == "short-token"


def test_reads_prefixed_names(monkeypatch):
    monkeypatch.setenv("TRELLO_KEY", "long-key")
    monkeypatch.setenv("TRELLO_TOKEN", "long-token")

    settings = Settings(_env_file=None)

    assert settings.trello_key == "long-key"
    assert settings.trello_token == "long-token"


def test_defaults(monkeypatch):
    for name in ("KEY", "TOKEN", "TRELLO_KEY", "TRELLO_TOKEN"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.trello_api_url == "https://api.trello.com/1/"
    assert settings.trello_key == ""
    assert settings.api_key == ""
