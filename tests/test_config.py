import pytest

import config as config_module
from config import ConfigurationError, SearchConfig

ENV_VARS = [
    "CONSUMER_KEY",
    "CONSUMER_SECRET",
    "THIRTY_DAY_LABEL",
    "FULL_LABEL",
    "TWEETS_OUTFILE",
    "SEARCH_QUERY",
    "SEARCH_MODE",
    "SEARCH_FROM_DATE",
    "SEARCH_MAX_RESULTS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "load_dotenv", lambda: None)


def test_load_reads_environment(monkeypatch):
    monkeypatch.setenv("CONSUMER_KEY", "key")
    monkeypatch.setenv("CONSUMER_SECRET", "secret")
    monkeypatch.setenv("THIRTY_DAY_LABEL", "/30day/dev.json")
    monkeypatch.setenv("FULL_LABEL", "/fullarchive/dev.json")

    cfg = SearchConfig.load()

    assert cfg.consumer_key == "key"
    assert cfg.consumer_secret == "secret"
    assert cfg.query == "from:realDonaldTrump -RT"
    assert cfg.from_date == "201910010000"
    assert cfg.max_results == 100
    assert cfg.output_file == "./tweets.json"
    assert cfg.search_endpoint() == "https://api.twitter.com/1.1/tweets/search/30day/dev.json"
    assert cfg.search_endpoint("fullarchive") == "https://api.twitter.com/1.1/tweets/search/fullarchive/dev.json"


def test_load_search_overrides(monkeypatch):
    monkeypatch.setenv("CONSUMER_KEY", "key")
    monkeypatch.setenv("CONSUMER_SECRET", "secret")
    monkeypatch.setenv("SEARCH_QUERY", "python")
    monkeypatch.setenv("SEARCH_MODE", "fullarchive")
    monkeypatch.setenv("SEARCH_MAX_RESULTS", "500")
    monkeypatch.setenv("TWEETS_OUTFILE", "/tmp/out.json")

    cfg = SearchConfig.load()

    assert (cfg.query, cfg.mode, cfg.max_results, cfg.output_file) == (
        "python",
        "fullarchive",
        500,
        "/tmp/out.json",
    )


def test_load_requires_credentials(monkeypatch):
    monkeypatch.setenv("CONSUMER_KEY", "key")

    with pytest.raises(ConfigurationError):
        SearchConfig.load()


def test_load_rejects_bad_max_results(monkeypatch):
    monkeypatch.setenv("CONSUMER_KEY", "key")
    monkeypatch.setenv("CONSUMER_SECRET", "secret")
    monkeypatch.setenv("SEARCH_MAX_RESULTS", "lots")

    with pytest.raises(ConfigurationError):
        SearchConfig.load()


def test_load_rejects_unknown_mode(monkeypatch):
    monkeypatch.setenv("CONSUMER_KEY", "key")
    monkeypatch.setenv("CONSUMER_SECRET", "secret")
    monkeypatch.setenv("SEARCH_MODE", "7day")

    with pytest.raises(ConfigurationError):
        SearchConfig.load()


def test_search_endpoint_without_label():
    cfg = SearchConfig(consumer_key="key", consumer_secret="secret")

    with pytest.raises(ConfigurationError):
        cfg.search_endpoint()
