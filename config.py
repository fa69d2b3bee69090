"""
Search configuration
Read once at startup from environment variables (and .env), then passed
to the client and scraper explicitly.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

AUTH_URL = "https://api.twitter.com/oauth2/token"
SEARCH_URL = "https://api.twitter.com/1.1/tweets/search"

MODE_30DAY = "30day"
MODE_FULL_ARCHIVE = "fullarchive"


class ConfigurationError(Exception):
    """Raised when configuration is missing or invalid"""

    pass


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return val.strip()


@dataclass(frozen=True)
class SearchConfig:
    consumer_key: str
    consumer_secret: str
    thirty_day_label: Optional[str] = None
    full_label: Optional[str] = None
    auth_url: str = AUTH_URL
    search_url: str = SEARCH_URL
    output_file: str = "./tweets.json"

    # Defaults for the single search run by scraper_twitter.main()
    query: str = "from:realDonaldTrump -RT"
    mode: str = MODE_30DAY
    from_date: str = "201910010000"
    max_results: int = 100  # sandbox environment maximum

    def search_endpoint(self, mode: Optional[str] = None) -> str:
        """Full search URL for a premium search mode

        Args:
            mode: "30day" or "fullarchive". Defaults to the configured mode

        Raises:
            ConfigurationError: If the mode is unknown or its label is not set
        """
        mode = mode or self.mode
        if mode == MODE_30DAY:
            label = self.thirty_day_label
        elif mode == MODE_FULL_ARCHIVE:
            label = self.full_label
        else:
            raise ConfigurationError(f"Unknown search mode: {mode}")

        if not label:
            raise ConfigurationError(f"No endpoint label configured for {mode} search")
        return self.search_url + label

    @staticmethod
    def load() -> "SearchConfig":
        """Build the configuration from the environment

        Raises:
            ConfigurationError: If credentials are missing or a value is invalid
        """
        load_dotenv()

        consumer_key = _get_env("CONSUMER_KEY")
        consumer_secret = _get_env("CONSUMER_SECRET")
        if not consumer_key or not consumer_secret:
            raise ConfigurationError(
                "Twitter credentials required. Set CONSUMER_KEY and CONSUMER_SECRET in .env"
            )

        max_results = _get_env("SEARCH_MAX_RESULTS", "100")
        try:
            max_results = int(max_results)
        except ValueError:
            raise ConfigurationError(
                f"SEARCH_MAX_RESULTS must be an integer, got {max_results!r}"
            )

        mode = _get_env("SEARCH_MODE", MODE_30DAY)
        if mode not in (MODE_30DAY, MODE_FULL_ARCHIVE):
            raise ConfigurationError(f"Unknown search mode: {mode}")

        return SearchConfig(
            consumer_key=consumer_key,
            consumer_secret=consumer_secret,
            thirty_day_label=_get_env("THIRTY_DAY_LABEL"),
            full_label=_get_env("FULL_LABEL"),
            output_file=_get_env("TWEETS_OUTFILE", "./tweets.json"),
            query=_get_env("SEARCH_QUERY", "from:realDonaldTrump -RT"),
            mode=mode,
            from_date=_get_env("SEARCH_FROM_DATE", "201910010000"),
            max_results=max_results,
        )
