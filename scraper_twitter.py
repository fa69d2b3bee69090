"""
Twitter Premium Search Scraper
Runs one premium search (30day or fullarchive), following the "next" cursor
until the results are exhausted, and saves every tweet to a JSON file
"""

import logging
import time
from typing import List, Optional

from config import ConfigurationError, SearchConfig
from models import Tweet
from tweet_store import StorageError, read_tweets, write_tweets
from twitter_client import TwitterSearchClient, TwitterSearchError
from types_twitter import PageCursor
from utils import normalize
from view_tweets import print_tweets

logger = logging.getLogger(__name__)

RATE_LIMIT_DELAY = 3  # seconds between requests (1 per 3 seconds / 20 per minute)


def search_tweets(
    config: SearchConfig,
    url: str,
    query: str,
    from_date: str,
    max_results: int,
    client: Optional[TwitterSearchClient] = None,
    output_file: Optional[str] = None,
) -> int:
    """Run a premium search, looping on the "next" page cursor

    Tweets collected so far are written to the output file whether the
    search completes or fails part way through.

    Args:
        config: Search configuration (credentials, auth URL, output file)
        url: Premium search URL (30day or fullarchive)
        query: Twitter search operator
        from_date: UTC timestamp (YYYYMMDDhhmm) for the start of the search
        max_results: Maximum number of tweets per page
        client: TwitterSearchClient instance (default: creates new one)
        output_file: Results file (default: config.output_file)

    Returns:
        Number of tweets collected

    Raises:
        TwitterSearchError: If authentication or a page request fails
    """
    logger.debug(f"search_tweets - url:{url}, query:{query}")

    if client is None:
        client = TwitterSearchClient(
            config.consumer_key, config.consumer_secret, config.auth_url
        )
    if output_file is None:
        output_file = config.output_file

    tweets: List[Tweet] = []
    completed = False

    try:
        token = client.get_bearer_token()
        cursor: Optional[PageCursor] = None

        while True:
            page = client.fetch_page(token, url, query, from_date, max_results, cursor)
            for item in page.items:
                tweets.append(normalize(item))

            logger.debug(f"rate limit - sleeping {RATE_LIMIT_DELAY}s")
            time.sleep(RATE_LIMIT_DELAY)

            cursor = page.next_cursor
            if not cursor:
                break

        completed = True
        return len(tweets)

    except Exception as e:
        logger.debug(f"search_tweets - url:{url}, query:{query} - {e}")
        raise

    finally:
        try:
            write_tweets(output_file, tweets)
        except StorageError as e:
            if completed:
                raise
            # keep the search error as the one the caller sees
            logger.error(f"search_tweets - could not save {len(tweets)} tweets - {e}")


def main() -> int:
    """Main entry point for the premium search scraper"""
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
    )

    print("Twitter Premium Search Scraper")
    print("=" * 60)

    try:
        config = SearchConfig.load()
        url = config.search_endpoint()
    except ConfigurationError as e:
        logger.error(f"Configuration Error: {e}")
        return 1

    status = 0
    try:
        total = search_tweets(
            config, url, config.query, config.from_date, config.max_results
        )
        logger.info(f"total tweets: {total}")
    except TwitterSearchError as e:
        logger.error(f"Search failed: {e}")
        status = 1
    except Exception as e:
        logger.error(f"Search failed: {e}", exc_info=True)
        status = 1

    try:
        print_tweets(read_tweets(config.output_file))
    except StorageError as e:
        logger.error(f"Could not read results: {e}")
        status = 1

    return status


if __name__ == "__main__":
    raise SystemExit(main())
