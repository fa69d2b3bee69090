"""
JSON file storage for search results
The whole file is rewritten on every save.
"""

import json
import logging
from typing import List

from models import Tweet

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the results file cannot be read, parsed or written"""

    pass


def write_tweets(path: str, tweets: List[Tweet]):
    """Overwrite the results file with all tweets, as an indented JSON array"""
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump([t.to_dict() for t in tweets], f, ensure_ascii=False, indent=4)
    except OSError as e:
        logger.error(f"write_tweets - path:{path} - {e}")
        raise StorageError(f"Could not write {path}: {e}") from e

    logger.debug(f"write_tweets - saved {len(tweets)} tweets to {path}")


def read_tweets(path: str) -> List[Tweet]:
    """Load tweets from a results file

    Args:
        path: File written by write_tweets()

    Returns:
        Tweets in file order

    Raises:
        StorageError: If the file is missing or is not a JSON array of tweets
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        logger.error(f"read_tweets - path:{path} - {e}")
        raise StorageError(f"{path} not found") from e
    except OSError as e:
        logger.error(f"read_tweets - path:{path} - {e}")
        raise StorageError(f"Could not read {path}: {e}") from e
    except json.JSONDecodeError as e:
        logger.error(f"read_tweets - path:{path} - {e}")
        raise StorageError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, list):
        logger.error(f"read_tweets - path:{path} - top level is not an array")
        raise StorageError(f"{path} does not contain a JSON array")

    try:
        return [Tweet.from_dict(item) for item in data]
    except (KeyError, TypeError) as e:
        logger.error(f"read_tweets - path:{path} - malformed entry: {e}")
        raise StorageError(f"Malformed tweet entry in {path}: {e}") from e
