import json
import logging
from typing import List, Optional

from config import ConfigurationError, SearchConfig
from models import Tweet
from tweet_store import StorageError, read_tweets

logger = logging.getLogger(__name__)


def print_tweets(tweets: List[Tweet]):
    """Print tweets as the indented JSON stored on disk"""
    print(json.dumps([t.to_dict() for t in tweets], ensure_ascii=False, indent=4))


def show_summary(tweets: List[Tweet]):
    """Show summary statistics"""
    print("\n" + "=" * 70)
    print("📊 SEARCH RESULTS SUMMARY")
    print("=" * 70)
    print(f"Total Tweets:     {len(tweets)}")
    if tweets:
        print(f"First:            {tweets[0].created_at or 'Unknown'}")
        print(f"Last:             {tweets[-1].created_at or 'Unknown'}")
    print("=" * 70)


def main(path: Optional[str] = None) -> int:
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
    )

    if path is None:
        try:
            path = SearchConfig.load().output_file
        except ConfigurationError:
            # viewing needs no credentials
            path = "./tweets.json"

    print("👀 Tweet Viewer")
    try:
        tweets = read_tweets(path)
    except StorageError as e:
        print(f"\n📭 {e}")
        return 1

    show_summary(tweets)
    print_tweets(tweets)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
