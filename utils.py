import base64
import re
from urllib.parse import quote

from models import RawItem, TruncatedTweet, Tweet

# \r\n counts as one newline
_STRIP_RE = re.compile(r"\r?\n|\r|@|#")


def url_encode(value: str) -> str:
    """Percent-encode a credential string

    Everything except A-Z a-z 0-9 - _ . ~ is escaped, including ! ' ( ) *
    """
    return quote(value, safe="")


def basic_credentials(consumer_key: str, consumer_secret: str) -> str:
    """Build the base64 value for a Basic authorization header

    Args:
        consumer_key: Twitter app consumer key
        consumer_secret: Twitter app consumer secret

    Returns:
        base64 of "<encoded key>:<encoded secret>"
    """
    joined = f"{url_encode(consumer_key)}:{url_encode(consumer_secret)}"
    return base64.b64encode(joined.encode("utf-8")).decode("ascii")


def normalize_text(text: str) -> str:
    """Trim tweet text, then replace newlines, @ and # with single spaces"""
    return _STRIP_RE.sub(" ", text.strip())


def normalize(item: RawItem) -> Tweet:
    """Convert a raw search result into a Tweet"""
    if isinstance(item, TruncatedTweet):
        raw_text = item.full_text
    else:
        raw_text = item.text
    return Tweet(text=normalize_text(raw_text), created_at=item.created_at)
