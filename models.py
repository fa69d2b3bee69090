"""
Data models for Twitter premium search results

Raw items come in two shapes depending on the tweet length. 140 character
tweets carry their text at the top level; 280 character tweets are marked
truncated and carry the full text under extended_tweet.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from types_twitter import PageCursor


@dataclass(frozen=True)
class TruncatedTweet:
    """Raw item whose text lives in extended_tweet.full_text"""

    full_text: str
    created_at: str


@dataclass(frozen=True)
class ShortTweet:
    """Raw item whose text lives in the top-level text field"""

    text: str
    created_at: str


RawItem = Union[TruncatedTweet, ShortTweet]


def parse_raw_item(data: Dict) -> RawItem:
    """Build a RawItem from one entry of a search response's results

    Only the truncated flag decides which text field is read.

    Raises:
        KeyError: If the field selected by the truncated flag is missing
    """
    created_at = data.get("created_at")
    if data.get("truncated"):
        return TruncatedTweet(
            full_text=data["extended_tweet"]["full_text"], created_at=created_at
        )
    return ShortTweet(text=data["text"], created_at=created_at)


@dataclass(frozen=True)
class SearchPage:
    """One page of premium search results"""

    items: List[RawItem]
    next_cursor: Optional[PageCursor] = None

    @staticmethod
    def from_response(data: Dict) -> "SearchPage":
        items = [parse_raw_item(r) for r in data.get("results", [])]
        cursor = data.get("next")
        return SearchPage(
            items=items, next_cursor=PageCursor(cursor) if cursor else None
        )


@dataclass(frozen=True)
class Tweet:
    """Normalized tweet as written to the results file"""

    text: str
    created_at: str

    def to_dict(self) -> Dict:
        return {"text": self.text, "created_at": self.created_at}

    @staticmethod
    def from_dict(data: Dict) -> "Tweet":
        return Tweet(text=data["text"], created_at=data["created_at"])
