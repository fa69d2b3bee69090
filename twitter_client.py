"""
Twitter premium search client
App-only bearer token retrieval and single page search requests
"""

import logging
from typing import Dict, Optional

import requests

from models import SearchPage
from types_twitter import BearerToken, PageCursor
from utils import basic_credentials

logger = logging.getLogger(__name__)


class TwitterSearchError(Exception):
    """Base class for premium search failures"""

    pass


class TransportError(TwitterSearchError):
    """Raised when a request cannot reach the API or its reply is unreadable"""

    def __init__(self, operation: str, cause: Exception):
        super().__init__(f"{operation} failed: {cause}")
        self.operation = operation
        self.cause = cause


class AuthenticationError(TwitterSearchError):
    """Raised when the token endpoint does not issue a bearer token"""

    def __init__(self, status_code: int, message: str = ""):
        super().__init__(f"authorization request response status: {status_code} {message}".strip())
        self.status_code = status_code


class SearchRequestError(TwitterSearchError):
    """Raised when the search endpoint answers with a non-2xx status"""

    def __init__(self, status_code: int, query: str):
        super().__init__(f"search request response status: {status_code}, query: {query}")
        self.status_code = status_code
        self.query = query


class TwitterSearchClient:
    """Client for the Twitter premium search API (30day / fullarchive)"""

    REQUEST_TIMEOUT = 30  # seconds

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        auth_url: str,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the search client

        Args:
            consumer_key: Twitter app consumer key
            consumer_secret: Twitter app consumer secret
            auth_url: URL of the oauth2 token endpoint
            session: requests session to send through. A new one if None
        """
        if not consumer_key or not consumer_secret:
            raise ValueError("Twitter consumer key and secret required")

        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret
        self.auth_url = auth_url
        self.session = session or requests.Session()

    def get_bearer_token(self) -> BearerToken:
        """Fetch an app-only bearer token via Twitter's oauth2 interface

        Returns:
            Bearer token for subsequent search requests

        Raises:
            AuthenticationError: On a non-2xx response or a reply without a token
            TransportError: If the request fails or the reply is not the expected JSON
        """
        logger.debug(f"get_bearer_token - url:{self.auth_url}")

        headers = {
            "Authorization": "Basic " + basic_credentials(self.consumer_key, self.consumer_secret),
            "Content-Type": "application/x-www-form-urlencoded;charset=UTF-8",
        }

        try:
            response = self.session.post(
                self.auth_url,
                headers=headers,
                data="grant_type=client_credentials",
                timeout=self.REQUEST_TIMEOUT,
            )
            if not response.ok:
                raise AuthenticationError(response.status_code)

            data = response.json()
            if not isinstance(data, dict):
                raise TransportError(
                    "get_bearer_token", ValueError(f"expected a JSON object, got {type(data).__name__}")
                )

            token = data.get("access_token")
            if not token:
                raise AuthenticationError(response.status_code, "(no access_token in response)")

        except (AuthenticationError, TransportError) as e:
            logger.error(f"get_bearer_token - url:{self.auth_url} - {e}")
            raise
        except requests.RequestException as e:
            logger.error(f"get_bearer_token - url:{self.auth_url} - {e}")
            raise TransportError("get_bearer_token", e) from e

        return BearerToken(token)

    def fetch_page(
        self,
        token: BearerToken,
        url: str,
        query: str,
        from_date: str,
        max_results: int,
        cursor: Optional[PageCursor] = None,
    ) -> SearchPage:
        """Request one page of premium search results

        Args:
            token: Bearer token from get_bearer_token()
            url: Premium search URL (30day or fullarchive)
            query: Twitter search operator
            from_date: UTC timestamp (YYYYMMDDhhmm) for the start of the search
            max_results: Maximum number of tweets in the page
            cursor: "next" value from the previous page, None for the first page

        Returns:
            SearchPage with the page's raw items and the cursor for the next page

        Raises:
            SearchRequestError: On a non-2xx response
            TransportError: If the request fails or the reply is not the expected JSON
        """
        logger.debug(f"fetch_page - url:{url}, query:{query}")

        body: Dict = {
            "query": query,
            "fromDate": from_date,
            "maxResults": max_results,
        }
        if cursor:
            body["next"] = cursor

        try:
            response = self.session.post(
                url,
                headers={"Authorization": f"Bearer {token}"},
                json=body,
                timeout=self.REQUEST_TIMEOUT,
            )
            if not response.ok:
                raise SearchRequestError(response.status_code, query)

            data = response.json()
            if not isinstance(data, dict) or not isinstance(data.get("results", []), list):
                raise TransportError(
                    "fetch_page", ValueError("expected a JSON object with a results array")
                )

        except (SearchRequestError, TransportError) as e:
            logger.error(f"fetch_page - query:{query} - {e}")
            raise
        except requests.RequestException as e:
            logger.error(f"fetch_page - query:{query} - {e}")
            raise TransportError("fetch_page", e) from e

        return SearchPage.from_response(data)
