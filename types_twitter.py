"""Type definitions for Twitter premium search"""

from typing import NewType

# Opaque values handed back by the API
BearerToken = NewType("BearerToken", str)
PageCursor = NewType("PageCursor", str)
