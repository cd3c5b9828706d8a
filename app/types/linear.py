"""Type definitions for Linear webhooks."""

from typing import Literal

LinearAction = Literal["create", "update", "remove"]

LinearActorType = Literal["user", "integration", "oauth_client"]
