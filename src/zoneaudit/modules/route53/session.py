"""Route 53 client construction for named AWS profiles."""

from __future__ import annotations

from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError

from zoneaudit.errors import EnumerationError

# Route 53 is a global service served from us-east-1.
ROUTE53_REGION = "us-east-1"


def create_route53_client(profile: str | None = None, max_pool_connections: int = 20) -> Any:
    """Build a Route 53 client from a shared-config profile.

    ``None`` or ``"default"`` resolves credentials through the normal boto3
    chain (environment, shared files, instance role).
    """
    profile_name = None if profile in (None, "", "default") else profile
    try:
        session = boto3.Session(profile_name=profile_name)
        return session.client(
            "route53",
            region_name=ROUTE53_REGION,
            config=Config(max_pool_connections=max_pool_connections),
        )
    except BotoCoreError as exc:
        raise EnumerationError(f"Cannot open AWS profile {profile!r}: {exc}", profile) from exc
