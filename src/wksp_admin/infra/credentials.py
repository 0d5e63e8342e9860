"""Infrastructure: AWS credential and region check.

Used by ``--doctor`` to report whether boto3 can resolve credentials
for the configured profile.  No API request is made and no secret is
ever returned — only where the credentials came from.
"""

from __future__ import annotations

from dataclasses import dataclass

import boto3
from botocore.exceptions import BotoCoreError, ProfileNotFound


@dataclass(frozen=True, slots=True)
class CredentialStatus:
    """Result of a credential resolution check.

    Attributes
    ----------
    found : bool
        Whether boto3 resolved any credentials.
    source : str
        botocore's name for the provider that supplied them
        (e.g. ``"shared-credentials-file"``), or a reason when not found.
    profile : str
        The profile that was checked (``"default chain"`` when empty).
    region : str
        The region the session would use.
    """

    found: bool
    source: str
    profile: str
    region: str


def detect_credentials(profile: str, region: str) -> CredentialStatus:
    """Check boto3's credential chain for *profile* in *region*.

    Returns a :class:`CredentialStatus` regardless of the outcome —
    the caller decides whether to fail or warn.
    """
    label = profile or "default chain"
    try:
        session = boto3.Session(profile_name=profile or None, region_name=region)
        credentials = session.get_credentials()
    except ProfileNotFound:
        return CredentialStatus(
            found=False, source="profile not found", profile=label, region=region,
        )
    except BotoCoreError as exc:
        return CredentialStatus(found=False, source=str(exc), profile=label, region=region)

    if credentials is None:
        return CredentialStatus(
            found=False, source="no credentials", profile=label, region=region,
        )
    return CredentialStatus(
        found=True,
        source=str(getattr(credentials, "method", "") or "unknown"),
        profile=label,
        region=session.region_name or region,
    )
