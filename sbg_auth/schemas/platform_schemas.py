"""
Pydantic schemas for the registry of known API platforms.

Each platform deployment is identified by its exact base API URL and carries
the display metadata shown to users.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class PlatformEntry(BaseModel):
    """Display metadata for a registered platform."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Human-readable platform name")
    short_name: str = Field(
        ..., min_length=1, alias="shortName", description="Short platform label"
    )
    dev_token_url: str = Field(
        ..., alias="devTokenURL", description="Page where a user obtains a developer token"
    )


def _build_registry(entries: Mapping[str, dict]) -> Mapping[str, PlatformEntry]:
    return MappingProxyType(
        {url: PlatformEntry.model_validate(entry) for url, entry in entries.items()}
    )


PLATFORM_LOOKUP_BY_API_URL: Mapping[str, PlatformEntry] = _build_registry(
    {
        "https://api.sbgenomics.com": {
            "name": "Seven Bridges",
            "shortName": "SBG",
            "devTokenURL": "https://igor.sbgenomics.com/developer#token",
        },
        "https://eu-api.sbgenomics.com": {
            "name": "Seven Bridges (EU)",
            "shortName": "SBG-EU",
            "devTokenURL": "https://eu.sbgenomics.com/developer#token",
        },
        "https://api.sevenbridges.cn": {
            "name": "Seven Bridges (China)",
            "shortName": "SBG-CN",
            "devTokenURL": "https://platform.sevenbridges.cn/developer#token",
        },
        "https://cgc-api.sbgenomics.com": {
            "name": "Cancer Genomics Cloud",
            "shortName": "CGC",
            "devTokenURL": "https://cgc.sbgenomics.com/developer#token",
        },
        "https://cavatica-api.sbgenomics.com": {
            "name": "Cavatica",
            "shortName": "CAVATICA",
            "devTokenURL": "https://cavatica.sbgenomics.com/developer#token",
        },
        "https://f4c-api.sbgenomics.com": {
            "name": "Fair4Cures",
            "shortName": "F4C",
            "devTokenURL": "https://f4c.sbgenomics.com/developer#token",
        },
    }
)


def find_platform(url: Optional[str]) -> Optional[PlatformEntry]:
    """Look up a platform by its exact API URL."""
    if url is None:
        return None
    return PLATFORM_LOOKUP_BY_API_URL.get(url)
