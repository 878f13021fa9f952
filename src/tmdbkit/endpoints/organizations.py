"""Collection, company, network, keyword and review endpoints."""

from __future__ import annotations

from tmdbkit.api.endpoints import INCLUDE_IMAGE_LANGUAGE, LOCALIZED, EndpointSpec
from tmdbkit.models import (
    Collection,
    Company,
    ImageCollection,
    Keyword,
    LogoCollection,
    Network,
    Review,
)

COLLECTION_DETAILS = EndpointSpec("/collection/{collection_id}", Collection, LOCALIZED)
COLLECTION_IMAGES = EndpointSpec(
    "/collection/{collection_id}/images", ImageCollection, (INCLUDE_IMAGE_LANGUAGE,)
)

COMPANY_DETAILS = EndpointSpec("/company/{company_id}", Company)
COMPANY_IMAGES = EndpointSpec("/company/{company_id}/images", LogoCollection)

NETWORK_DETAILS = EndpointSpec("/network/{network_id}", Network)
NETWORK_IMAGES = EndpointSpec("/network/{network_id}/images", LogoCollection)

KEYWORD_DETAILS = EndpointSpec("/keyword/{keyword_id}", Keyword)

REVIEW_DETAILS = EndpointSpec("/review/{review_id}", Review)
