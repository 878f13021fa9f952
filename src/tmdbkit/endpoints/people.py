"""Person endpoints."""

from __future__ import annotations

from tmdbkit.api.endpoints import LOCALIZED, LOCALIZED_PAGE, EndpointSpec
from tmdbkit.models import (
    ExternalIDs,
    ImageCollection,
    PageableList,
    Person,
    PersonCredits,
    PersonListItem,
)

DETAILS = EndpointSpec("/person/{person_id}", Person, LOCALIZED)
COMBINED_CREDITS = EndpointSpec("/person/{person_id}/combined_credits", PersonCredits, LOCALIZED)
MOVIE_CREDITS = EndpointSpec("/person/{person_id}/movie_credits", PersonCredits, LOCALIZED)
TV_CREDITS = EndpointSpec("/person/{person_id}/tv_credits", PersonCredits, LOCALIZED)
# Profile images carry no language, so this endpoint takes no filters.
IMAGES = EndpointSpec("/person/{person_id}/images", ImageCollection)
EXTERNAL_IDS = EndpointSpec("/person/{person_id}/external_ids", ExternalIDs)
POPULAR = EndpointSpec("/person/popular", PageableList[PersonListItem], LOCALIZED_PAGE)
