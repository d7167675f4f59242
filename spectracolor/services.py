"""Service locator for SpectraColor Django integration."""
from __future__ import annotations

from functools import lru_cache

from spectracolor.config.settings import get_settings, Settings
from spectracolor.domain.repositories.reference_repository import ReferenceRepository
from spectracolor.domain.services.tristimulus_service import TristimulusService
from spectracolor.domain.services.color_conversion_service import ColorConversionService
from spectracolor.infrastructure.reference.static_reference_repository import StaticReferenceRepository


@lru_cache()
def get_config() -> Settings:
    return get_settings()


@lru_cache()
def get_reference_repository() -> ReferenceRepository:
    return StaticReferenceRepository()


@lru_cache()
def get_tristimulus_service() -> TristimulusService:
    return TristimulusService(get_reference_repository(), get_config())


@lru_cache()
def get_color_conversion_service() -> ColorConversionService:
    return ColorConversionService(get_tristimulus_service(), get_config())
