from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator

from spectracolor.domain.models.reference import Illuminant, Observer


class ParseRequestSchema(BaseModel):
    """Body of the parse endpoint."""
    data: str = Field(..., description="Raw spectral text, one sample per line")


class ConversionRequestSchema(BaseModel):
    """
    Pydantic schema for validating conversion requests in the API layer.

    Illuminant, observer and gamma fall back to the configured defaults when
    omitted; the view fills them in from settings.
    """
    model_config = ConfigDict(populate_by_name=True)

    data: str = Field(..., description="Raw spectral text, one sample per line")
    illuminant: Optional[Illuminant] = Field(None, description="CIE standard illuminant key")
    observer: Optional[Observer] = Field(None, description="Standard observer: '2' or '10'")
    apply_gamma_correction: Optional[bool] = Field(
        None, alias="applyGammaCorrection", description="Apply the sRGB transfer function"
    )
    group: Optional[int] = Field(None, description="Convert only this group")

    @field_validator("illuminant", mode="before")
    @classmethod
    def normalize_illuminant(cls, v):
        if v is None or v == "":
            return None
        return Illuminant.from_key(v)

    @field_validator("observer", mode="before")
    @classmethod
    def normalize_observer(cls, v):
        if v is None or v == "":
            return None
        return Observer.from_key(v)

    @field_validator("group", mode="before")
    @classmethod
    def blank_group(cls, v):
        return None if v == "" else v


class SpectralSampleSchema(BaseModel):
    wavelength: float
    intensity: float
    group: Optional[int] = None


class ColorResultSchema(BaseModel):
    """Wire form of one converted colour."""
    model_config = ConfigDict(populate_by_name=True)

    rgb: Tuple[int, int, int]
    xyz: Tuple[float, float, float]
    chromaticity: Tuple[float, float]
    hex: str = Field(..., pattern=r"^#[0-9a-f]{6}$")
    normalized_rgb: Tuple[int, int, int] = Field(..., alias="normalizedRgb")
    normalized_hex: str = Field(..., alias="normalizedHex", pattern=r"^#[0-9a-f]{6}$")
    illuminant: Illuminant
    observer: Observer
    group: Optional[int] = None


class ConversionResponseSchema(BaseModel):
    results: List[ColorResultSchema]
    groups: List[int]
    sample_count: int = Field(..., alias="sampleCount")


class ParseResponseSchema(BaseModel):
    samples: List[SpectralSampleSchema]
    groups: List[int]
    count: int
