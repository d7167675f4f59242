from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator, model_validator
from typing import Optional

from spectracolor.domain.models.reference import Illuminant, Observer


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SPECTRACOLOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # General
    app_name: str = Field("SpectraColor API", description="Human readable service name")
    environment: str = Field("production", description="Deployment environment")
    debug: bool = Field(False)

    # API
    api_prefix: str = Field("/api/v1", description="URL prefix of the JSON endpoints")
    max_request_size: int = Field(5 * 1024 * 1024, description="Largest accepted request body in bytes")  # 5MB

    # Conversion defaults
    default_illuminant: str = Field(Illuminant.D65.value, description="Illuminant used when a request names none")
    default_observer: str = Field(Observer.TWO_DEGREE.value, description="Standard observer used when a request names none")
    apply_gamma_correction: bool = Field(True, description="Apply sRGB encoding unless a request disables it")

    # Integration
    visible_min_nm: float = Field(380.0, description="Lower bound of the integration range")
    visible_max_nm: float = Field(780.0, description="Upper bound of the integration range")
    white_point_step_nm: float = Field(1.0, description="Sampling step of the illuminant white point integral")

    # Logging
    log_dir: Optional[str] = Field(None, description="Directory for the rotating JSON log; console only when unset")
    log_level: str = Field("INFO")
    configure_logging: bool = Field(True, description="Apply the logging config when the Django app loads")

    @field_validator("default_illuminant", mode="before")
    @classmethod
    def validate_default_illuminant(cls, v):
        try:
            return Illuminant.from_key(v).value
        except ValueError:
            raise ValueError(f"Default illuminant must be one of: {Illuminant.keys()}")

    @field_validator("default_observer", mode="before")
    @classmethod
    def validate_default_observer(cls, v):
        try:
            return Observer.from_key(v).value
        except ValueError:
            raise ValueError(f"Default observer must be one of: {Observer.keys()}")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        allowed_environments = ["development", "staging", "production", "test"]
        if v not in allowed_environments:
            raise ValueError(f"Environment must be one of: {allowed_environments}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed_levels:
            raise ValueError(f"Log level must be one of: {allowed_levels}")
        return v.upper()

    @field_validator("white_point_step_nm")
    @classmethod
    def validate_white_point_step(cls, v):
        if v <= 0:
            raise ValueError("White point step must be positive")
        return v

    @model_validator(mode="after")
    def validate_visible_range(self):
        if self.visible_min_nm >= self.visible_max_nm:
            raise ValueError("visible_min_nm must be smaller than visible_max_nm")
        return self


def get_settings() -> Settings:
    return Settings()
