"""Codec configuration model."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from fastcolor.exceptions import ConfigFileInvalidError, wrap_pydantic_error

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".fastcolor" / "config.json"


class CodecConfig(BaseModel):
    """Settings for palette generation and the random source.

    Only the command line front end reads this; the codec functions take
    their parameters explicitly.
    """

    # Even-hue palette
    even_hue_saturation: float = Field(
        default=80, ge=0, le=100, description="Saturation (%) of even-hue palettes"
    )
    even_hue_value: float = Field(
        default=60, ge=0, le=100, description="Value (%) of even-hue palettes"
    )

    # Golden-ratio palette
    golden_saturation: float = Field(
        default=70, ge=0, le=100, description="Saturation (%) of golden-ratio palettes"
    )
    golden_value: float = Field(
        default=65, ge=0, le=100, description="Value (%) of golden-ratio palettes"
    )

    # Random source
    seed: int | None = Field(
        default=None,
        description="Seed for random colors and palette start hues (None = unseeded)",
    )

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "CodecConfig":
        """
        Load config from a JSON file, or return defaults if it doesn't exist.

        Args:
            path: Path to config file. If None, uses ~/.fastcolor/config.json.

        Raises:
            ConfigFileInvalidError: If the file is empty or not valid JSON
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        if not path.exists():
            logger.debug(f"No config at {path}, using defaults")
            return cls()

        json_content = path.read_text()
        if not json_content.strip():
            raise ConfigFileInvalidError(str(path), "File is empty")

        try:
            config = cls.model_validate_json(json_content)
        except ValidationError as e:
            logger.error(f"Validation error loading {cls.__name__} from {path}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded {cls.__name__} from {path}")
        return config
