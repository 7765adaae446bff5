"""
Atlas schema models.

AtlasConfig holds the constructor parameters of an AtlasBuilder.
AtlasDefinition is the embedded atlas payload: a base64 PNG plus its
resolution, the same shape a model's meta.atlases entries use.
"""

import base64
from io import BytesIO
from pathlib import Path
from typing import List

from PIL import Image
from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator


class AtlasConfig(BaseModel):
    model_config = ConfigDict(extra='forbid')

    base_path: Path = Field(..., description="Directory holding the tile PNGs.")
    unit_width: PositiveInt = Field(..., description="Width of every tile in pixels.")
    unit_height: PositiveInt = Field(..., description="Height of one tile frame in pixels.")


class AtlasDefinition(BaseModel):
    data: str = Field(..., description="Base64-encoded image data.")
    mime: str = Field('image/png', description="MIME type (e.g., 'image/png').")
    resolution: List[int] = Field(..., description="[width, height] pixels.", min_length=2, max_length=2)

    @field_validator('resolution')
    @classmethod
    def validate_resolution(cls, v):
        if any(d <= 0 for d in v):
            raise ValueError("Atlas resolution must be positive")
        return v

    def to_image(self) -> Image.Image:
        """Decode the embedded payload back into an RGBA image."""
        img = Image.open(BytesIO(base64.b64decode(self.data)))
        return img.convert('RGBA')
