"""Custom exceptions for atlas building operations"""


class AtlasError(Exception):
    """Base exception for atlas errors"""
    pass


class TileDecodeError(AtlasError):
    """Tile or color map image is missing, corrupt, or of an unsupported color type"""

    def __init__(self, message: str, path=None, name=None):
        super().__init__(message)
        self.path = path
        self.name = name


class TileDimensionError(AtlasError, ValueError):
    """Tile size does not match the atlas unit size"""
    pass


class ColorMapSizeError(AtlasError, ValueError):
    """Color map image is not 256x256"""
    pass


class TextureUploadError(AtlasError):
    """Graphics device rejected the finished atlas"""
    pass


class AtlasConsumedError(AtlasError):
    """Builder was already completed"""
    pass
