"""Pydantic models for atlas configuration and embedded atlas payloads."""

from .atlas import AtlasConfig, AtlasDefinition

__all__ = ["AtlasConfig", "AtlasDefinition"]
