"""
BlockAtlas Quick Start Example

This example packs a handful of generated block tiles into an atlas and
writes the result to output/atlas.png.
"""

import logging
import os
import tempfile

from PIL import Image

from blockatlas import AtlasBuilder, EmbeddedAtlasDevice

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

TILES = {
    "stone": (125, 125, 125, 255),
    "dirt": (134, 96, 67, 255),
    "grass_top": (95, 159, 53, 255),
    "sand": (219, 207, 163, 255),
    "water": (47, 67, 244, 160),
}

with tempfile.TemporaryDirectory() as tile_dir:
    for name, color in TILES.items():
        Image.new('RGBA', (16, 16), color).save(os.path.join(tile_dir, f"{name}.png"))

    builder = AtlasBuilder(tile_dir, 16, 16)
    for name in TILES:
        x, y = builder.load(name)
        print(f"{name:10s} -> ({x}, {y})  uv={builder.uv_rect(name)}")

    x, y = builder.load("water")
    print(f"water is translucent: min alpha {builder.min_alpha((x, y, 16, 16))}")

    atlas = builder.complete(EmbeddedAtlasDevice())

os.makedirs("output", exist_ok=True)
atlas.to_image().save("output/atlas.png")
print(f"✅ Saved {atlas.resolution[0]}x{atlas.resolution[1]} atlas to output/atlas.png")
