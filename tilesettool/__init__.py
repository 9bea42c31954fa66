# -*- coding: utf-8 -*-

# Copyright (C) 2024 The tilesettool authors
#
# This program is free software: you can redistribute it and/or
# modify it under the terms of the GNU General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.	 See the GNU
# General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see
# <http://www.gnu.org/licenses/>.


# MegaDrive/Genesis tileset extractor.
#
# Converts indexed images (up to 16 colors, 4bpp or 8bpp) into VDP tiles:
# 8x8 pixels, 4 bits per pixel, 32 bytes per tile (8 rows of 4 bytes, the
# left pixel of each pair in the high nibble). Tiles are stored left to
# right, top to bottom.

__version__ = "0.2.0"

VERSION_TEXT = (
  "tilesettool v%s\n"
  "A Sega Megadrive/Genesis image tileset extractor\n" % __version__)

from .errors import (TilesetError, DecodeError, ValidationError,
                     AllocationError, CapacityError, OutputError)
from .tiles import image_to_4bpp, image_4bpp_to_tiles, tiles_to_image_4bpp, tile_count
from .validate import check_image, validate_image
from .decode import DecodedImage, decode_image
from .catalog import (MAX_TILESETS, TilesetRecord, TilesetCatalog, ImageResult,
                      tileset_name, read_tileset, iter_tilesets, build_catalog)
