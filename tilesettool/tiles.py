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


# 4bpp pixel packing and tile extraction.
#
# A packed 4bpp image stores two pixels per byte, left pixel in the high
# nibble, so an image row takes width/2 bytes. A VDP tile is 8x8 pixels,
# that is 8 rows of 4 bytes (32 bytes). Tiles are emitted by tile rows,
# left to right and then top to bottom, each tile as a contiguous run.

from .errors import AllocationError

TILE_SIZE = 8          # Pixels per tile side
TILE_ROW_BYTES = 4     # 8 pixels at 4bpp
TILE_BYTES = TILE_SIZE * TILE_ROW_BYTES

def tile_count(width, height):
  return (width // TILE_SIZE) * (height // TILE_SIZE)

def image_to_4bpp(image):
  """Packs an 8bpp index buffer (one pixel per byte) into 4bpp.

  Only the low nibble of each source byte is used. Returns a new buffer
  half the size of the input.
  """
  if len(image) % 2:
    raise ValueError("8bpp buffer must hold an even number of pixels (got %d)" % len(image))

  try:
    out = bytearray(len(image) // 2)
    for i in range(len(out)):
      out[i] = ((image[2*i] & 0x0F) << 4) | (image[2*i+1] & 0x0F)
    return bytes(out)
  except MemoryError as e:
    raise AllocationError("Can't convert image to 4bpp") from e

def image_4bpp_to_tiles(image, width, height):
  """Reorders a raster 4bpp image into 8x8 tiles (32 bytes each)."""
  twidth, theight = width // TILE_SIZE, height // TILE_SIZE
  # Bytes to skip to reach the same tile column in the next pixel row
  pitch = twidth * TILE_ROW_BYTES

  if len(image) < pitch * height:
    raise ValueError("4bpp buffer too short: %d bytes for a %dx%d image" % (len(image), width, height))

  try:
    tiles = bytearray(twidth * theight * TILE_BYTES)
  except MemoryError as e:
    raise AllocationError("Can't allocate %d tiles" % (twidth * theight)) from e

  off = 0
  for ty in range(theight):
    for tx in range(twidth):
      src = (ty * TILE_SIZE) * pitch + tx * TILE_ROW_BYTES
      for r in range(TILE_SIZE):
        tiles[off:off+TILE_ROW_BYTES] = image[src:src+TILE_ROW_BYTES]
        src += pitch
        off += TILE_ROW_BYTES

  return bytes(tiles)

def tiles_to_image_4bpp(tiles, width, height):
  # Inverse of image_4bpp_to_tiles: puts tiles back in raster order
  twidth, theight = width // TILE_SIZE, height // TILE_SIZE
  pitch = twidth * TILE_ROW_BYTES
  assert len(tiles) == twidth * theight * TILE_BYTES

  image = bytearray(pitch * height)
  off = 0
  for ty in range(theight):
    for tx in range(twidth):
      dst = (ty * TILE_SIZE) * pitch + tx * TILE_ROW_BYTES
      for r in range(TILE_SIZE):
        image[dst:dst+TILE_ROW_BYTES] = tiles[off:off+TILE_ROW_BYTES]
        dst += pitch
        off += TILE_ROW_BYTES

  return bytes(image)
