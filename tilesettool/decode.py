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


# Image loading, on top of Pillow.
#
# Pillow expands every indexed image to one byte per pixel when decoding,
# so the source bit depth is taken from the decoder tile descriptor
# before the pixel data is loaded. 4bpp images are packed back with the
# "P;4" raw packer (left pixel in the high nibble), any other image is
# returned one byte per sample as Pillow decodes it.

import re, struct, logging, collections
import PIL.Image

from .errors import DecodeError

log = logging.getLogger(__name__)

DecodedImage = collections.namedtuple(
  "DecodedImage", ["width", "height", "indexed", "depth", "colors", "pixels"])

def source_depth(im):
  if not im.tile:
    return 8
  args = im.tile[0][3]
  rawmode = args[0] if isinstance(args, tuple) else args
  # GIF descriptors carry the bit count directly
  if isinstance(rawmode, int):
    return rawmode
  if rawmode == "1":
    return 1
  m = re.match(r"^[A-Z]+;(\d+)", str(rawmode))
  return int(m.group(1)) if m else 8

def decode_image(path):
  try:
    with PIL.Image.open(path) as im:
      depth = source_depth(im)
      im.load()

      indexed = im.mode == "P"
      colors = len(im.getpalette() or []) // 3 if indexed else 0
      if indexed and depth == 4:
        pixels = im.tobytes("raw", "P;4")
      else:
        pixels = im.tobytes()

      log.debug("\t%s: %dx%d mode %s, %d bpp, %d colors",
                path, im.width, im.height, im.mode, depth, colors)
      return DecodedImage(im.width, im.height, indexed, depth, colors, pixels)
  # Corrupt files fail inside the format plugins with more than OSError
  except (OSError, ValueError, SyntaxError, struct.error, PIL.Image.DecompressionBombError) as e:
    raise DecodeError(str(e)) from e
