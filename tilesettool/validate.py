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


# Checks a decoded image against the VDP tile format constraints.
# Checks run in a fixed order and stop at the first failure, so a single
# reason is ever reported for a given image.

from .errors import ValidationError

MAX_COLORS = 16
VALID_DEPTHS = (4, 8)

# Rejection reasons
NOT_INDEXED = "not-indexed"
BAD_DEPTH = "bad-depth"
TOO_MANY_COLORS = "too-many-colors"
BAD_WIDTH = "bad-width"
BAD_HEIGHT = "bad-height"

CHECKS = [
  (NOT_INDEXED,     lambda im: im.indexed),
  (BAD_DEPTH,       lambda im: im.depth in VALID_DEPTHS),
  (TOO_MANY_COLORS, lambda im: im.colors <= MAX_COLORS),
  (BAD_WIDTH,       lambda im: im.width % 8 == 0),
  (BAD_HEIGHT,      lambda im: im.height % 8 == 0),
]

def check_image(image):
  """Returns None if the image is accepted, the rejection reason otherwise."""
  for reason, check in CHECKS:
    if not check(image):
      return reason
  return None

def reason_text(reason, image):
  if reason == NOT_INDEXED:
    return "The image must be in indexed color mode"
  if reason == BAD_DEPTH:
    return "%d bpp not supported. Only 4bpp and 8bpp images supported" % image.depth
  if reason == TOO_MANY_COLORS:
    return "More than %d colors image detected (%d)" % (MAX_COLORS, image.colors)
  if reason == BAD_WIDTH:
    return "Image width (%d) is not multiple of 8" % image.width
  if reason == BAD_HEIGHT:
    return "Image height (%d) is not multiple of 8" % image.height
  raise KeyError(reason)

def validate_image(image):
  reason = check_image(image)
  if reason is not None:
    raise ValidationError(reason, reason_text(reason, image))
