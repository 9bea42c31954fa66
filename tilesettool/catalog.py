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


# Tileset catalog and per-image conversion pipeline.
#
# Each source image goes through: decode -> validate -> (8bpp only) pack
# to 4bpp -> tile extraction. Images that fail any of these steps are
# reported and skipped, the rest are appended to the catalog in the order
# they were found. The catalog is later handed to the C code emitter.

import os, logging, collections

from .errors import DecodeError, ValidationError, AllocationError, CapacityError
from .tiles import image_to_4bpp, image_4bpp_to_tiles, tile_count
from .validate import validate_image
from .decode import decode_image

log = logging.getLogger(__name__)

MAX_TILESETS = 512

TilesetRecord = collections.namedtuple("TilesetRecord", ["file", "name", "size", "data"])

class ImageResult(collections.namedtuple("ImageResult", ["path", "record", "error"])):
  @property
  def ok(self):
    return self.error is None

class TilesetCatalog(object):
  """Append-only, ordered list of tilesets with an optional capacity."""

  def __init__(self, capacity=MAX_TILESETS):
    self.capacity = capacity
    self._records = []

  def append(self, record):
    if self.capacity is not None and len(self._records) >= self.capacity:
      raise CapacityError("More than %d tilesets found" % self.capacity)
    self._records.append(record)

  def __len__(self):
    return len(self._records)

  def __iter__(self):
    return iter(self._records)

  def __getitem__(self, i):
    return self._records[i]

def tileset_name(file_name):
  # "mytiles.png" -> "mytiles", only the last extension goes
  return os.path.splitext(os.path.basename(file_name))[0]

def read_tileset(path, decoder=decode_image):
  image = decoder(path)
  validate_image(image)

  if image.depth == 8:
    pixels = image_to_4bpp(image.pixels[:image.width * image.height])
  else:
    pixels = image.pixels

  data = image_4bpp_to_tiles(pixels, image.width, image.height)
  file_name = os.path.basename(path)
  return TilesetRecord(file_name, tileset_name(file_name),
                       tile_count(image.width, image.height), data)

def iter_tilesets(paths, decoder=decode_image):
  for path in paths:
    log.info("File %s", path)
    try:
      record = read_tileset(path, decoder)
    except (DecodeError, ValidationError) as e:
      log.warning("\tSkipping file: %s", e)
      yield ImageResult(path, None, e)
    except AllocationError as e:
      log.error("\tError: %s", e)
      yield ImageResult(path, None, e)
    else:
      log.info("\tImage file to tiles: %s -> %s (%d tiles)", record.file, record.name, record.size)
      yield ImageResult(path, record, None)

def build_catalog(paths, capacity=MAX_TILESETS, decoder=decode_image):
  """Converts every path and returns (catalog, failed results).

  Raises CapacityError as soon as more than `capacity` tilesets were read.
  """
  catalog = TilesetCatalog(capacity)
  results = []
  for result in iter_tilesets(paths, decoder):
    results.append(result)
    if result.ok:
      catalog.append(result.record)

  failures = [r for r in results if not r.ok]
  return catalog, failures
