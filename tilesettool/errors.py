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


# Error taxonomy.
#
# DecodeError, ValidationError and AllocationError only affect a single
# image: the batch logs them and moves on. CapacityError and OutputError
# abort the whole run.

class TilesetError(Exception):
  pass

class DecodeError(TilesetError):
  """The image file could not be opened or decoded."""

class ValidationError(TilesetError):
  """The decoded image does not meet the tile format constraints."""

  def __init__(self, reason, message):
    super().__init__(message)
    self.reason = reason

class AllocationError(TilesetError):
  """No memory left to build a pixel or tile buffer."""

class CapacityError(TilesetError):
  pass

class OutputError(TilesetError):
  pass
