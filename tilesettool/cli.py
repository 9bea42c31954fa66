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


# Extracts MegaDrive tiles from indexed images and generates C sources.
#
# Usage example: tilesettool -s pngs/path -d dest/path -n res_til
#
# Converts every file in "pngs/path" and writes "res_til.h" and "res_til.c"
# into "dest/path". A single image can be given as source too:
#
#   tilesettool -s pngs/path/file.png -d dest/path
#
# Without -n the single tileset name (no prefix) or "til" (as prefix for
# every define and array) is used as base name.

import os, argparse, logging

from . import VERSION_TEXT
from .errors import CapacityError, OutputError
from .catalog import MAX_TILESETS, build_catalog
from .render import write_output

log = logging.getLogger(__name__)

DEFAULT_NAME = "til"

def tileset_limit(text):
  n = int(text)
  if n < 0:
    raise argparse.ArgumentTypeError("must be 0 or a positive number: %s" % text)
  return n

def parse_args(argv=None):
  parser = argparse.ArgumentParser(prog='tilesettool', description='A Sega Megadrive/Genesis image tileset extractor')
  parser.add_argument('-v', '--version', action='version', version=VERSION_TEXT)
  parser.add_argument('-s', dest='src', type=str, default='.', help='Directory to look for images in, or a single image file')
  parser.add_argument('-d', dest='dest', type=str, default='.', help='Directory to save the generated C source files')
  parser.add_argument('-n', dest='name', type=str, default=None, help='Base name (and prefix) for files, defines and arrays')
  parser.add_argument('--max-tilesets', dest='max_tilesets', type=tileset_limit, default=MAX_TILESETS, help='Maximum number of tilesets (0 for no limit)')
  parser.add_argument('--verbose', dest='verbose', action='store_true', help='Enable debug logging')
  return parser.parse_args(argv)

def find_sources(src):
  # Regular files in a directory (sorted), or the given file
  if os.path.isdir(src):
    return [os.path.join(src, f) for f in sorted(os.listdir(src))
            if os.path.isfile(os.path.join(src, f))]
  return [src]

def output_name(name, catalog):
  """Returns (base name, use_prefix) for the generated files."""
  if name:
    return name, True
  if len(catalog) == 1:
    return catalog[0].name, False
  return DEFAULT_NAME, True

def main(argv=None):
  args = parse_args(argv)
  logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s")

  log.info(VERSION_TEXT)
  sources = find_sources(args.src)
  log.info("Reading %d file(s)...", len(sources))

  try:
    catalog, failures = build_catalog(sources, args.max_tilesets or None)
  except CapacityError as e:
    log.error("Error: %s", e)
    return 1

  log.info("%d tilesets read, %d files skipped.", len(catalog), len(failures))
  if not len(catalog):
    return 0

  base, use_prefix = output_name(args.name, catalog)
  try:
    write_output(args.dest, base, catalog, use_prefix)
  except OutputError as e:
    log.error("Error: %s", e)
    return 1

  log.info("Done.")
  return 0
