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


# C code emitter for the extracted tilesets.
#
# Generates <name>.h with a size define (in tiles) and an extern
# declaration per tileset, and <name>.c with the tile data as uint32_t
# arrays, one tile (8 rows, one 32 bit word per row) per line:
#
#  #define RES_TIL_MYTILESET_SIZE    3
#  extern const uint32_t res_til_mytileset[RES_TIL_MYTILESET_SIZE * 8];
#
#  const uint32_t res_til_mytileset[RES_TIL_MYTILESET_SIZE * 8] = {
#      0x11111111, 0x11111111, 0x11111111, 0x11111111, 0x11111111, ...,
#      ...
#  };

import os, re, struct, tempfile, logging

from . import __version__
from .errors import OutputError
from .tiles import TILE_BYTES

log = logging.getLogger(__name__)

BANNER = (
  "/* Generated with tilesettool v%s */\n"
  "/* a Sega Megadrive/Genesis image tileset extractor */\n" % __version__)

def c_identifier(text):
  ident = re.sub(r"[^0-9A-Za-z_]", "_", text)
  if not ident or ident[0].isdigit():
    ident = "_" + ident
  return ident

def symbol_name(base, name, use_prefix):
  if use_prefix:
    return c_identifier("%s_%s" % (base, name))
  return c_identifier(name)

def size_define(symbol):
  return (symbol + "_SIZE").upper()

def include_guard(base):
  return (c_identifier(base) + "_H").upper()

def build_header(base, catalog, use_prefix):
  guard = include_guard(base)
  symbols = [symbol_name(base, t.name, use_prefix) for t in catalog]

  out = [BANNER]
  out.append("#ifndef %s\n#define %s\n\n" % (guard, guard))
  out.append("#include <stdint.h>\n\n")
  for sym, t in zip(symbols, catalog):
    out.append("#define %s    %d\n" % (size_define(sym), t.size))
  out.append("\n")
  for sym in symbols:
    out.append("extern const uint32_t %s[%s * 8];\n" % (sym, size_define(sym)))
  out.append("\n")
  out.append("#endif /* %s */\n" % guard)
  return "".join(out)

def tile_words(data):
  # Each tile row (4 bytes) becomes a big endian 32 bit word
  for off in range(0, len(data), TILE_BYTES):
    yield struct.unpack(">8I", data[off:off+TILE_BYTES])

def build_source(base, catalog, use_prefix):
  out = ['#include "%s.h"\n\n' % base]
  for t in catalog:
    sym = symbol_name(base, t.name, use_prefix)
    lines = [", ".join("0x%08X" % w for w in words) for words in tile_words(t.data)]
    out.append("const uint32_t %s[%s * 8] = {\n" % (sym, size_define(sym)))
    out.append(",\n".join("    " + l for l in lines))
    out.append("\n};\n\n")
  return "".join(out)

def restore(path, data):
  if data is None:
    os.unlink(path)
  else:
    with open(path, "wb") as ofd:
      ofd.write(data)

def write_output(dest, base, catalog, use_prefix):
  """Writes <base>.h and <base>.c into dest.

  Both files are first written to temporaries and then moved in place, so
  a failure never leaves a truncated file behind. If the second move fails
  the first file is put back as it was, so .h and .c always match.
  """
  files = [
    (os.path.join(dest, base + ".h"), build_header(base, catalog, use_prefix)),
    (os.path.join(dest, base + ".c"), build_source(base, catalog, use_prefix)),
  ]

  old, tmps, replaced = {}, [], []
  try:
    # Previous contents (None if missing), to undo a half done replace
    for path, _ in files:
      old[path] = None
      if os.path.exists(path):
        with open(path, "rb") as ifd:
          old[path] = ifd.read()

    for path, text in files:
      log.info("Building %s...", path)
      fd, tmp = tempfile.mkstemp(dir=dest, prefix=".%s." % base, suffix=".tmp")
      tmps.append(tmp)
      with open(fd, "w", newline="\n") as ofd:
        ofd.write(text)
    for (path, _), tmp in zip(files, tmps):
      os.replace(tmp, path)
      replaced.append(path)
  except OSError as e:
    for tmp in tmps:
      if os.path.exists(tmp):
        os.unlink(tmp)
    for path in replaced:
      restore(path, old[path])
    raise OutputError("Can't write output files in %s: %s" % (dest, e)) from e

  return [path for path, _ in files]
