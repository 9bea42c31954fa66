# -*- coding: utf-8 -*-

import struct, zlib
import pytest
import PIL.Image

from tilesettool.decode import DecodedImage

# Minimal PNG writer for indexed images, Pillow always picks the bit depth
# from the palette length so it can't produce e.g. an 8bpp 4 color file.

def png_chunk(tag, data):
  return struct.pack(">I", len(data)) + tag + data + struct.pack(">I", zlib.crc32(tag + data))

def pack_row(row, depth):
  out = bytearray()
  ppb = 8 // depth
  for i in range(0, len(row), ppb):
    b = 0
    for j, px in enumerate(row[i:i+ppb]):
      b |= (px & ((1 << depth) - 1)) << (8 - depth * (j + 1))
    out.append(b)
  return bytes(out)

def write_indexed_png(path, width, height, depth, colors, pixels=None):
  if pixels is None:
    pixels = [0] * (width * height)
  palette = b"".join(struct.pack("BBB", i * 8, i * 4, 255 - i) for i in range(colors))
  raw = b"".join(b"\x00" + pack_row(pixels[y*width:(y+1)*width], depth) for y in range(height))

  with open(path, "wb") as ofd:
    ofd.write(b"\x89PNG\r\n\x1a\n")
    ofd.write(png_chunk(b"IHDR", struct.pack(">IIBBBBB", width, height, depth, 3, 0, 0, 0)))
    ofd.write(png_chunk(b"PLTE", palette))
    ofd.write(png_chunk(b"IDAT", zlib.compress(raw)))
    ofd.write(png_chunk(b"IEND", b""))
  return str(path)

@pytest.fixture
def indexed_png(tmp_path):
  def make(name, width, height, depth=4, colors=16, pixels=None):
    return write_indexed_png(tmp_path / name, width, height, depth, colors, pixels)
  return make

def make_image(width=8, height=8, indexed=True, depth=4, colors=16, pixels=None):
  if pixels is None:
    size = width * height // 2 if depth == 4 else width * height
    pixels = bytes(size)
  return DecodedImage(width, height, indexed, depth, colors, pixels)

def write_bad_palette_tga(path):
  # Indexed TGA claiming a 300 entry color map that isn't there, Pillow
  # opens it but fails when loading
  im = PIL.Image.new("P", (16, 16), 0)
  im.putpalette(list(range(48)))
  im.save(str(path), format="TGA")

  data = bytearray(path.read_bytes())
  struct.pack_into("<H", data, 5, 300)
  path.write_bytes(bytes(data))
  return str(path)
