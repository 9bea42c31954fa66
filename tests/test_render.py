# -*- coding: utf-8 -*-

import os
import pytest

from tilesettool import render
from tilesettool.catalog import TilesetCatalog, TilesetRecord
from tilesettool.errors import OutputError

def make_catalog():
  cat = TilesetCatalog()
  cat.append(TilesetRecord("mytileset.png", "mytileset", 2, bytes(range(64))))
  cat.append(TilesetRecord("font-8x8.png", "font-8x8", 1, b"\x11" * 32))
  return cat

def test_names():
  assert render.c_identifier("font-8x8") == "font_8x8"
  assert render.c_identifier("8x8") == "_8x8"
  assert render.symbol_name("res_til", "mytileset", True) == "res_til_mytileset"
  assert render.symbol_name("res_til", "mytileset", False) == "mytileset"
  assert render.size_define("res_til_mytileset") == "RES_TIL_MYTILESET_SIZE"
  assert render.include_guard("res_til") == "RES_TIL_H"

def test_header():
  text = render.build_header("res_til", make_catalog(), True)
  assert "#ifndef RES_TIL_H\n#define RES_TIL_H\n" in text
  assert "#include <stdint.h>" in text
  assert "#define RES_TIL_MYTILESET_SIZE    2\n" in text
  assert "#define RES_TIL_FONT_8X8_SIZE    1\n" in text
  assert "extern const uint32_t res_til_mytileset[RES_TIL_MYTILESET_SIZE * 8];\n" in text
  assert "extern const uint32_t res_til_font_8x8[RES_TIL_FONT_8X8_SIZE * 8];\n" in text
  assert text.endswith("#endif /* RES_TIL_H */\n")

def test_header_no_prefix():
  text = render.build_header("mytileset", make_catalog(), False)
  assert "#define MYTILESET_SIZE    2\n" in text
  assert "extern const uint32_t font_8x8[FONT_8X8_SIZE * 8];\n" in text

def test_source():
  text = render.build_source("res_til", make_catalog(), True)
  assert text.startswith('#include "res_til.h"\n\n')
  assert ("const uint32_t res_til_mytileset[RES_TIL_MYTILESET_SIZE * 8] = {\n"
          "    0x00010203, 0x04050607, 0x08090A0B, 0x0C0D0E0F, "
          "0x10111213, 0x14151617, 0x18191A1B, 0x1C1D1E1F,\n"
          "    0x20212223, 0x24252627, 0x28292A2B, 0x2C2D2E2F, "
          "0x30313233, 0x34353637, 0x38393A3B, 0x3C3D3E3F\n"
          "};\n\n") in text
  assert ("const uint32_t res_til_font_8x8[RES_TIL_FONT_8X8_SIZE * 8] = {\n"
          "    " + ", ".join(["0x11111111"] * 8) + "\n};\n\n") in text

def test_write_output(tmp_path):
  paths = render.write_output(str(tmp_path), "res_til", make_catalog(), True)
  assert sorted(os.listdir(str(tmp_path))) == ["res_til.c", "res_til.h"]
  assert paths == [str(tmp_path / "res_til.h"), str(tmp_path / "res_til.c")]
  assert (tmp_path / "res_til.h").read_text() == render.build_header("res_til", make_catalog(), True)

def test_write_output_missing_dir(tmp_path):
  with pytest.raises(OutputError):
    render.write_output(str(tmp_path / "nope"), "res_til", make_catalog(), True)

def test_write_output_no_partial_files(tmp_path, monkeypatch):
  def broken_replace(src, dst):
    raise OSError("disk full")

  monkeypatch.setattr(render.os, "replace", broken_replace)
  with pytest.raises(OutputError):
    render.write_output(str(tmp_path), "res_til", make_catalog(), True)
  assert os.listdir(str(tmp_path)) == []

def test_write_output_keeps_pair_consistent(tmp_path, monkeypatch):
  (tmp_path / "res_til.h").write_text("old header\n")
  (tmp_path / "res_til.c").write_text("old source\n")
  real_replace = os.replace
  calls = []

  def replace_once(src, dst):
    calls.append(dst)
    if len(calls) > 1:
      raise OSError("disk full")
    real_replace(src, dst)

  monkeypatch.setattr(render.os, "replace", replace_once)
  with pytest.raises(OutputError):
    render.write_output(str(tmp_path), "res_til", make_catalog(), True)

  assert (tmp_path / "res_til.h").read_text() == "old header\n"
  assert (tmp_path / "res_til.c").read_text() == "old source\n"
  assert sorted(os.listdir(str(tmp_path))) == ["res_til.c", "res_til.h"]

def test_write_output_removes_new_header(tmp_path, monkeypatch):
  real_replace = os.replace

  def replace_header_only(src, dst):
    if dst.endswith(".c"):
      raise OSError("disk full")
    real_replace(src, dst)

  monkeypatch.setattr(render.os, "replace", replace_header_only)
  with pytest.raises(OutputError):
    render.write_output(str(tmp_path), "res_til", make_catalog(), True)
  assert os.listdir(str(tmp_path)) == []
