# -*- coding: utf-8 -*-
import json
import logging
from pathlib import Path

import pytest

from objmesh.assets import LoadContext, LoaderRegistry, ObjLoader
from objmesh.errors import InvalidObjError, UnsupportedExtensionError
from objmesh.mesh import Mesh
from objmesh.plugins.plugin_manager import PluginManager
from objmesh.utils.config import Config, DEFAULT_CONFIG
from objmesh.utils.logger import logger, set_log_level


@pytest.fixture
def restore_log_level():
    level = logger.level
    yield
    logger.setLevel(level)


# ----------------------------------------------------------------------
# ObjLoader
# ----------------------------------------------------------------------
def test_obj_loader_sets_default_asset(textured_triangle):
    ctx = LoadContext("tri.obj")
    ObjLoader().load(textured_triangle, ctx)
    assert isinstance(ctx.default_asset, Mesh)
    assert ctx.default_asset.vertex_count == 3


def test_obj_loader_failure_registers_nothing():
    ctx = LoadContext("broken.obj")
    with pytest.raises(InvalidObjError):
        ObjLoader().load(b"v 0 0\n", ctx)
    assert ctx.default_asset is None


def test_obj_loader_extensions():
    assert ObjLoader().extensions() == ("obj",)


# ----------------------------------------------------------------------
# LoaderRegistry
# ----------------------------------------------------------------------
def test_registry_dispatches_by_suffix(textured_triangle):
    registry = LoaderRegistry()
    registry.register(".OBJ", ObjLoader().load)
    assert registry.extensions() == ["obj"]

    ctx = registry.load("models/Tri.Obj", textured_triangle)
    assert ctx.path == "models/Tri.Obj"
    assert ctx.default_asset.indices.tolist() == [0, 1, 2]


def test_registry_unknown_extension():
    registry = LoaderRegistry()
    with pytest.raises(UnsupportedExtensionError) as info:
        registry.load("scene.fbx", b"")
    assert isinstance(info.value, KeyError)
    assert info.value.extension == "fbx"
    assert "fbx" in str(info.value)


# ----------------------------------------------------------------------
# Плагины
# ----------------------------------------------------------------------
def test_plugin_manager_registers_obj_loader(normal_quad, restore_log_level):
    manager = PluginManager(config=Config())
    registry = manager.discover()
    assert registry.extensions() == ["obj"]
    assert manager.get_loader("obj") is not None

    ctx = registry.load("quad.obj", normal_quad)
    assert ctx.default_asset.triangle_count == 2


def test_plugin_manager_uses_configured_extensions(restore_log_level):
    config = Config()
    config["obj"] = {"extensions": ["obj", ".OBJX"]}
    registry = PluginManager(config=config).discover()
    assert registry.extensions() == ["obj", "objx"]


# ----------------------------------------------------------------------
# Config / logger
# ----------------------------------------------------------------------
def test_config_in_memory_defaults():
    config = Config()
    assert config["log_level"] == "INFO"
    assert config.obj_extensions == ["obj"]
    assert config.get("missing", 42) == 42
    # дефолты не должны разделять состояние
    config["obj"]["extensions"].append("x")
    assert DEFAULT_CONFIG["obj"]["extensions"] == ["obj"]


def test_config_creates_default_file(tmp_path):
    path = tmp_path / "objmesh.json"
    Config(str(path))
    assert json.loads(path.read_text(encoding="utf-8")) == DEFAULT_CONFIG


def test_config_reads_existing_file(tmp_path):
    path = tmp_path / "objmesh.json"
    path.write_text(json.dumps({"log_level": "DEBUG"}), encoding="utf-8")
    config = Config(str(path))
    assert config["log_level"] == "DEBUG"
    assert config.obj_extensions == ["obj"]


def test_config_broken_file_falls_back(tmp_path):
    path = tmp_path / "objmesh.json"
    path.write_text("{not json", encoding="utf-8")
    config = Config(str(path))
    assert config.data == DEFAULT_CONFIG
    assert json.loads(path.read_text(encoding="utf-8")) == DEFAULT_CONFIG


def test_apply_logging(restore_log_level):
    config = Config()
    config["log_level"] = "debug"
    config.apply_logging()
    assert logger.level == logging.DEBUG


def test_set_log_level_rejects_unknown(restore_log_level):
    with pytest.raises(ValueError):
        set_log_level("chatty")


def test_config_missing_section_does_not_leak_defaults(tmp_path):
    path = tmp_path / "objmesh.json"
    path.write_text(json.dumps({"log_level": "INFO"}), encoding="utf-8")
    config = Config(str(path))
    config["obj"]["extensions"].append("stl")
    assert DEFAULT_CONFIG["obj"]["extensions"] == ["obj"]
    assert Config(str(tmp_path / "other.json")).obj_extensions == ["obj"]


def test_config_non_object_json_falls_back(tmp_path, restore_log_level):
    path = tmp_path / "objmesh.json"
    path.write_text("[]", encoding="utf-8")
    config = Config(str(path))
    assert config.data == DEFAULT_CONFIG
    config.apply_logging()
    assert json.loads(path.read_text(encoding="utf-8")) == DEFAULT_CONFIG


def test_plugin_manager_scans_own_package(restore_log_level):
    import objmesh.plugins
    manager = PluginManager(config=Config())
    assert manager.dir == Path(objmesh.plugins.__file__).parent
    with pytest.raises(TypeError):
        PluginManager(plugins_dir=manager.dir)
