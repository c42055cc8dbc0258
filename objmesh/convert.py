"""
OBJ‑байты → триангулированный Mesh: parse → classify → build.
"""

from objmesh.builder import build_mesh
from objmesh.classifier import classify
from objmesh.mesh import Mesh, PrimitiveTopology
from objmesh.parser.raw import parse_obj


def load_obj_from_bytes(data, mesh: Mesh = None) -> Mesh:
    raw = parse_obj(data)
    tier = classify(raw.polygons)
    if mesh is None:
        mesh = Mesh(PrimitiveTopology.TRIANGLE_LIST)
    return build_mesh(raw, tier, mesh)
