"""
Конкретные типы узлов и явный упорядоченный список их регистрации.
"""

from studiosg.sg.node import Node, leaf_factory
from studiosg.sg.value import ValueKind
from studiosg.sg.nodes.base import ObjectNode
from studiosg.sg.nodes.transform import Transform
from studiosg.sg.nodes.world import World
from studiosg.sg.nodes.framebuffer import FrameBuffer
from studiosg.sg.nodes.renderer import Renderer, PathTracer, SciVis
from studiosg.sg.nodes.camera import Camera, PerspectiveCamera, OrthographicCamera, PanoramicCamera
from studiosg.sg.nodes.volume import Volume, StructuredVolume, StructuredSpherical, VoxelType
from studiosg.sg.nodes.transfer_function import TransferFunction, JetTransferFunction
from studiosg.sg.nodes.lights import Light, AmbientLight, DistantLight, SphereLight, SpotLight
from studiosg.sg.nodes.materials import Material, OBJMaterial, PrincipledMaterial
from studiosg.sg.nodes.frame import Frame


def _group(name: str) -> Node:
    return Node(name, "node")


BUILTIN_TYPES = [
    ("node", _group),
    ("bool", leaf_factory("bool", ValueKind.BOOL)),
    ("int", leaf_factory("int", ValueKind.INT)),
    ("float", leaf_factory("float", ValueKind.FLOAT)),
    ("vec2f", leaf_factory("vec2f", ValueKind.VEC2F)),
    ("vec3f", leaf_factory("vec3f", ValueKind.VEC3F)),
    ("vec4f", leaf_factory("vec4f", ValueKind.VEC4F)),
    ("vec2i", leaf_factory("vec2i", ValueKind.VEC2I)),
    ("vec3i", leaf_factory("vec3i", ValueKind.VEC3I)),
    ("string", leaf_factory("string", ValueKind.STRING)),
    ("handle", leaf_factory("handle", ValueKind.HANDLE)),
    ("transform", Transform),
    ("world", World),
    ("frame", Frame),
    ("framebuffer", FrameBuffer),
    ("renderer_pathtracer", PathTracer),
    ("renderer_scivis", SciVis),
    ("camera_perspective", PerspectiveCamera),
    ("camera_orthographic", OrthographicCamera),
    ("camera_panoramic", PanoramicCamera),
    ("structuredRegular", StructuredVolume),
    ("structuredSpherical", StructuredSpherical),
    ("transfer_function_jet", JetTransferFunction),
    ("ambient", AmbientLight),
    ("distant", DistantLight),
    ("sphere", SphereLight),
    ("spot", SpotLight),
    ("obj", OBJMaterial),
    ("principled", PrincipledMaterial),
]


def register_builtins(registry) -> None:
    """Зарегистрировать встроенные типы; уже занятые теги не трогаются."""
    for tag, ctor in BUILTIN_TYPES:
        if not registry.is_registered(tag):
            registry.register_type(tag, ctor)


__all__ = [
    "ObjectNode", "Transform", "World", "FrameBuffer",
    "Renderer", "PathTracer", "SciVis",
    "Camera", "PerspectiveCamera", "OrthographicCamera", "PanoramicCamera",
    "Volume", "StructuredVolume", "StructuredSpherical", "VoxelType",
    "TransferFunction", "JetTransferFunction",
    "Light", "AmbientLight", "DistantLight", "SphereLight", "SpotLight",
    "Material", "OBJMaterial", "PrincipledMaterial",
    "Frame", "BUILTIN_TYPES", "register_builtins",
]
