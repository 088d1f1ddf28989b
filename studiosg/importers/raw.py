"""
Импорт «сырого» объёма: плотный массив вокселей без заголовка.

Параметры сетки (тип вокселя, размеры, origin, spacing) берутся из
`params` – в файле их нет. Расширение `.spherical` даёт сферическую
сетку, остальное – регулярную.
"""

from pathlib import Path

from studiosg.math import Vec3f, Vec3i
from studiosg.sg.nodes.volume import VoxelType
from studiosg.sg.registry import create_node
from studiosg.importers.base import Importer, register_importer
from studiosg.utils.logger import logger

DEFAULT_PARAMS = {
    "voxel_type": "float",
    "dimensions": [1, 1, 1],
    "grid_origin": [0.0, 0.0, 0.0],
    "grid_spacing": [1.0, 1.0, 1.0],
}


@register_importer
class RawImporter(Importer):
    extensions = (".raw", ".spherical")

    def import_scene(self, path):
        path = Path(path)
        p = {**DEFAULT_PARAMS, **self.params}
        stem = path.stem

        root = create_node("transform", f"{stem}_rootXfm")
        tag = "structuredSpherical" if path.suffix.lower() == ".spherical" else "structuredRegular"
        volume = create_node(tag, f"{stem}_volume")
        volume.create_child("voxelType", "int", int(VoxelType.from_name(p["voxel_type"])))
        volume.create_child("gridOrigin", "vec3f", Vec3f(p["grid_origin"]))
        volume.create_child("gridSpacing", "vec3f", Vec3f(p["grid_spacing"]))
        volume.create_child("dimensions", "vec3i", Vec3i(p["dimensions"]))
        volume.load(path)

        volume.create_child("transferFunction", "transfer_function_jet")
        root.add(volume)
        logger.info(f"[Importer] ...finished import of {path.name}")
        return root
