"""
Импортёры файлов сцены.
"""

from studiosg.importers.base import Importer, get_importer, import_files, register_importer
from studiosg.importers.raw import RawImporter
from studiosg.importers.scene import SceneImporter

__all__ = ["Importer", "get_importer", "import_files", "register_importer",
           "RawImporter", "SceneImporter"]
