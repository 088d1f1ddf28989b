"""
Простейший менеджер плагинов.
Плагины – обычные модули этого пакета с функцией `register(registry)`,
которая регистрирует дополнительные типы узлов.
"""

import importlib
import pkgutil
from pathlib import Path

from studiosg.utils.logger import logger


class PluginManager:
    """Сканирует папку `plugins/` и даёт каждому модулю зарегистрировать типы."""
    def __init__(self, plugins_dir: Path = None, package: str = "studiosg.plugins"):
        if plugins_dir is None:
            plugins_dir = Path(__file__).parent
        self.dir = plugins_dir
        self.package = package
        self.loaded = []

    def discover(self, registry):
        """Импортировать все модули и вызвать `register`."""
        for modinfo in pkgutil.iter_modules([str(self.dir)]):
            if modinfo.name == "plugin_manager":
                continue
            module = importlib.import_module(f"{self.package}.{modinfo.name}")
            if hasattr(module, "register"):
                module.register(registry)
                self.loaded.append(modinfo.name)
                logger.info(f"[Plugins] Loaded plugin '{modinfo.name}'")
        return self.loaded
