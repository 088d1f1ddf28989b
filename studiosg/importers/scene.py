"""
Декларативное описание сцены в JSON:

    {"name": "world", "type": "world", "children": [
        {"name": "light", "type": "ambient", "children": [
            {"name": "intensity", "type": "float", "value": 0.5}]},
        {"name": "copy", "type": "transform", "children": [
            {"ref": "model"}]}
    ]}

Узлы создаются через реестр по тегу. `{"ref": "<name>"}` прикрепляет
уже описанный выше узел с таким именем (общий под‑граф, а не копия).
"""

import json
from pathlib import Path

from studiosg.errors import ImportFailed
from studiosg.sg.registry import create_node
from studiosg.sg.value import UNSET
from studiosg.importers.base import Importer, register_importer


@register_importer
class SceneImporter(Importer):
    extensions = (".sg", ".json")

    def __init__(self, params: dict = None):
        super().__init__(params)
        self._named = {}

    def import_scene(self, path):
        with Path(path).open("r", encoding="utf-8") as f:
            desc = json.load(f)
        self._named = {}
        return self.build(desc)

    def build(self, desc: dict):
        if not isinstance(desc, dict):
            raise ImportFailed(f"Node description must be an object, got {desc!r}")
        if "ref" in desc:
            try:
                return self._named[desc["ref"]]
            except KeyError:
                raise ImportFailed(f"Reference to undeclared node '{desc['ref']}'") from None
        try:
            name, tag = desc["name"], desc.get("type", "node")
        except KeyError:
            raise ImportFailed(f"Node description without a name: {desc!r}") from None

        node = create_node(tag, name, desc.get("value", UNSET))
        self._populate(node, desc)
        self._named[name] = node
        return node

    def _populate(self, node, desc: dict) -> None:
        for child_desc in desc.get("children", []):
            name = child_desc.get("name") if isinstance(child_desc, dict) else None
            if name is not None and node.has_child(name):
                # параметр, который узел уже создал сам
                child = node.create_child(name, child_desc.get("type", "node"),
                                          child_desc.get("value", UNSET))
                self._populate(child, child_desc)
                continue
            node.add(self.build(child_desc))
