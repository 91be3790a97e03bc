# edu_analytics/repositories/json_repository.py
import json
import logging
import os
from typing import Any, Dict, List

Snapshot = Dict[str, List[Dict[str, Any]]]

COLECCIONES = ("usuarios", "cursos", "comentarios", "certificados")


def snapshot_vacio() -> Snapshot:
    return {c: [] for c in COLECCIONES}


class JsonRepository:
    """
    Guarda el dataset completo en un único archivo JSON.
    - load(): lee todo el archivo en cada operación (no hay caché entre requests)
    - save(): reescribe todo el archivo; el último que escribe gana
    """

    def __init__(self, path: str):
        self.path = path

    def exists(self) -> bool:
        return os.path.isfile(self.path)

    def load(self) -> Snapshot:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logging.warning(f"[store.load] {self.path} no existe, base vacía")
            return snapshot_vacio()
        except (OSError, ValueError) as e:
            logging.warning(f"[store.load] No se pudo leer {self.path}, base vacía: {e}")
            return snapshot_vacio()

        if not isinstance(data, dict):
            logging.warning(f"[store.load] {self.path} no contiene un objeto, base vacía")
            return snapshot_vacio()

        # completar colecciones faltantes sin tocar el resto de las claves
        for c in COLECCIONES:
            if not isinstance(data.get(c), list):
                data[c] = []
        return data

    def save(self, snapshot: Snapshot) -> None:
        # sin escritura atómica ni locks: los errores de disco se propagan
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(snapshot, f, indent=2, ensure_ascii=False)
