# edu_analytics/services/progress_service.py
import logging
from typing import Union

from edu_analytics.repositories.json_repository import JsonRepository, Snapshot
from edu_analytics.services.stats import is_number, require_user

PROGRESS_STEP = 10
PROGRESS_MAX = 100

Number = Union[int, float]


def increment_progress(snapshot: Snapshot, user_id: str, course_id: str) -> Number:
    """
    Suma PROGRESS_STEP al progreso del usuario en el curso, con tope PROGRESS_MAX.
    No es idempotente: cada llamada avanza hasta llegar a 100.
    """
    usuario = require_user(snapshot, user_id)
    if usuario.get("progressoCursos") is None:
        usuario["progressoCursos"] = {}

    progreso = usuario["progressoCursos"]
    atual = progreso.get(course_id)
    if not is_number(atual):
        atual = 0
    novo = min(atual + PROGRESS_STEP, PROGRESS_MAX)
    progreso[course_id] = novo
    return novo


class ProgressService:
    def __init__(self, repo: JsonRepository) -> None:
        self.repo = repo

    def increment(self, user_id: str, course_id: str) -> Number:
        snapshot = self.repo.load()
        novo = increment_progress(snapshot, user_id, course_id)
        self.repo.save(snapshot)
        logging.info(f"[progress.increment] usuario={user_id} curso={course_id} progreso={novo}")
        return novo
