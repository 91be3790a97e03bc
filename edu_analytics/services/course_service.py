# edu_analytics/services/course_service.py
import logging
import uuid
from typing import Any, Dict

from pydantic import ValidationError

from edu_analytics.models.course_model import CursoIn
from edu_analytics.repositories.json_repository import JsonRepository, Snapshot
from edu_analytics.services.stats import TIPO_INSTRUTOR
from edu_analytics.utils.errors import InvalidInstructorError, InvalidPayloadError


def create_course(snapshot: Snapshot, payload: Any) -> Dict[str, Any]:
    # 1) Validamos la entrada
    try:
        data = CursoIn.model_validate(payload)
    except ValidationError as e:
        logging.debug(f"[courses.create] payload inválido: {e}")
        raise InvalidPayloadError("Nome, instrutorId e aulas são obrigatórios")

    # 2) El instructor tiene que existir y ser de tipo instrutor (sólo al crear)
    instrutor = next(
        (u for u in snapshot["usuarios"]
         if u.get("id") == data.instrutorId and u.get("tipo") == TIPO_INSTRUTOR),
        None,
    )
    if instrutor is None:
        raise InvalidInstructorError("Instrutor não encontrado")

    # 3) Alta en memoria; el servicio se encarga de persistir
    curso = {
        "id": str(uuid.uuid4()),
        "nome": data.nome,
        "instrutorId": data.instrutorId,
        "aulas": data.aulas,
    }
    snapshot["cursos"].append(curso)
    return curso


def delete_courses_without_comments(snapshot: Snapshot) -> int:
    """
    Elimina los cursos que no aparecen en ningún comentario.
    No limpia referencias en usuarios ni certificados: quedan huérfanas.
    """
    comentados = {c.get("cursoId") for c in snapshot["comentarios"]}
    antes = len(snapshot["cursos"])
    snapshot["cursos"] = [c for c in snapshot["cursos"] if c.get("id") in comentados]
    return antes - len(snapshot["cursos"])


class CourseService:
    def __init__(self, repo: JsonRepository) -> None:
        self.repo = repo

    def create(self, payload: Any) -> Dict[str, Any]:
        snapshot = self.repo.load()
        curso = create_course(snapshot, payload)
        self.repo.save(snapshot)
        logging.info(f"[courses.create] curso={curso['id']} instrutor={curso['instrutorId']}")
        return curso

    def delete_without_comments(self) -> int:
        snapshot = self.repo.load()
        removidos = delete_courses_without_comments(snapshot)
        self.repo.save(snapshot)
        logging.info(f"[courses.delete] cursos sin comentarios eliminados: {removidos}")
        return removidos
