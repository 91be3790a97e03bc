# edu_analytics/services/comment_service.py
import logging
import uuid
from typing import Any, Dict

from pydantic import ValidationError

from edu_analytics.models.comment_model import ComentarioIn
from edu_analytics.repositories.json_repository import JsonRepository, Snapshot
from edu_analytics.services.stats import require_course, require_user
from edu_analytics.utils.errors import InvalidPayloadError


def add_comment(snapshot: Snapshot, course_id: str, payload: Any) -> Dict[str, Any]:
    try:
        data = ComentarioIn.model_validate(payload)
    except ValidationError as e:
        logging.debug(f"[comments.add] payload inválido: {e}")
        raise InvalidPayloadError("usuarioId e texto são obrigatórios")

    require_course(snapshot, course_id)
    require_user(snapshot, data.usuarioId)

    comentario = {
        "id": str(uuid.uuid4()),
        "cursoId": course_id,
        "usuarioId": data.usuarioId,
        "texto": data.texto,
        "nota": data.nota,
    }
    snapshot["comentarios"].append(comentario)
    return comentario


class CommentService:
    def __init__(self, repo: JsonRepository) -> None:
        self.repo = repo

    def add(self, course_id: str, payload: Any) -> Dict[str, Any]:
        snapshot = self.repo.load()
        comentario = add_comment(snapshot, course_id, payload)
        self.repo.save(snapshot)
        logging.info(f"[comments.add] comentario={comentario['id']} curso={course_id}")
        return comentario
