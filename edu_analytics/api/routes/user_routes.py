# user_routes.py
from typing import Optional

from fastapi import APIRouter, Depends, Query

from edu_analytics.api.deps import get_repository
from edu_analytics.repositories.json_repository import JsonRepository
from edu_analytics.services import stats
from edu_analytics.services.progress_service import ProgressService
from edu_analytics.utils.params import parse_min

router = APIRouter(prefix="/usuarios", tags=["Usuarios"])


@router.get("/com-progresso-acima")
def users_with_progress_above(minimo: Optional[str] = Query(None, alias="min"),
                              repo: JsonRepository = Depends(get_repository)):
    return stats.users_with_progress_above(repo.load(), parse_min(minimo, 90))


@router.get("/agrupados-por-tipo")
def users_by_type(repo: JsonRepository = Depends(get_repository)):
    return stats.users_by_type(repo.load())


@router.get("/com-multiplos-certificados")
def users_with_multiple_certificates(repo: JsonRepository = Depends(get_repository)):
    return stats.users_with_multiple_certificates(repo.load())


@router.get("/{user_id}/cursos")
def courses_of_user(user_id: str, repo: JsonRepository = Depends(get_repository)):
    return stats.courses_of_user(repo.load(), user_id)


@router.get("/{user_id}/comentarios")
def comments_of_user(user_id: str, repo: JsonRepository = Depends(get_repository)):
    return stats.comments_of_user(repo.load(), user_id)


@router.get("/{user_id}/status-cursos")
def course_status(user_id: str, repo: JsonRepository = Depends(get_repository)):
    return stats.course_status(repo.load(), user_id)


@router.patch("/{user_id}/progresso/{course_id}")
def increment_progress(user_id: str, course_id: str, repo: JsonRepository = Depends(get_repository)):
    novo = ProgressService(repo).increment(user_id, course_id)
    return {"message": "Progresso atualizado", "progresso": novo}
