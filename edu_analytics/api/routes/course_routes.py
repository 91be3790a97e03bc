# course_routes.py
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query

from edu_analytics.api.deps import get_repository
from edu_analytics.repositories.json_repository import JsonRepository
from edu_analytics.services import stats
from edu_analytics.services.comment_service import CommentService
from edu_analytics.services.course_service import CourseService
from edu_analytics.utils.params import parse_min

router = APIRouter(prefix="/cursos", tags=["Cursos"])


# ===============================================
# 📊 Consultas
# ===============================================

@router.get("/com-muitos-comentarios")
def courses_with_many_comments(minimo: Optional[str] = Query(None, alias="min"),
                               repo: JsonRepository = Depends(get_repository)):
    return stats.courses_with_many_comments(repo.load(), parse_min(minimo, 3))


@router.get("/ordenados-por-nota")
def courses_ranked_by_rating(repo: JsonRepository = Depends(get_repository)):
    return stats.courses_ranked_by_rating(repo.load())


@router.get("/{course_id}/media-progresso")
def average_progress(course_id: str, repo: JsonRepository = Depends(get_repository)):
    return {"cursoId": course_id, "mediaProgresso": stats.average_progress(repo.load(), course_id)}


@router.get("/{course_id}/media-nota")
def average_rating(course_id: str, repo: JsonRepository = Depends(get_repository)):
    return {"cursoId": course_id, "mediaNota": stats.average_rating(repo.load(), course_id)}


@router.get("/{course_id}/duracao-total")
def total_duration(course_id: str, repo: JsonRepository = Depends(get_repository)):
    return {"cursoId": course_id, "duracaoTotal": stats.total_duration(repo.load(), course_id)}


@router.get("/{course_id}/alunos-progresso-alto")
def students_with_high_progress(course_id: str,
                                minimo: Optional[str] = Query(None, alias="min"),
                                repo: JsonRepository = Depends(get_repository)):
    return stats.students_with_high_progress(repo.load(), course_id, parse_min(minimo, 90))


# ===============================================
# ✏️ Mutaciones
# ===============================================

@router.post("", status_code=201)
def create_course(body: Any = Body(None), repo: JsonRepository = Depends(get_repository)):
    curso = CourseService(repo).create(body)
    return {"message": "Curso criado", "curso": curso}


@router.post("/{course_id}/comentarios", status_code=201)
def add_comment(course_id: str, body: Any = Body(None), repo: JsonRepository = Depends(get_repository)):
    comentario = CommentService(repo).add(course_id, body)
    return {"message": "Comentário adicionado", "comentario": comentario}


@router.delete("/sem-comentarios")
def delete_courses_without_comments(repo: JsonRepository = Depends(get_repository)):
    removidos = CourseService(repo).delete_without_comments()
    return {"message": f"Cursos removidos: {removidos}", "removidos": removidos}
