# instructor_routes.py
from fastapi import APIRouter, Depends

from edu_analytics.api.deps import get_repository
from edu_analytics.repositories.json_repository import JsonRepository
from edu_analytics.services import stats

router = APIRouter(prefix="/instrutores", tags=["Instrutores"])


@router.get("")
def list_instructors(repo: JsonRepository = Depends(get_repository)):
    return stats.instructors(repo.load())


@router.get("/{instructor_id}/quantidade-cursos")
def course_count(instructor_id: str, repo: JsonRepository = Depends(get_repository)):
    return {
        "instrutorId": instructor_id,
        "quantidadeCursos": stats.course_count_for_instructor(repo.load(), instructor_id),
    }
