# edu_analytics/services/stats.py
"""
Consultas de solo lectura sobre un snapshot completo de la base.

Todas son funciones puras: reciben el snapshot ya cargado y nunca lo modifican.
Los errores (usuario/curso inexistente, agregados vacíos) se levantan como
DomainError y la capa HTTP los traduce.
"""
from collections import Counter
from typing import Any, Dict, List, Optional

from edu_analytics.repositories.json_repository import Snapshot
from edu_analytics.utils.errors import EmptyResultError, NotFoundError

TIPO_INSTRUTOR = "instrutor"

STATUS_COMPLETO = "completo"
STATUS_EM_ANDAMENTO = "em andamento"
STATUS_NAO_INICIADO = "não iniciado"


# -------------------- helpers internos --------------------
def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _mean(values: List[float]) -> float:
    return sum(values) / len(values)


def _progresso(usuario: Dict[str, Any]) -> Dict[str, Any]:
    return usuario.get("progressoCursos") or {}


def find_user(snapshot: Snapshot, user_id: str) -> Optional[Dict[str, Any]]:
    return next((u for u in snapshot["usuarios"] if u.get("id") == user_id), None)


def find_course(snapshot: Snapshot, course_id: str) -> Optional[Dict[str, Any]]:
    return next((c for c in snapshot["cursos"] if c.get("id") == course_id), None)


def require_user(snapshot: Snapshot, user_id: str) -> Dict[str, Any]:
    usuario = find_user(snapshot, user_id)
    if usuario is None:
        raise NotFoundError("Usuário não encontrado")
    return usuario


def require_course(snapshot: Snapshot, course_id: str) -> Dict[str, Any]:
    curso = find_course(snapshot, course_id)
    if curso is None:
        raise NotFoundError("Curso não encontrado")
    return curso


def _course_ratings(snapshot: Snapshot, course_id: str) -> List[float]:
    return [
        c["nota"]
        for c in snapshot["comentarios"]
        if c.get("cursoId") == course_id and is_number(c.get("nota"))
    ]


# -------------------- usuarios --------------------
def instructors(snapshot: Snapshot) -> List[Dict[str, Any]]:
    return [u for u in snapshot["usuarios"] if u.get("tipo") == TIPO_INSTRUTOR]


def courses_of_user(snapshot: Snapshot, user_id: str) -> List[Dict[str, Any]]:
    usuario = require_user(snapshot, user_id)
    matriculados = set(usuario.get("cursosMatriculados") or [])
    return [c for c in snapshot["cursos"] if c.get("id") in matriculados]


def users_with_progress_above(snapshot: Snapshot, minimum: float = 90) -> List[Dict[str, Any]]:
    """Usuarios con al menos un curso cuyo progreso supera estrictamente `minimum`."""
    return [
        u for u in snapshot["usuarios"]
        if any(is_number(p) and p > minimum for p in _progresso(u).values())
    ]


def comments_of_user(snapshot: Snapshot, user_id: str) -> List[Dict[str, Any]]:
    return [c for c in snapshot["comentarios"] if c.get("usuarioId") == user_id]


def users_by_type(snapshot: Snapshot) -> Dict[str, int]:
    return dict(Counter(u.get("tipo") for u in snapshot["usuarios"]))


def users_with_multiple_certificates(snapshot: Snapshot) -> List[Dict[str, Any]]:
    por_usuario = Counter(c.get("usuarioId") for c in snapshot["certificados"])
    return [u for u in snapshot["usuarios"] if por_usuario.get(u.get("id"), 0) > 1]


def course_status(snapshot: Snapshot, user_id: str) -> Dict[str, str]:
    """
    Clasifica cada curso presente en progressoCursos. Los cursos sin entrada
    no se reportan (ausente no es lo mismo que 0%).
    """
    usuario = require_user(snapshot, user_id)
    status: Dict[str, str] = {}
    for curso_id, prog in _progresso(usuario).items():
        if is_number(prog) and prog >= 100:
            status[curso_id] = STATUS_COMPLETO
        elif is_number(prog) and prog > 0:
            status[curso_id] = STATUS_EM_ANDAMENTO
        else:
            status[curso_id] = STATUS_NAO_INICIADO
    return status


# -------------------- cursos --------------------
def courses_with_many_comments(snapshot: Snapshot, minimum: float = 3) -> List[Dict[str, Any]]:
    por_curso = Counter(c.get("cursoId") for c in snapshot["comentarios"])
    return [c for c in snapshot["cursos"] if por_curso.get(c.get("id"), 0) > minimum]


def average_progress(snapshot: Snapshot, course_id: str) -> float:
    progresos = [
        _progresso(u)[course_id]
        for u in snapshot["usuarios"]
        if is_number(_progresso(u).get(course_id))
    ]
    if not progresos:
        raise EmptyResultError("Nenhum progresso encontrado")
    return _mean(progresos)


def average_rating(snapshot: Snapshot, course_id: str) -> float:
    notas = _course_ratings(snapshot, course_id)
    if not notas:
        raise EmptyResultError("Nenhuma nota encontrada")
    return _mean(notas)


def total_duration(snapshot: Snapshot, course_id: str) -> float:
    curso = require_course(snapshot, course_id)
    duracoes = [aula.get("duracao") for aula in (curso.get("aulas") or []) if isinstance(aula, dict)]
    return sum(d for d in duracoes if is_number(d))


def courses_ranked_by_rating(snapshot: Snapshot) -> List[Dict[str, Any]]:
    """
    Cursos ordenados por nota media descendente. A diferencia de average_rating,
    un curso sin notas vale 0 en vez de fallar. sorted() es estable: los empates
    conservan el orden original.
    """
    con_media = []
    for curso in snapshot["cursos"]:
        notas = _course_ratings(snapshot, curso.get("id"))
        media = _mean(notas) if notas else 0
        con_media.append({**curso, "mediaNota": media})
    return sorted(con_media, key=lambda c: c["mediaNota"], reverse=True)


def students_with_high_progress(snapshot: Snapshot, course_id: str, minimum: float = 90) -> List[Dict[str, Any]]:
    return [
        u for u in snapshot["usuarios"]
        if is_number(_progresso(u).get(course_id)) and _progresso(u)[course_id] > minimum
    ]


# -------------------- instructores / certificados --------------------
def course_count_for_instructor(snapshot: Snapshot, instructor_id: str) -> int:
    # no se valida que el instructor exista
    return sum(1 for c in snapshot["cursos"] if c.get("instrutorId") == instructor_id)


def certificates_per_course(snapshot: Snapshot) -> Dict[str, int]:
    return dict(Counter(c.get("cursoId") for c in snapshot["certificados"]))
