# edu_analytics/models/course_model.py
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class CursoIn(BaseModel):
    nome: str = Field(..., min_length=1)
    instrutorId: str = Field(..., min_length=1)
    # cada aula es un objeto libre; sólo `duracao` se usa en los agregados
    aulas: List[Dict[str, Any]]

    model_config = ConfigDict(extra="ignore")
