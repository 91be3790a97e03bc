# edu_analytics/models/comment_model.py
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt


class ComentarioIn(BaseModel):
    usuarioId: str = Field(..., min_length=1)
    texto: str = Field(..., min_length=1)
    # sin nota -> se persiste null explícito
    nota: Optional[Union[StrictInt, StrictFloat]] = None

    model_config = ConfigDict(extra="ignore")
