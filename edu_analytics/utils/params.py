# edu_analytics/utils/params.py
import math
from typing import Optional


def parse_min(raw: Optional[str], default: float) -> float:
    """
    Parsea el query param `min`. Si falta o no es numérico se usa el default
    de cada consulta (3 para comentarios, 90 para progreso).
    """
    if raw is None:
        return default
    try:
        value = float(str(raw).strip())
    except ValueError:
        return default
    if math.isnan(value):
        return default
    return value
