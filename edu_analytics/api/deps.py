# edu_analytics/api/deps.py
from edu_analytics.config.settings import get_db_path
from edu_analytics.repositories.json_repository import JsonRepository


def get_repository() -> JsonRepository:
    # sin caché entre requests: cada operación relee el archivo
    return JsonRepository(get_db_path())
