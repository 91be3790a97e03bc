# edu_analytics/config/settings.py
import os
from typing import List

from dotenv import load_dotenv

load_dotenv()

DEFAULT_DB_FILE = "./base_dados.json"


def get_db_path() -> str:
    """Ruta del archivo JSON con los cuatro arrays (usuarios, cursos, comentarios, certificados)."""
    return os.getenv("EDU_DB_FILE", DEFAULT_DB_FILE)


def get_host() -> str:
    return os.getenv("EDU_HOST", "0.0.0.0")


def get_port() -> int:
    return int(os.getenv("EDU_PORT", 3333))


def get_cors_origins() -> List[str]:
    raw = os.getenv("EDU_CORS_ORIGINS", "*")
    return [o.strip() for o in raw.split(",") if o.strip()]


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
