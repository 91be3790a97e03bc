# edu_analytics/services/certificate_service.py
import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from edu_analytics.repositories.json_repository import JsonRepository, Snapshot
from edu_analytics.services.stats import is_number

CERTIFICATE_THRESHOLD = 90


def _now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def issue_certificates(snapshot: Snapshot, issued_at: Optional[str] = None) -> int:
    """
    Recorre todos los usuarios y emite un certificado por cada curso con
    progreso >= CERTIFICATE_THRESHOLD que todavía no tenga uno para ese par
    (usuarioId, cursoId). Devuelve cuántos certificados nuevos se crearon.
    """
    issued_at = issued_at or _now()
    emitidos = {(c.get("usuarioId"), c.get("cursoId")) for c in snapshot["certificados"]}
    creados = 0

    for usuario in snapshot["usuarios"]:
        progreso = usuario.get("progressoCursos") or {}
        for curso_id, prog in progreso.items():
            if not (is_number(prog) and prog >= CERTIFICATE_THRESHOLD):
                continue
            par = (usuario.get("id"), curso_id)
            if par in emitidos:
                continue
            snapshot["certificados"].append({
                "id": str(uuid.uuid4()),
                "usuarioId": usuario.get("id"),
                "cursoId": curso_id,
                "dataEmissao": issued_at,
            })
            emitidos.add(par)
            creados += 1

    return creados


class CertificateService:
    def __init__(self, repo: JsonRepository) -> None:
        self.repo = repo

    def issue(self) -> int:
        snapshot = self.repo.load()
        creados = issue_certificates(snapshot)
        self.repo.save(snapshot)
        logging.info(f"[certificates.issue] certificados creados: {creados}")
        return creados
