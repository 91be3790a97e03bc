# certificate_routes.py
from fastapi import APIRouter, Depends

from edu_analytics.api.deps import get_repository
from edu_analytics.repositories.json_repository import JsonRepository
from edu_analytics.services import stats
from edu_analytics.services.certificate_service import CertificateService

router = APIRouter(prefix="/certificados", tags=["Certificados"])


@router.get("/por-curso")
def certificates_per_course(repo: JsonRepository = Depends(get_repository)):
    return stats.certificates_per_course(repo.load())


@router.post("", status_code=201)
def issue_certificates(repo: JsonRepository = Depends(get_repository)):
    """Emisión en lote: no se dispara sola al actualizar progreso."""
    creados = CertificateService(repo).issue()
    return {"message": f"Certificados criados: {creados}", "criados": creados}
