# main.py (raíz)
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from edu_analytics.config.settings import get_cors_origins, get_host, get_log_level, get_port
from edu_analytics.config.database import inicializar_base
from edu_analytics.api.errors import register_error_handlers
from edu_analytics.api.routes.user_routes import router as user_router
from edu_analytics.api.routes.course_routes import router as course_router
from edu_analytics.api.routes.instructor_routes import router as instructor_router
from edu_analytics.api.routes.certificate_routes import router as certificate_router

logging.basicConfig(level=get_log_level(), format="%(asctime)s [%(levelname)s] %(message)s")

try:
    inicializar_base()
except Exception as e:
    print(f"⚠️ Error inicializando la base: {e}")

app = FastAPI(title="EduAnalytics API", version="1.0.0",
              description="Cursos, progreso, comentarios y certificados sobre un archivo JSON.")

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH"],
    allow_headers=["*"],
    allow_credentials=True,
)

register_error_handlers(app)


@app.get("/", tags=["Health"])
async def root():
    return {"message": "✅ Servidor rodando corretamente!"}

app.include_router(user_router)
app.include_router(course_router)
app.include_router(instructor_router)
app.include_router(certificate_router)


if __name__ == "__main__":
    uvicorn.run(app, host=get_host(), port=get_port())
