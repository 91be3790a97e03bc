from typing import Optional

from edu_analytics.config.settings import get_db_path
from edu_analytics.repositories.json_repository import COLECCIONES, JsonRepository

# ==================================
# 📄 Archivo de datos
# ==================================
def probar_archivo(path: Optional[str] = None) -> Optional[JsonRepository]:
    """Carga el archivo una vez y muestra cuántos registros hay por colección."""
    path = path or get_db_path()
    try:
        repo = JsonRepository(path)
        if not repo.exists():
            print(f"🟡 {path} no existe: se usará una base vacía hasta la primera escritura.")
            return repo
        snapshot = repo.load()
        resumen = ", ".join(f"{c}={len(snapshot[c])}" for c in COLECCIONES)
        print(f"🟢 Base cargada desde {path} ({resumen})")
        return repo
    except Exception as e:
        print(f"❌ Error al probar el archivo de datos: {e}")
        return None


def inicializar_base():
    """Prueba de arranque: nunca corta el inicio del servidor."""
    print("\n--- Probando archivo de datos ---")
    probar_archivo()
    print("---------------------------------\n")


if __name__ == "__main__":
    inicializar_base()
