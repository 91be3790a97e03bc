import copy

import pytest

from edu_analytics.repositories.json_repository import JsonRepository

SEED = {
    "usuarios": [
        {"id": "u1", "nome": "Ana", "tipo": "instrutor"},
        {
            "id": "u2", "nome": "Bruno", "tipo": "aluno",
            "cursosMatriculados": ["c1", "c2"],
            "progressoCursos": {"c1": 85, "c2": 0},
        },
        {
            "id": "u3", "nome": "Carla", "tipo": "aluno",
            "cursosMatriculados": ["c1", "c3"],
            "progressoCursos": {"c1": 95, "c3": 100},
        },
        {"id": "u4", "nome": "Diego", "tipo": "instrutor"},
    ],
    "cursos": [
        {"id": "c1", "nome": "Python", "instrutorId": "u1",
         "aulas": [{"duracao": 10}, {"duracao": 20}, {"duracao": None}]},
        {"id": "c2", "nome": "SQL", "instrutorId": "u1", "aulas": []},
        {"id": "c3", "nome": "Docker", "instrutorId": "u4", "aulas": [{"duracao": 45}]},
    ],
    "comentarios": [
        {"id": "k1", "cursoId": "c1", "usuarioId": "u2", "texto": "Ótimo", "nota": 5},
        {"id": "k2", "cursoId": "c1", "usuarioId": "u3", "texto": "Bom", "nota": 4},
        {"id": "k3", "cursoId": "c3", "usuarioId": "u2", "texto": "Ok", "nota": None},
        {"id": "k4", "cursoId": "c1", "usuarioId": "u3", "texto": "Regular", "nota": 3},
    ],
    "certificados": [
        {"id": "z1", "usuarioId": "u3", "cursoId": "c3", "dataEmissao": "2024-05-01T10:00:00.000Z"},
    ],
}


@pytest.fixture
def snapshot():
    return copy.deepcopy(SEED)


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "base_dados.json")


@pytest.fixture
def repo(db_path, snapshot):
    r = JsonRepository(db_path)
    r.save(snapshot)
    return r


@pytest.fixture
def client(repo):
    from fastapi.testclient import TestClient

    from edu_analytics.api.deps import get_repository
    from main import app

    app.dependency_overrides[get_repository] = lambda: repo
    yield TestClient(app)
    app.dependency_overrides.clear()
