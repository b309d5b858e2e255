"""Fixtures compartilhadas para os testes."""

import sys
from pathlib import Path

import pytest


RAIZ = Path(__file__).resolve().parents[2]
DIRETORIO_APP = RAIZ / "app"
if str(DIRETORIO_APP) not in sys.path:
    sys.path.insert(0, str(DIRETORIO_APP))


@pytest.fixture()
def disciplina_formulario_exemplo():
    """Retorna uma disciplina completa como digitada no formulário."""
    return {
        "name": " Cálculo I ",
        "workload": "40",
        "absences": "2",
        "av1": "8",
        "av2": "6",
        "av3": "9",
        "edag": "7",
    }


@pytest.fixture()
def semestre_formulario_exemplo(disciplina_formulario_exemplo):
    """Retorna um semestre com uma disciplina aprovada e outra em andamento."""
    return {
        "year": 2024,
        "term": 1,
        "disciplines": [
            disciplina_formulario_exemplo,
            {
                "name": "Física I",
                "workload": "60",
                "absences": "0",
                "av1": "4",
                "av2": "",
                "av3": "",
                "edag": "",
            },
        ],
    }


@pytest.fixture()
def semestres_salvos():
    """Retorna semestres como devolvidos por GET /grades."""
    return [
        {
            "_id": "s1",
            "year": 2023,
            "term": 2,
            "average": 7.6,
            "approved": True,
            "disciplines": [
                {
                    "name": "Cálculo I",
                    "workload": 40,
                    "absences": 2,
                    "av1": 8,
                    "av2": 6.5,
                    "av3": 9.0,
                    "edag": 0,
                }
            ],
        },
        {
            "_id": "s2",
            "year": 2024,
            "term": 1,
            "average": 5.0,
            "approved": False,
            "disciplines": [
                {"name": "Física I", "workload": 60, "absences": None, "av1": None},
                {"name": "Química", "workload": 0, "absences": 0},
            ],
        },
        {"_id": "s3", "year": 2024, "term": 2, "approved": None, "disciplines": []},
    ]
