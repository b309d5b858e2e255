"""Ponto de entrada da API FastAPI.

Responsabilidades:
- Configurar a aplicação FastAPI
- Registrar rotas e eventos
"""

import os

import uvicorn
from fastapi import FastAPI

from src.api.auth_controller import ControladorAutenticacao
from src.api.evaluation_controller import ControladorAvaliacao
from src.api.semester_controller import ControladorSemestres
from src.config.settings import Configuracoes
from src.util.logger import logger

app = FastAPI(
    title="AprovaTec",
    description="API de acompanhamento de notas, faltas e aprovação por semestre",
    version="1.0.0",
)


@app.on_event("startup")
async def evento_inicializacao():
    """Executa ações de inicialização da aplicação.

    Retorno:
    - None: não retorna valor
    """
    logger.info(f"Inicializando API AprovaTec (backend: {Configuracoes.API_URL})...")


controlador_avaliacao = ControladorAvaliacao()
app.include_router(controlador_avaliacao.roteador, prefix="/api/v1", tags=["Avaliação"])

controlador_semestres = ControladorSemestres()
app.include_router(controlador_semestres.roteador, prefix="/api/v1", tags=["Semestres"])

controlador_autenticacao = ControladorAutenticacao()
app.include_router(controlador_autenticacao.roteador, prefix="/api/v1", tags=["Autenticação"])


@app.get("/health", tags=["Infraestrutura"])
def checar_saude():
    """Endpoint de health check.

    Retorno:
    - dict: status da aplicação
    """
    return {"status": "ok"}


if __name__ == "__main__":
    porta = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=porta)
