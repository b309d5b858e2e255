"""Controlador de semestres da API.

Responsabilidades:
- Definir rotas de listagem, cadastro, edição e remoção de semestres
- Criar a sessão a partir do cabeçalho Authorization
- Traduzir erros do backend e de validação em respostas HTTP
"""

from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException

from src.application.semester_service import ErroValidacaoSemestre, ServicoSemestres
from src.domain.discipline import EntradaSemestre
from src.domain.session import Sessao
from src.infrastructure.http.api_client import ClienteApi, ErroApi
from src.util.logger import logger


def obter_servico_semestres(authorization: Optional[str] = Header(None)):
    """Dependência para obter o serviço de semestres autenticado.

    Parâmetros:
    - authorization (str | None): cabeçalho ``Authorization: Bearer <token>``

    Retorno:
    - ServicoSemestres: serviço com cliente do backend

    Exceções:
    - HTTPException: 401 quando não há token Bearer
    """
    sessao = Sessao.de_cabecalho(authorization)
    if not sessao.autenticada:
        raise HTTPException(status_code=401, detail="Token de acesso ausente.")
    return ServicoSemestres(cliente=ClienteApi(sessao))


def traduzir_erro_api(erro: ErroApi) -> HTTPException:
    """Converte falha do backend em resposta HTTP.

    Erros 4xx são repassados; falhas 5xx e de transporte viram 502.
    """
    if erro.status_code is not None and 400 <= erro.status_code < 500:
        return HTTPException(status_code=erro.status_code, detail=str(erro))
    logger.error(f"Backend indisponível: {erro}")
    return HTTPException(status_code=502, detail=str(erro))


class ControladorSemestres:
    """Controlador de semestres.

    Responsabilidades:
    - Registrar rotas de CRUD de semestres
    - Expor resumo para o dashboard e recarga de formulário
    """

    def __init__(self):
        """Inicializa o controlador.

        Responsabilidades:
        - Instanciar o roteador
        - Registrar as rotas disponíveis
        """
        self.roteador = APIRouter()
        self._registrar_rotas()

    def _registrar_rotas(self):
        """Registra as rotas de semestres."""
        self.roteador.add_api_route(
            path="/semesters",
            endpoint=self._listar,
            methods=["GET"],
            response_model=list,
        )
        self.roteador.add_api_route(
            path="/semesters/summary",
            endpoint=self._resumir,
            methods=["GET"],
            response_model=dict,
            summary="Totais do histórico para o dashboard",
        )
        self.roteador.add_api_route(
            path="/semesters/{id_semestre}/form",
            endpoint=self._carregar_formulario,
            methods=["GET"],
            response_model=dict,
            summary="Semestre salvo convertido em formulário editável",
        )
        self.roteador.add_api_route(
            path="/semesters",
            endpoint=self._criar,
            methods=["POST"],
            response_model=dict,
            status_code=201,
        )
        self.roteador.add_api_route(
            path="/semesters/{id_semestre}",
            endpoint=self._atualizar,
            methods=["PUT"],
            response_model=dict,
        )
        self.roteador.add_api_route(
            path="/semesters/{id_semestre}",
            endpoint=self._remover,
            methods=["DELETE"],
            response_model=dict,
        )

    @staticmethod
    def _listar(servico: ServicoSemestres = Depends(obter_servico_semestres)):
        try:
            return servico.listar()
        except ErroApi as erro:
            raise traduzir_erro_api(erro)

    @staticmethod
    def _resumir(servico: ServicoSemestres = Depends(obter_servico_semestres)):
        """Resume o histórico do usuário.

        Retorno:
        - dict: totais de semestres, disciplinas, aprovados e reprovados
        """
        try:
            return servico.resumir(servico.listar())
        except ErroApi as erro:
            raise traduzir_erro_api(erro)

    @staticmethod
    def _carregar_formulario(
        id_semestre: str, servico: ServicoSemestres = Depends(obter_servico_semestres)
    ):
        """Recarrega um semestre salvo para edição.

        Exceções:
        - HTTPException: 404 quando o semestre não existe
        """
        try:
            return servico.carregar_formulario(id_semestre)
        except LookupError as erro:
            raise HTTPException(status_code=404, detail=str(erro))
        except ValueError as erro:
            raise HTTPException(status_code=400, detail=str(erro))
        except ErroApi as erro:
            raise traduzir_erro_api(erro)

    @staticmethod
    def _criar(
        entrada: EntradaSemestre, servico: ServicoSemestres = Depends(obter_servico_semestres)
    ):
        """Valida e cria um semestre.

        Parâmetros:
        - entrada (EntradaSemestre): semestre digitado
        - servico (ServicoSemestres): serviço injetado

        Retorno:
        - dict: semestre salvo

        Exceções:
        - HTTPException: 400 para validação, erro do backend traduzido
        """
        try:
            return servico.salvar(entrada)
        except ErroValidacaoSemestre as erro:
            raise HTTPException(status_code=400, detail=str(erro))
        except ErroApi as erro:
            raise traduzir_erro_api(erro)

    @staticmethod
    def _atualizar(
        id_semestre: str,
        entrada: EntradaSemestre,
        servico: ServicoSemestres = Depends(obter_servico_semestres),
    ):
        try:
            return servico.salvar(entrada, id_semestre=id_semestre)
        except ErroValidacaoSemestre as erro:
            raise HTTPException(status_code=400, detail=str(erro))
        except ErroApi as erro:
            raise traduzir_erro_api(erro)

    @staticmethod
    def _remover(id_semestre: str, servico: ServicoSemestres = Depends(obter_servico_semestres)):
        try:
            return servico.remover(id_semestre)
        except ErroApi as erro:
            raise traduzir_erro_api(erro)
