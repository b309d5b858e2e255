"""Controlador de autenticação da API.

Responsabilidades:
- Repassar login e cadastro ao backend
- Traduzir erros do backend em respostas HTTP
"""

from fastapi import APIRouter, Depends

from src.api.semester_controller import traduzir_erro_api
from src.domain.session import CredenciaisLogin, DadosCadastro, Sessao
from src.infrastructure.http.api_client import ClienteApi, ErroApi


def obter_cliente_anonimo():
    """Dependência para obter um cliente com sessão vazia.

    Retorno:
    - ClienteApi: cliente sem token
    """
    return ClienteApi(Sessao())


class ControladorAutenticacao:
    """Controlador de autenticação.

    Responsabilidades:
    - Registrar rotas de login e cadastro
    """

    def __init__(self):
        self.roteador = APIRouter()
        self.roteador.add_api_route(
            path="/auth/login",
            endpoint=self._entrar,
            methods=["POST"],
            response_model=dict,
        )
        self.roteador.add_api_route(
            path="/auth/register",
            endpoint=self._cadastrar,
            methods=["POST"],
            response_model=dict,
        )

    @staticmethod
    def _entrar(credenciais: CredenciaisLogin, cliente: ClienteApi = Depends(obter_cliente_anonimo)):
        """Autentica o usuário.

        Retorno:
        - dict: token e usuário emitidos pelo backend
        """
        try:
            return cliente.autenticar(credenciais.email, credenciais.password)
        except ErroApi as erro:
            raise traduzir_erro_api(erro)

    @staticmethod
    def _cadastrar(dados: DadosCadastro, cliente: ClienteApi = Depends(obter_cliente_anonimo)):
        try:
            return cliente.registrar(dados.name, dados.email, dados.password)
        except ErroApi as erro:
            raise traduzir_erro_api(erro)
