"""Cliente HTTP da API de persistência do AprovaTec.

Responsabilidades:
- Enviar requisições JSON autenticadas com o token da sessão
- Traduzir respostas de erro em exceções com a mensagem do backend
- Expor operações de autenticação e de semestres (/grades)
"""

from typing import Any, Optional

import requests

from src.config.settings import Configuracoes
from src.domain.session import Sessao, Usuario
from src.util.logger import logger

MENSAGEM_ERRO_PADRAO = "Erro na requisição"


class ErroApi(RuntimeError):
    """Falha na chamada ao backend.

    ``status_code`` é None quando a falha ocorreu no transporte.
    """

    def __init__(self, mensagem: str, status_code: Optional[int] = None):
        super().__init__(mensagem)
        self.status_code = status_code


class ClienteApi:
    """Cliente do backend REST.

    Responsabilidades:
    - Montar cabeçalhos JSON e Authorization a partir da sessão
    - Decodificar corpos JSON de forma tolerante
    - Atualizar a sessão em login e cadastro
    """

    def __init__(self, sessao: Sessao, url_base: Optional[str] = None, timeout: Optional[float] = None):
        """Inicializa o cliente.

        Parâmetros:
        - sessao (Sessao): sessão compartilhada por referência
        - url_base (str | None): endereço do backend
        - timeout (float | None): timeout em segundos por requisição
        """
        self.sessao = sessao
        self.url_base = (url_base or Configuracoes.API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else Configuracoes.API_TIMEOUT_SECONDS

    def _montar_cabecalhos(self) -> dict:
        cabecalhos = {"Content-Type": "application/json"}
        if self.sessao.token:
            cabecalhos["Authorization"] = f"Bearer {self.sessao.token}"
        return cabecalhos

    @staticmethod
    def _decodificar(resposta: requests.Response) -> Any:
        """Decodifica o corpo quando a resposta declara JSON.

        Parâmetros:
        - resposta (requests.Response): resposta HTTP

        Retorno:
        - Any: corpo decodificado ou dict vazio quando ausente/malformado
        """
        tipo_conteudo = resposta.headers.get("content-type") or ""
        if "application/json" not in tipo_conteudo:
            return {}
        try:
            return resposta.json()
        except ValueError:
            return {}

    def requisitar(self, metodo: str, caminho: str, corpo: Optional[Any] = None) -> Any:
        """Executa uma requisição ao backend.

        Parâmetros:
        - metodo (str): verbo HTTP
        - caminho (str): caminho relativo, ex. ``/grades``
        - corpo (Any | None): corpo serializável em JSON

        Retorno:
        - Any: corpo JSON da resposta

        Exceções:
        - ErroApi: resposta não-2xx ou falha de transporte
        """
        url = f"{self.url_base}{caminho}"
        try:
            resposta = requests.request(
                metodo,
                url,
                json=corpo,
                headers=self._montar_cabecalhos(),
                timeout=self.timeout,
            )
        except requests.RequestException as erro:
            logger.error(f"Falha de comunicação com o backend ({metodo} {caminho}): {erro}")
            raise ErroApi(MENSAGEM_ERRO_PADRAO) from erro

        dados = self._decodificar(resposta)

        if not resposta.ok:
            mensagem = dados.get("message") if isinstance(dados, dict) else None
            logger.warning(f"Backend respondeu {resposta.status_code} para {metodo} {caminho}")
            raise ErroApi(mensagem or MENSAGEM_ERRO_PADRAO, status_code=resposta.status_code)

        return dados

    def autenticar(self, email: str, senha: str) -> dict:
        """Autentica no backend e inicia a sessão.

        Parâmetros:
        - email (str): e-mail do usuário
        - senha (str): senha do usuário

        Retorno:
        - dict: resposta do backend com token e usuário
        """
        dados = self.requisitar("POST", "/auth/login", {"email": email, "password": senha})
        self._iniciar_sessao(dados)
        return dados

    def registrar(self, nome: str, email: str, senha: str) -> dict:
        """Cadastra um usuário; inicia a sessão quando o backend devolve token."""
        dados = self.requisitar(
            "POST", "/auth/register", {"name": nome, "email": email, "password": senha}
        )
        if isinstance(dados, dict) and dados.get("token"):
            self._iniciar_sessao(dados)
        return self._como_dict(dados)

    def _iniciar_sessao(self, dados: Any) -> None:
        token = dados.get("token") if isinstance(dados, dict) else None
        if not token:
            raise ErroApi("Resposta de autenticação sem token.")
        usuario = dados.get("user")
        self.sessao.iniciar(token, Usuario.model_validate(usuario) if isinstance(usuario, dict) else None)
        logger.info("Sessão iniciada.")

    def listar_semestres(self) -> list:
        dados = self.requisitar("GET", "/grades")
        return dados if isinstance(dados, list) else []

    def criar_semestre(self, payload: dict) -> dict:
        return self._como_dict(self.requisitar("POST", "/grades", payload))

    def atualizar_semestre(self, id_semestre: str, payload: dict) -> dict:
        return self._como_dict(self.requisitar("PUT", f"/grades/{id_semestre}", payload))

    def remover_semestre(self, id_semestre: str) -> dict:
        return self._como_dict(self.requisitar("DELETE", f"/grades/{id_semestre}"))

    @staticmethod
    def _como_dict(dados: Any) -> dict:
        return dados if isinstance(dados, dict) else {}
