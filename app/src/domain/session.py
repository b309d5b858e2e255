"""Modelos de domínio para usuário e sessão autenticada.

Responsabilidades:
- Representar o usuário retornado pelo backend
- Manter token e usuário em um objeto de sessão explícito
- Validar corpos de login e cadastro
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Usuario(BaseModel):
    """Usuário autenticado no backend."""

    id: str = ""
    name: str = ""
    email: str = ""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)


class CredenciaisLogin(BaseModel):
    """Corpo de login."""

    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)


class DadosCadastro(BaseModel):
    """Corpo de cadastro de novo usuário."""

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)


class Sessao:
    """Sessão autenticada passada por referência ao cliente da API.

    Responsabilidades:
    - Guardar token e usuário sem armazenamento ambiente
    - Oferecer ciclo de vida explícito de início e encerramento
    """

    def __init__(self, token: Optional[str] = None, usuario: Optional[Usuario] = None):
        """Inicializa a sessão, opcionalmente já autenticada.

        Parâmetros:
        - token (str | None): token Bearer
        - usuario (Usuario | None): usuário dono do token
        """
        self.token = token or None
        self.usuario = usuario

    @property
    def autenticada(self) -> bool:
        return bool(self.token)

    def iniciar(self, token: str, usuario: Optional[Usuario] = None) -> None:
        """Inicia a sessão com um novo token.

        Parâmetros:
        - token (str): token Bearer emitido pelo backend
        - usuario (Usuario | None): usuário autenticado

        Exceções:
        - ValueError: quando o token é vazio
        """
        if not token:
            raise ValueError("Token de sessão vazio.")
        self.token = token
        self.usuario = usuario

    def encerrar(self) -> None:
        """Descarta token e usuário."""
        self.token = None
        self.usuario = None

    @classmethod
    def de_cabecalho(cls, authorization: Optional[str]) -> "Sessao":
        """Cria a sessão a partir de um cabeçalho ``Authorization: Bearer``.

        Parâmetros:
        - authorization (str | None): valor bruto do cabeçalho

        Retorno:
        - Sessao: sessão autenticada ou vazia quando o cabeçalho é inválido
        """
        if not authorization:
            return cls()
        esquema, _, token = authorization.strip().partition(" ")
        if esquema.lower() != "bearer" or not token.strip():
            return cls()
        return cls(token=token.strip())
