"""Logger da aplicação AprovaTec.

Responsabilidades:
- Resolver o nível de log configurado em LOG_LEVEL
- Anexar um único handler de stdout por logger
"""

import logging
import sys
from typing import Optional, Union

from src.config.settings import Configuracoes

NIVEL_PADRAO = logging.INFO
FORMATO_LOG = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FORMATO_DATA = "%Y-%m-%d %H:%M:%S"
NOME_HANDLER = "aprovatec_stdout"


class FabricaLogger:
    """Fornece loggers com saída padronizada em stdout."""

    @staticmethod
    def resolver_nivel(nivel: Optional[Union[str, int]]) -> int:
        """Traduz um nível textual ou numérico para a constante do logging.

        Nomes desconhecidos (ex.: ``LOG_LEVEL=verbose``) caem em INFO em vez
        de derrubar a inicialização.

        Parâmetros:
        - nivel (str | int | None): nome do nível ou valor numérico

        Retorno:
        - int: nível do módulo logging
        """
        if isinstance(nivel, int) and not isinstance(nivel, bool):
            return nivel
        nome = str(nivel or "").strip().upper()
        if nome == "WARN":
            nome = "WARNING"
        valor = logging.getLevelName(nome)
        return valor if isinstance(valor, int) else NIVEL_PADRAO

    @classmethod
    def configurar(cls, nome: str = "APROVATEC_APP", nivel: Optional[Union[str, int]] = None):
        """Devolve o logger ``nome`` com handler de stdout.

        O handler só é anexado na primeira chamada; chamadas seguintes apenas
        reaplicam o nível.

        Parâmetros:
        - nome (str): nome do logger
        - nivel (str | int | None): nível desejado; None usa Configuracoes.LOG_LEVEL

        Retorno:
        - logging.Logger: logger configurado
        """
        logger_instancia = logging.getLogger(nome)
        logger_instancia.setLevel(cls.resolver_nivel(Configuracoes.LOG_LEVEL if nivel is None else nivel))

        if not any(h.get_name() == NOME_HANDLER for h in logger_instancia.handlers):
            handler_console = logging.StreamHandler(sys.stdout)
            handler_console.setFormatter(logging.Formatter(fmt=FORMATO_LOG, datefmt=FORMATO_DATA))
            handler_console.set_name(NOME_HANDLER)
            logger_instancia.addHandler(handler_console)
            logger_instancia.propagate = False

        return logger_instancia


logger = FabricaLogger.configurar()
