"""Testes da fábrica de logger."""

import logging

import pytest

from src.config.settings import Configuracoes
from src.util.logger import NOME_HANDLER, FabricaLogger


def _handlers_da_aplicacao(logger):
    return [h for h in logger.handlers if h.get_name() == NOME_HANDLER]


def test_fabrica_logger_configuracao_unica():
    nome_logger = "TEST_LOGGER"
    logging.getLogger(nome_logger).handlers = []

    primeiro = FabricaLogger.configurar(nome_logger)
    segundo = FabricaLogger.configurar(nome_logger)

    assert primeiro is segundo
    assert len(_handlers_da_aplicacao(segundo)) == 1
    assert primeiro.propagate is False


def test_logger_padrao_da_aplicacao():
    logger = FabricaLogger.configurar()

    assert logger.name == "APROVATEC_APP"
    assert any(
        isinstance(h, logging.StreamHandler) and h.get_name() == NOME_HANDLER for h in logger.handlers
    )


@pytest.mark.parametrize(
    "nivel, esperado",
    [
        ("DEBUG", logging.DEBUG),
        (" warning ", logging.WARNING),
        ("warn", logging.WARNING),
        ("error", logging.ERROR),
        (logging.CRITICAL, logging.CRITICAL),
        ("verbose", logging.INFO),
        ("", logging.INFO),
        (None, logging.INFO),
    ],
)
def test_resolver_nivel(nivel, esperado):
    assert FabricaLogger.resolver_nivel(nivel) == esperado


def test_nivel_invalido_no_ambiente_cai_em_info(monkeypatch):
    monkeypatch.setattr(Configuracoes, "LOG_LEVEL", "BARULHENTO")
    logging.getLogger("TEST_LOGGER_NIVEL").handlers = []

    logger = FabricaLogger.configurar("TEST_LOGGER_NIVEL")

    assert logger.level == logging.INFO


def test_nivel_explicito_prevalece_sobre_configuracao(monkeypatch):
    monkeypatch.setattr(Configuracoes, "LOG_LEVEL", "ERROR")

    logger = FabricaLogger.configurar("TEST_LOGGER_EXPLICITO", nivel="DEBUG")

    assert logger.level == logging.DEBUG
