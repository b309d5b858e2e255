"""Configurações centrais do projeto.

Responsabilidades:
- Definir pesos das avaliações e limites acadêmicos
- Definir endereço e timeout da API de persistência
- Definir nível de log
"""

import os


class Configuracoes:
    """Centraliza configurações da aplicação.

    Responsabilidades:
    - Declarar constantes de avaliação
    - Fornecer parâmetros de integração com o backend
    - Expor parâmetros de observabilidade
    """

    API_URL = os.getenv("API_URL", "http://localhost:3000").rstrip("/")
    API_TIMEOUT_SECONDS = float(os.getenv("API_TIMEOUT_SECONDS", "10"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()

    # Ordem das chaves define a ordem de missingAssessments.
    PESOS_AVALIACOES = {
        "av1": 0.25,
        "av2": 0.25,
        "av3": 0.30,
        "edag": 0.20,
    }

    NOTA_APROVACAO = 7.0
    NOTA_MAXIMA = 10.0
    PERCENTUAL_LIMITE_FALTAS = 0.25
    PERCENTUAL_ALERTA_FALTAS = 0.8

    ANO_MINIMO = 2000
    ANO_MAXIMO = 2100
