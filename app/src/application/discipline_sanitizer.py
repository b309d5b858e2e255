"""Sanitização do formulário de disciplina.

Responsabilidades:
- Converter texto bruto do formulário em registro tipado
- Tratar carga horária e faltas inválidas como zero
- Tratar notas vazias ou inválidas como não lançadas
"""

import math
from typing import Any, Mapping, Optional, Union

from src.config.settings import Configuracoes
from src.domain.discipline import Disciplina, EntradaDisciplina


def converter_numero(valor: Any) -> Optional[float]:
    """Converte um valor de formulário em float finito.

    Parâmetros:
    - valor (Any): texto, número ou None

    Retorno:
    - float | None: número convertido ou None quando vazio/inválido
    """
    if valor is None or isinstance(valor, bool):
        return None
    if isinstance(valor, (int, float)):
        bruto = valor
    else:
        bruto = str(valor).strip()
        if not bruto or "_" in bruto:
            return None
    try:
        numero = float(bruto)
    except (ValueError, OverflowError):
        # Inteiros além do alcance de float contam como não numéricos.
        return None
    return numero if math.isfinite(numero) else None


def sanitizar_disciplina(entrada: Union[EntradaDisciplina, Mapping[str, Any]]) -> Disciplina:
    """Converte uma disciplina do formulário em registro sanitizado.

    Nunca lança erro: carga horária e faltas inválidas viram 0, notas
    inválidas viram None. Nota "0" continua sendo 0.0.

    Parâmetros:
    - entrada (EntradaDisciplina | Mapping): disciplina como digitada

    Retorno:
    - Disciplina: registro tipado
    """
    if isinstance(entrada, EntradaDisciplina):
        dados = entrada.model_dump()
    else:
        dados = dict(entrada)

    nome = dados.get("name")
    notas = {
        chave: converter_numero(dados.get(chave))
        for chave in Configuracoes.PESOS_AVALIACOES
    }

    return Disciplina(
        name=str(nome).strip() if nome is not None else "",
        workload=converter_numero(dados.get("workload")) or 0.0,
        absences=converter_numero(dados.get("absences")) or 0.0,
        **notas,
    )
