"""Arredondamento das grandezas derivadas da avaliação.

Responsabilidades:
- Arredondar para duas casas decimais com uma regra única e determinística
"""

import math
from decimal import Context, Decimal, ROUND_HALF_UP

_DUAS_CASAS = Decimal("0.01")
# Precisão suficiente para quantizar qualquer float finito.
_CONTEXTO = Context(prec=400, rounding=ROUND_HALF_UP)


def arredondar_duas_casas(valor: float) -> float:
    """Arredonda meio para longe do zero em duas casas decimais.

    Parte da representação decimal mais curta do float, então 7.005
    resulta sempre em 7.01.

    Parâmetros:
    - valor (float): valor a arredondar

    Retorno:
    - float: valor arredondado, ou o próprio valor quando não finito
    """
    if not math.isfinite(valor):
        return valor
    arredondado = Decimal(repr(float(valor))).quantize(_DUAS_CASAS, context=_CONTEXTO)
    return float(arredondado) + 0.0
