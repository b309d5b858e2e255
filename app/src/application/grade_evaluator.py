"""Motor de avaliação do semestre.

Responsabilidades:
- Calcular média ponderada, nota necessária e média máxima por disciplina
- Classificar a situação da disciplina (aprovação, reprovação, risco)
- Agregar a média do semestre ponderada pela carga horária

Funções puras: nenhuma delas guarda estado, faz I/O ou lança erro para
registros sanitizados.
"""

import math
from typing import Iterable, List, Optional

from src.config.settings import Configuracoes
from src.domain.discipline import (
    Disciplina,
    ResultadoDisciplina,
    ResultadoSemestre,
    StatusDisciplina,
)
from src.util.rounding import arredondar_duas_casas


def _classificar(
    reprovado_falta: bool,
    media: Optional[float],
    risco_faltas: bool,
    nota_necessaria: Optional[float],
    media_parcial: Optional[float],
) -> StatusDisciplina:
    """Decide a situação da disciplina em ordem de prioridade.

    Reprovação por falta prevalece sobre qualquer nota. Com todas as notas
    lançadas a média decide. Em andamento, qualquer sinal de risco leva a
    EM_RISCO.
    """
    if reprovado_falta:
        return StatusDisciplina.REPROVADO_FALTA

    if media is not None:
        if media >= Configuracoes.NOTA_APROVACAO:
            return StatusDisciplina.APROVADO
        return StatusDisciplina.REPROVADO_NOTA

    risco_nota = (
        nota_necessaria is not None and nota_necessaria >= Configuracoes.NOTA_APROVACAO
    ) or (media_parcial is not None and media_parcial < Configuracoes.NOTA_APROVACAO)

    if risco_faltas or risco_nota:
        return StatusDisciplina.EM_RISCO
    return StatusDisciplina.EM_ANDAMENTO


def avaliar_disciplina(disciplina: Disciplina) -> ResultadoDisciplina:
    """Avalia uma disciplina sanitizada.

    Parâmetros:
    - disciplina (Disciplina): registro sanitizado

    Retorno:
    - ResultadoDisciplina: registro acrescido de média, situação, limite de
      faltas, nota necessária, média máxima e avaliações pendentes
    """
    avaliacoes_pendentes: List[str] = []
    soma_ponderada = 0.0
    peso_lancado = 0.0

    for chave, peso in Configuracoes.PESOS_AVALIACOES.items():
        nota = getattr(disciplina, chave)
        if nota is not None:
            soma_ponderada += nota * peso
            peso_lancado += peso
        else:
            avaliacoes_pendentes.append(chave.upper())

    peso_pendente = 1 - peso_lancado

    if peso_pendente <= 0:
        media = arredondar_duas_casas(soma_ponderada)
        nota_necessaria = None
    else:
        media = None
        nota_necessaria = arredondar_duas_casas(
            max(0.0, (Configuracoes.NOTA_APROVACAO - soma_ponderada) / peso_pendente)
        )

    limite_faltas = arredondar_duas_casas(
        disciplina.workload * Configuracoes.PERCENTUAL_LIMITE_FALTAS
    )
    media_maxima = arredondar_duas_casas(
        soma_ponderada + max(peso_pendente, 0.0) * Configuracoes.NOTA_MAXIMA
    )

    risco_faltas = disciplina.absences >= limite_faltas * Configuracoes.PERCENTUAL_ALERTA_FALTAS
    reprovado_falta = disciplina.absences > limite_faltas
    media_parcial = (
        arredondar_duas_casas(soma_ponderada / peso_lancado) if peso_lancado > 0 else None
    )

    status = _classificar(reprovado_falta, media, risco_faltas, nota_necessaria, media_parcial)

    return ResultadoDisciplina(
        **disciplina.model_dump(),
        average=media,
        status=status,
        limit_absences=limite_faltas,
        required_score=nota_necessaria,
        max_achievable=media_maxima,
        missing_assessments=avaliacoes_pendentes,
    )


def _media_ponderada_escalada(resultados: List[ResultadoDisciplina]) -> float:
    """Média ponderada sem estouro para cargas ou médias fora da escala.

    As cargas são divididas pela maior delas e cada termo entra já
    normalizado pela carga total, então nenhuma soma parcial excede a maior
    média em módulo.
    """
    escala = max(r.workload for r in resultados)
    pesos = [r.workload / escala for r in resultados]
    carga = 0.0
    for peso in pesos:
        carga += peso
    media = 0.0
    for resultado, peso in zip(resultados, pesos):
        media += resultado.average * (peso / carga)
    return media


def avaliar_semestre(disciplinas: Iterable[Disciplina]) -> ResultadoSemestre:
    """Avalia o semestre inteiro.

    A média do semestre considera apenas disciplinas com média definida,
    ponderadas pela carga horária. ``approved`` é True só quando há ao menos
    uma disciplina e todas estão aprovadas, False quando alguma foi
    reprovada, e None nos demais casos.

    Parâmetros:
    - disciplinas (Iterable[Disciplina]): registros sanitizados em ordem de exibição

    Retorno:
    - ResultadoSemestre: média, aprovação e resultados por disciplina
    """
    resultados = [avaliar_disciplina(disciplina) for disciplina in disciplinas]

    # Acumulação sequencial da esquerda para a direita; sum() é compensado desde o 3.12.
    carga_total = 0.0
    soma = 0.0
    for resultado in resultados:
        if resultado.average is None:
            continue
        carga_total += resultado.workload
        soma += resultado.average * resultado.workload

    media = None
    if carga_total > 0:
        media_bruta = soma / carga_total
        if not math.isfinite(media_bruta):
            media_bruta = _media_ponderada_escalada([r for r in resultados if r.average is not None])
        media = arredondar_duas_casas(media_bruta)

    situacoes = [r.status for r in resultados]
    reprovacoes = (StatusDisciplina.REPROVADO_NOTA, StatusDisciplina.REPROVADO_FALTA)

    aprovado = None
    if situacoes and all(s == StatusDisciplina.APROVADO for s in situacoes):
        aprovado = True
    elif any(s in reprovacoes for s in situacoes):
        aprovado = False

    return ResultadoSemestre(average=media, approved=aprovado, disciplines=resultados)
