"""Modelos de domínio para disciplinas e semestres.

Responsabilidades:
- Representar o formulário bruto de lançamento de notas
- Representar o registro sanitizado enviado à persistência
- Representar os resultados derivados da avaliação
"""

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

from src.config.settings import Configuracoes

ValorFormulario = Optional[Union[StrictStr, StrictInt, StrictFloat]]


class StatusDisciplina(str, Enum):
    """Situação de uma disciplina no semestre."""

    APROVADO = "APROVADO"
    REPROVADO_NOTA = "REPROVADO_NOTA"
    REPROVADO_FALTA = "REPROVADO_FALTA"
    EM_RISCO = "EM_RISCO"
    EM_ANDAMENTO = "EM_ANDAMENTO"


class ModeloAprovaTec(BaseModel):
    """Base com nomes camelCase no contrato JSON e snake_case no Python."""

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        use_enum_values=True,
    )


class EntradaDisciplina(ModeloAprovaTec):
    """Disciplina como digitada no formulário.

    Responsabilidades:
    - Aceitar texto, número ou vazio em todos os campos numéricos
    - Preservar a diferença entre nota vazia e nota zero até a sanitização
    """

    name: ValorFormulario = ""
    workload: ValorFormulario = ""
    absences: ValorFormulario = ""
    av1: ValorFormulario = ""
    av2: ValorFormulario = ""
    av3: ValorFormulario = ""
    edag: ValorFormulario = ""


class EntradaSemestre(ModeloAprovaTec):
    """Semestre como enviado pelo cliente.

    Responsabilidades:
    - Validar ano e período letivo
    - Agrupar as disciplinas na ordem de exibição
    """

    year: int = Field(..., ge=Configuracoes.ANO_MINIMO, le=Configuracoes.ANO_MAXIMO)
    term: int = Field(..., ge=1, le=2)
    disciplines: List[EntradaDisciplina] = Field(default_factory=list)


class Disciplina(ModeloAprovaTec):
    """Registro sanitizado de disciplina, também usado como payload de persistência."""

    name: str = ""
    workload: float = 0.0
    absences: float = 0.0
    av1: Optional[float] = None
    av2: Optional[float] = None
    av3: Optional[float] = None
    edag: Optional[float] = None


class ResultadoDisciplina(Disciplina):
    """Disciplina sanitizada acrescida dos valores derivados."""

    average: Optional[float] = None
    status: StatusDisciplina = StatusDisciplina.EM_ANDAMENTO
    limit_absences: float = 0.0
    required_score: Optional[float] = None
    max_achievable: float = 0.0
    missing_assessments: List[str] = Field(default_factory=list)


class ResultadoSemestre(ModeloAprovaTec):
    """Agregado do semestre com os resultados por disciplina na ordem de entrada."""

    year: Optional[int] = None
    term: Optional[int] = None
    average: Optional[float] = None
    approved: Optional[bool] = None
    disciplines: List[ResultadoDisciplina] = Field(default_factory=list)
