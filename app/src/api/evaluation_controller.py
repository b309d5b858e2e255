"""Controlador de avaliação da API.

Responsabilidades:
- Definir rotas de avaliação de disciplina e de semestre
- Resolver dependência do serviço de semestres
"""

from fastapi import APIRouter, Depends

from src.application.semester_service import ServicoSemestres
from src.domain.discipline import EntradaDisciplina, EntradaSemestre


def obter_servico_avaliacao():
    """Dependência para obter o serviço de semestres sem cliente de backend.

    Retorno:
    - ServicoSemestres: instância pronta para avaliação
    """
    return ServicoSemestres()


class ControladorAvaliacao:
    """Controlador de avaliação.

    Responsabilidades:
    - Registrar rotas de avaliação
    - Devolver resultados no contrato JSON camelCase
    """

    def __init__(self):
        """Inicializa o controlador.

        Responsabilidades:
        - Instanciar o roteador
        - Registrar as rotas disponíveis
        """
        self.roteador = APIRouter()
        self._registrar_rotas()

    def _registrar_rotas(self):
        self.roteador.add_api_route(
            path="/evaluate/discipline",
            endpoint=self._avaliar_disciplina,
            methods=["POST"],
            response_model=dict,
            summary="Avalia uma disciplina a partir do formulário",
        )
        self.roteador.add_api_route(
            path="/evaluate/semester",
            endpoint=self._avaliar_semestre,
            methods=["POST"],
            response_model=dict,
            summary="Avalia o semestre e agrega a média ponderada",
        )

    @staticmethod
    async def _avaliar_disciplina(
        entrada: EntradaDisciplina,
        servico: ServicoSemestres = Depends(obter_servico_avaliacao),
    ):
        """Avalia uma disciplina.

        Parâmetros:
        - entrada (EntradaDisciplina): disciplina como digitada
        - servico (ServicoSemestres): serviço injetado

        Retorno:
        - dict: resultado da disciplina
        """
        return servico.avaliar_disciplina(entrada).model_dump(by_alias=True)

    @staticmethod
    async def _avaliar_semestre(
        entrada: EntradaSemestre,
        servico: ServicoSemestres = Depends(obter_servico_avaliacao),
    ):
        """Avalia um semestre completo.

        Parâmetros:
        - entrada (EntradaSemestre): ano, período e disciplinas
        - servico (ServicoSemestres): serviço injetado

        Retorno:
        - dict: resultado do semestre com disciplinas na ordem de entrada
        """
        return servico.avaliar(entrada).model_dump(by_alias=True)
