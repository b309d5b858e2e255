"""Serviço de semestres.

Responsabilidades:
- Avaliar semestres digitados no formulário
- Validar e persistir semestres pelo cliente do backend
- Recarregar semestres salvos como estado de formulário
- Resumir o histórico para o dashboard
"""

from typing import Any, Iterable, List, Optional

from src.application.discipline_sanitizer import converter_numero, sanitizar_disciplina
from src.application.grade_evaluator import avaliar_disciplina, avaliar_semestre
from src.config.settings import Configuracoes
from src.domain.discipline import (
    EntradaDisciplina,
    EntradaSemestre,
    ResultadoDisciplina,
    ResultadoSemestre,
)
from src.infrastructure.http.api_client import ClienteApi
from src.util.logger import logger


class ErroValidacaoSemestre(ValueError):
    """Semestre incompleto para ser salvo."""


def _para_texto(valor: Any) -> str:
    """Converte número salvo em texto de formulário (8.0 vira "8")."""
    if isinstance(valor, float) and valor.is_integer():
        return str(int(valor))
    return str(valor)


class ServicoSemestres:
    """Orquestra avaliação e persistência de semestres.

    Responsabilidades:
    - Sanitizar entradas antes de avaliar ou enviar
    - Bloquear envio de disciplinas sem nome ou carga horária
    - Converter registros salvos de volta em formulário
    """

    def __init__(self, cliente: Optional[ClienteApi] = None):
        """Inicializa o serviço.

        Parâmetros:
        - cliente (ClienteApi | None): cliente do backend; opcional para uso só de avaliação
        """
        self.cliente = cliente

    @staticmethod
    def avaliar_disciplina(entrada: EntradaDisciplina) -> ResultadoDisciplina:
        return avaliar_disciplina(sanitizar_disciplina(entrada))

    @staticmethod
    def avaliar(entrada: EntradaSemestre) -> ResultadoSemestre:
        """Avalia um semestre digitado.

        Parâmetros:
        - entrada (EntradaSemestre): ano, período e disciplinas brutas

        Retorno:
        - ResultadoSemestre: resultado com ano e período ecoados
        """
        resultado = avaliar_semestre(sanitizar_disciplina(d) for d in entrada.disciplines)
        resultado.year = entrada.year
        resultado.term = entrada.term
        return resultado

    @staticmethod
    def validar_disciplinas(disciplinas: Iterable[EntradaDisciplina]) -> None:
        """Valida campos obrigatórios para persistência.

        Parâmetros:
        - disciplinas (Iterable[EntradaDisciplina]): disciplinas brutas

        Exceções:
        - ErroValidacaoSemestre: na primeira disciplina sem nome ou carga horária
        """
        for disciplina in disciplinas:
            if disciplina.name is None or not str(disciplina.name).strip():
                raise ErroValidacaoSemestre("Informe o nome de todas as disciplinas.")
            carga = converter_numero(disciplina.workload)
            if carga is None or carga <= 0:
                raise ErroValidacaoSemestre("Informe a carga horária de todas as disciplinas.")

    @staticmethod
    def montar_payload(entrada: EntradaSemestre) -> dict:
        """Monta o corpo enviado ao backend com as disciplinas sanitizadas."""
        return {
            "year": entrada.year,
            "term": entrada.term,
            "disciplines": [
                sanitizar_disciplina(d).model_dump(by_alias=True) for d in entrada.disciplines
            ],
        }

    def _obter_cliente(self) -> ClienteApi:
        if self.cliente is None:
            raise RuntimeError("Cliente do backend não configurado.")
        return self.cliente

    def listar(self) -> list:
        return self._obter_cliente().listar_semestres()

    def salvar(self, entrada: EntradaSemestre, id_semestre: Optional[str] = None) -> dict:
        """Valida e persiste o semestre.

        Parâmetros:
        - entrada (EntradaSemestre): semestre digitado
        - id_semestre (str | None): id para atualização; None cria um novo

        Retorno:
        - dict: semestre salvo retornado pelo backend

        Exceções:
        - ErroValidacaoSemestre: disciplina sem nome ou carga horária
        - ErroApi: falha no backend
        """
        self.validar_disciplinas(entrada.disciplines)
        payload = self.montar_payload(entrada)
        cliente = self._obter_cliente()

        if id_semestre:
            salvo = cliente.atualizar_semestre(id_semestre, payload)
            logger.info(f"Semestre {entrada.year}.{entrada.term} atualizado (id={id_semestre}).")
        else:
            salvo = cliente.criar_semestre(payload)
            logger.info(f"Semestre {entrada.year}.{entrada.term} criado.")
        return salvo

    def remover(self, id_semestre: str) -> dict:
        resposta = self._obter_cliente().remover_semestre(id_semestre)
        logger.info(f"Semestre removido (id={id_semestre}).")
        return resposta

    def carregar_formulario(self, id_semestre: str) -> dict:
        """Reconstrói o formulário de um semestre salvo.

        Parâmetros:
        - id_semestre (str): ``_id`` do semestre no backend

        Retorno:
        - dict: ``_id``, ``year``, ``term`` e disciplinas como texto

        Exceções:
        - LookupError: semestre inexistente
        """
        semestre = next((s for s in self.listar() if s.get("_id") == id_semestre), None)
        if semestre is None:
            raise LookupError(f"Semestre {id_semestre} não encontrado.")

        disciplinas: List[EntradaDisciplina] = []
        for salvo in semestre.get("disciplines") or []:
            campos = {
                "name": salvo.get("name") or "",
                "workload": _para_texto(salvo["workload"]) if salvo.get("workload") else "",
            }
            for chave in ["absences", *Configuracoes.PESOS_AVALIACOES]:
                valor = salvo.get(chave)
                campos[chave] = _para_texto(valor) if valor is not None else ""
            disciplinas.append(EntradaDisciplina(**campos))

        if not disciplinas:
            disciplinas.append(EntradaDisciplina())

        formulario = EntradaSemestre(
            year=semestre.get("year"), term=semestre.get("term"), disciplines=disciplinas
        )
        return {"_id": id_semestre, **formulario.model_dump(by_alias=True)}

    @staticmethod
    def resumir(semestres: Iterable[dict]) -> dict:
        """Totaliza o histórico para o dashboard.

        Parâmetros:
        - semestres (Iterable[dict]): semestres salvos

        Retorno:
        - dict: total de semestres, disciplinas, aprovados e reprovados
        """
        lista = list(semestres)
        return {
            "semesters": len(lista),
            "disciplinesCount": sum(len(s.get("disciplines") or []) for s in lista),
            "approved": sum(1 for s in lista if s.get("approved") is True),
            "reproved": sum(1 for s in lista if s.get("approved") is False),
        }
