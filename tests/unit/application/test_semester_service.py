"""Testes do serviço de semestres."""

from unittest.mock import Mock

import pytest

from src.application.semester_service import ErroValidacaoSemestre, ServicoSemestres
from src.domain.discipline import EntradaDisciplina, EntradaSemestre


def test_avaliar_semestre_ecoa_ano_e_periodo(semestre_formulario_exemplo):
    resultado = ServicoSemestres.avaliar(EntradaSemestre(**semestre_formulario_exemplo))

    assert resultado.year == 2024
    assert resultado.term == 1
    assert resultado.average == 7.6
    assert resultado.approved is None
    assert [d.status for d in resultado.disciplines] == ["APROVADO", "EM_RISCO"]


def test_avaliar_disciplina_sanitiza_antes(disciplina_formulario_exemplo):
    resultado = ServicoSemestres.avaliar_disciplina(EntradaDisciplina(**disciplina_formulario_exemplo))

    assert resultado.name == "Cálculo I"
    assert resultado.average == 7.6


def test_validar_rejeita_nome_vazio(semestre_formulario_exemplo):
    semestre_formulario_exemplo["disciplines"][1]["name"] = "   "
    entrada = EntradaSemestre(**semestre_formulario_exemplo)

    with pytest.raises(ErroValidacaoSemestre, match="nome"):
        ServicoSemestres.validar_disciplinas(entrada.disciplines)


@pytest.mark.parametrize("carga", ["", "0", "-5", "abc", None])
def test_validar_rejeita_carga_horaria_invalida(semestre_formulario_exemplo, carga):
    semestre_formulario_exemplo["disciplines"][0]["workload"] = carga
    entrada = EntradaSemestre(**semestre_formulario_exemplo)

    with pytest.raises(ErroValidacaoSemestre, match="carga horária"):
        ServicoSemestres.validar_disciplinas(entrada.disciplines)


def test_salvar_cria_semestre_com_payload_sanitizado(semestre_formulario_exemplo):
    cliente = Mock()
    cliente.criar_semestre.return_value = {"_id": "novo"}
    servico = ServicoSemestres(cliente=cliente)

    salvo = servico.salvar(EntradaSemestre(**semestre_formulario_exemplo))

    assert salvo == {"_id": "novo"}
    payload = cliente.criar_semestre.call_args.args[0]
    assert payload["year"] == 2024
    assert payload["term"] == 1
    assert payload["disciplines"][0] == {
        "name": "Cálculo I",
        "workload": 40.0,
        "absences": 2.0,
        "av1": 8.0,
        "av2": 6.0,
        "av3": 9.0,
        "edag": 7.0,
    }
    assert payload["disciplines"][1]["av2"] is None
    cliente.atualizar_semestre.assert_not_called()


def test_salvar_atualiza_quando_ha_id(semestre_formulario_exemplo):
    cliente = Mock()
    cliente.atualizar_semestre.return_value = {"_id": "s1"}
    servico = ServicoSemestres(cliente=cliente)

    servico.salvar(EntradaSemestre(**semestre_formulario_exemplo), id_semestre="s1")

    assert cliente.atualizar_semestre.call_args.args[0] == "s1"
    cliente.criar_semestre.assert_not_called()


def test_salvar_invalido_nao_chama_backend(semestre_formulario_exemplo):
    semestre_formulario_exemplo["disciplines"][0]["name"] = ""
    cliente = Mock()
    servico = ServicoSemestres(cliente=cliente)

    with pytest.raises(ErroValidacaoSemestre):
        servico.salvar(EntradaSemestre(**semestre_formulario_exemplo))

    cliente.criar_semestre.assert_not_called()


def test_operacoes_de_backend_sem_cliente():
    with pytest.raises(RuntimeError):
        ServicoSemestres().listar()


def test_remover_delega_ao_cliente():
    cliente = Mock()
    cliente.remover_semestre.return_value = {}
    ServicoSemestres(cliente=cliente).remover("s9")

    cliente.remover_semestre.assert_called_once_with("s9")


def test_carregar_formulario_converte_para_texto(semestres_salvos):
    cliente = Mock()
    cliente.listar_semestres.return_value = semestres_salvos
    servico = ServicoSemestres(cliente=cliente)

    formulario = servico.carregar_formulario("s1")

    assert formulario["_id"] == "s1"
    assert formulario["year"] == 2023
    assert formulario["term"] == 2
    assert formulario["disciplines"] == [
        {
            "name": "Cálculo I",
            "workload": "40",
            "absences": "2",
            "av1": "8",
            "av2": "6.5",
            "av3": "9",
            "edag": "0",
        }
    ]


def test_carregar_formulario_campos_ausentes_viram_vazio(semestres_salvos):
    cliente = Mock()
    cliente.listar_semestres.return_value = semestres_salvos
    servico = ServicoSemestres(cliente=cliente)

    disciplinas = servico.carregar_formulario("s2")["disciplines"]

    assert disciplinas[0]["absences"] == ""
    assert disciplinas[0]["av1"] == ""
    assert disciplinas[0]["edag"] == ""
    assert disciplinas[1]["workload"] == ""
    assert disciplinas[1]["absences"] == "0"


def test_carregar_formulario_sem_disciplinas_cria_uma_em_branco(semestres_salvos):
    cliente = Mock()
    cliente.listar_semestres.return_value = semestres_salvos
    servico = ServicoSemestres(cliente=cliente)

    disciplinas = servico.carregar_formulario("s3")["disciplines"]

    assert len(disciplinas) == 1
    assert disciplinas[0]["name"] == ""


def test_carregar_formulario_inexistente(semestres_salvos):
    cliente = Mock()
    cliente.listar_semestres.return_value = semestres_salvos

    with pytest.raises(LookupError):
        ServicoSemestres(cliente=cliente).carregar_formulario("nao-existe")


def test_resumir_historico(semestres_salvos):
    resumo = ServicoSemestres.resumir(semestres_salvos)

    assert resumo == {"semesters": 3, "disciplinesCount": 3, "approved": 1, "reproved": 1}


def test_resumir_historico_vazio():
    assert ServicoSemestres.resumir([]) == {
        "semesters": 0,
        "disciplinesCount": 0,
        "approved": 0,
        "reproved": 0,
    }
