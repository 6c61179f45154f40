import pytest

from tareas.tasks import (
    AcademicTask,
    PersonalTask,
    WorkTask,
    load_tasks,
    parse_task,
    save_tasks,
)


def _personal():
    return PersonalTask("Lavar", "Personal", "2024-05-01", False, 3, "hogar")


def test_personal_serialize():
    assert _personal().serialize() == "Personal,Lavar,2024-05-01,0,3,hogar"


def test_complete_changes_state_in_record():
    task = _personal()
    task.complete()
    assert task.completed is True
    assert task.serialize().split(",")[3] == "1"


def test_personal_render_pending_and_completed():
    task = _personal()
    assert "Estado: Pendiente\n" in task.render()
    assert task.render().endswith("categoria: hogar\n")
    task.complete()
    assert "Estado:  completada\n" in task.render()


def test_academic_render_and_serialize():
    task = AcademicTask("Parcial", "Academica", "junio", True, 5, "Calculo", "examen")
    text = task.render()
    assert "Estado: completada\n" in text
    assert "Materia: Calculo\ntipo: examen\n" in text
    assert task.serialize() == "Academica,Parcial,junio,1,5,Calculo,examen"


def test_work_render_and_serialize():
    task = WorkTask("Informe", "Laboral", "viernes", False, 2, "Alfa", "Ana")
    assert task.render().endswith("Proyecto: Alfa\nIngeniero a cargo: Ana\n")
    assert task.serialize() == "Laboral,Informe,viernes,0,2,Alfa,Ana"


def test_render_starts_with_separator_and_title():
    lines = _personal().render().splitlines()
    assert lines[0] == "<<<<<<<<<<<<<<<<>>>>>>>>>>>>>>>>>>>>>>>>>>"
    assert lines[1] == "Descripcion: Personal"
    assert lines[2] == "Titulo: Lavar"


def test_parse_personal_round_trip():
    task = _personal()
    assert parse_task(task.serialize()) == task


def test_parse_academic_reads_fixed_columns():
    task = parse_task("Academica,T,D,1,2,a,b,c")
    assert task == AcademicTask("T", "Academica", "D", True, 2, "b", "c")


def test_parse_work_reads_fixed_columns():
    task = parse_task("Laboral,T,D,0,4,a,b,c,p,r")
    assert task == WorkTask("T", "Laboral", "D", False, 4, "p", "r")


def test_parse_missing_columns_are_empty():
    task = parse_task("Laboral,T,D,0,4,a")
    assert (task.project, task.manager) == ("", "")


def test_parse_unknown_type_gives_none():
    assert parse_task("Otro,T,D,0,1,x") is None


@pytest.mark.parametrize("text, expected", [("4x", 4), (" 7", 7), ("-2", -2)])
def test_parse_priority_prefix(text, expected):
    assert parse_task(f"Personal,T,D,0,{text},c").priority == expected


@pytest.mark.parametrize("line", ["", "Personal,T,D,0,alto,c", "Personal,T,D,0"])
def test_parse_bad_priority_raises(line):
    with pytest.raises(ValueError):
        parse_task(line)


def test_save_and_load(tmp_path):
    path = tmp_path / "tareas.txt"
    tasks = [_personal(), PersonalTask("Pagar", "Personal", "hoy", True, 1, "finanzas")]
    save_tasks(tasks, path)
    assert path.read_text(encoding="utf-8").splitlines() == [t.serialize() for t in tasks]
    assert load_tasks(path) == tasks


def test_load_skips_unknown_records(tmp_path):
    path = tmp_path / "tareas.txt"
    path.write_text("Otro,T,D,0,1\nPersonal,A,B,0,1,c\n", encoding="utf-8")
    loaded = load_tasks(path)
    assert [t.title for t in loaded] == ["A"]


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_tasks(tmp_path / "nada.txt")