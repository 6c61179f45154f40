# tareas

A small interactive task list that runs in the terminal. It keeps three kinds of task:

- **Personal** (`PersonalTask`): has a category, such as hogar, salud, finanzas or ocio.
- **Academica** (`AcademicTask`): has a subject and a kind, such as examen, taller or exposición.
- **Laboral** (`WorkTask`): has a project and the engineer in charge of it.

Each task has a title, a type label, a deadline, a priority and a status. The status is either pending or completed.

## Installation

```
pip install .
```

## Usage

Start the menu:

```
tareas
```

By default the tasks are saved to and loaded from `tareas.txt` in the current directory. Use `--file` to choose another file:

```
tareas --file mis_tareas.txt
```

The menu is in Spanish and offers these options:

```
======= MENÚ DE TAREAS =======
1. Agregar tarea
2. Ver tareas
3. Marcar tarea como completada
4. Guardar tareas en archivo
5. Cargar tareas desde archivo
0. Salir
```

- **1** adds a task. The program asks for the kind of task first and repeats the question until the answer is 1, 2 or 3. Then it asks for the title, the deadline and the priority, followed by the details for that kind.
- **2** prints every task.
- **3** asks for a title and marks every task with that title as completed.
- **4** writes all tasks to the task file and replaces what was there.
- **5** reads the task file and appends its tasks to the list.

The menu stops on option 0 or at the end of input. If a stored record has a priority that does not begin with a whole number, `tareas` prints an error and exits with status 1.

## File format

Each line of the task file holds one task as comma-separated fields. The fields are the type label, the title, the deadline, the status (`1` completed, `0` pending) and the priority. The fields for that kind of task come after these:

```
Personal,Comprar pan,2024-05-01,0,2,hogar
Academica,Parcial,2024-05-10,1,5,Calculo,examen
Laboral,Informe,2024-05-20,0,3,Puente,Ana
```

Field values must not contain commas. Lines whose type label is not `Personal`, `Academica` or `Laboral` are skipped when the file is loaded.

When a file is loaded, each record is read in fixed columns. The category is taken from column 6, the subject and kind from columns 7 and 8, and the project and manager from columns 9 and 10. Saved personal tasks load back unchanged. Saved academic and work tasks keep their shared fields, but their own fields do not come back as they were written.

## Using it from Python

```python
from tareas.tasks import PERSONAL, PersonalTask, load_tasks, save_tasks

task = PersonalTask(
    title="Comprar pan",
    description=PERSONAL,
    deadline="2024-05-01",
    completed=False,
    priority=2,
    category="hogar",
)
task.complete()
save_tasks([task], "tareas.txt")
print(load_tasks("tareas.txt")[0].render())
```

`tareas.tasks` provides the following:

- The task classes `Task`, `PersonalTask`, `AcademicTask` and `WorkTask`. Each has `complete()`, `render()` and `serialize()`.
- `parse_task(line)`, which returns a task, or `None` for an unknown type label.
- `save_tasks(tasks, path)` and `load_tasks(path)`.

`tareas.cli.TaskMenu(stdin, stdout, path)` runs the same menu on any pair of text streams.

## Running the tests

```
pip install .[test]
pytest
```