"""Interactive task menu."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

from tareas.tasks import (
    ACADEMIC,
    PERSONAL,
    WORK,
    AcademicTask,
    PersonalTask,
    Task,
    WorkTask,
    load_tasks,
    save_tasks,
)

DEFAULT_PATH = "tareas.txt"

_MENU = (
    "======= MENÚ DE TAREAS =======\n"
    "1. Agregar tarea\n"
    "2. Ver tareas\n"
    "3. Marcar tarea como completada\n"
    "4. Guardar tareas en archivo\n"
    "5. Cargar tareas desde archivo\n"
    "0. Salir\n"
    "elija una opcion: "
)

_TYPE_MENU = (
    "############ ELECCIONE TIPO DE TAREA#########\n"
    "1. Tarea personal\n"
    "2. Tarea academica\n"
    "3. Tarea laboral\n"
    "elija una opccion;  "
)


class _ConsoleInput:
    """Reads words, integers and lines from a text stream.

    Once a read fails, every later read yields an empty value, as a console
    stream in a failed state would.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""
        self.failed = False

    def _peek(self) -> str:
        if not self._pending:
            self._pending = self._stream.read(1)
        return self._pending

    def _take(self) -> str:
        ch = self._peek()
        self._pending = ""
        return ch

    def _skip_space(self) -> None:
        while (ch := self._peek()) and ch.isspace():
            self._take()

    def word(self) -> str:
        if self.failed:
            return ""
        self._skip_space()
        chars = []
        while (ch := self._peek()) and not ch.isspace():
            chars.append(self._take())
        if not chars:
            self.failed = True
        return "".join(chars)

    def integer(self) -> int:
        if self.failed:
            return 0
        self._skip_space()
        text = self._take() if self._peek() in ("+", "-") and self._peek() else ""
        digits = []
        while (ch := self._peek()) and ch.isdigit():
            digits.append(self._take())
        if not digits:
            self.failed = True
            return 0
        return int(text + "".join(digits))

    def line(self) -> str:
        if self.failed:
            return ""
        chars = []
        while True:
            ch = self._take()
            if ch == "":
                if not chars:
                    self.failed = True
                break
            if ch == "\n":
                break
            chars.append(ch)
        return "".join(chars)

    def ignore(self) -> None:
        if not self.failed:
            self._take()


class TaskMenu:
    """The task menu, reading choices from ``stdin`` and writing to ``stdout``."""

    def __init__(self, stdin: TextIO, stdout: TextIO, path: str | Path = DEFAULT_PATH) -> None:
        self._input = _ConsoleInput(stdin)
        self._out = stdout
        self.path = Path(path)
        self.tasks: list[Task] = []

    def _write(self, text: str) -> None:
        self._out.write(text)

    def run(self) -> None:
        """Show the menu and carry out choices until 0 or end of input."""
        actions = {
            1: self.add_task,
            2: self.show_tasks,
            3: self.complete_task,
            4: self.save,
            5: self.load,
        }
        while True:
            self._write(_MENU)
            option = self._input.integer()
            action = actions.get(option)
            if action is not None:
                action()
            if option == 0:
                break

    def add_task(self) -> None:
        """Ask for a task type and its fields, then add the task."""
        read = self._input
        while True:
            self._write(_TYPE_MENU)
            choice = read.word()
            if read.failed:
                return
            if "1" <= choice <= "3":
                break
            self._write("<<---------------------->>\nelija una opccion valida\n")

        read.ignore()
        self._write("Nombre de la tarea: ")
        title = read.line()
        self._write("digite fecha limite: ")
        deadline = read.line()
        self._write("prioridad [1 a 5]: ")
        priority = read.integer()
        read.ignore()

        if choice == "1":
            self._write("digite categoria  [hogar, salud, finanzas ,ocio etc.]: ")
            category = read.word()
            read.ignore()
            self.tasks.append(PersonalTask(title, PERSONAL, deadline, False, priority, category))
        elif choice == "2":
            self._write("digite asignatura: ")
            subject = read.line()
            self._write("digite tipo [ examen,  taller, exposición ]: ")
            kind = read.line()
            self.tasks.append(AcademicTask(title, ACADEMIC, deadline, False, priority, subject, kind))
        elif choice == "3":
            self._write("proyecto a realizar: ")
            project = read.line()
            self._write("digite responsable del proyecto: ")
            manager = read.line()
            read.ignore()
            self.tasks.append(WorkTask(title, WORK, deadline, False, priority, project, manager))

    def show_tasks(self) -> None:
        """Print every task."""
        for task in self.tasks:
            self._write(task.render())

    def complete_task(self) -> None:
        """Ask for a title and mark every task with that title completed."""
        self._write("digite titulo de la tarea: ")
        wanted = self._input.line()
        self._input.ignore()
        for task in self.tasks:
            if task.title == wanted:
                task.complete()
                self._write(task.render())

    def save(self) -> None:
        """Write all tasks to the task file."""
        self._write("abriendo archivo...\n")
        try:
            save_tasks(self.tasks, self.path)
        except OSError:
            self._write("no se pudo abrir el archivo\n")
            return
        self._write("archivo guardado correctamente\n")

    def load(self) -> None:
        """Append the tasks stored in the task file."""
        self._write("cargar archivos\n")
        try:
            loaded = load_tasks(self.path)
        except OSError:
            self._write("el archivo no se abrio correctamente \n")
            return
        self.tasks.extend(loaded)
        self._write(f"Tareas cargadas exitosamente desde '{self.path.name}'.\n")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu on standard input and output."""
    parser = argparse.ArgumentParser(prog="tareas", description="Interactive task list.")
    parser.add_argument("--file", default=DEFAULT_PATH, help="task file to save and load")
    args = parser.parse_args(argv)
    menu = TaskMenu(sys.stdin, sys.stdout, args.file)
    try:
        menu.run()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())