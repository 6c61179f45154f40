"""Task records, their text rendering and the comma-separated file format."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Iterable

PERSONAL = "Personal"
ACADEMIC = "Academica"
WORK = "Laboral"

_SEPARATOR = "<<<<<<<<<<<<<<<<>>>>>>>>>>>>>>>>>>>>>>>>>>"
_FIELD_COUNT = 10
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Task:
    """A task with a title, a type label, a deadline, a state and a priority."""

    title: str
    description: str
    deadline: str
    completed: bool
    priority: int

    _completed_label: ClassVar[str] = "completada"

    def complete(self) -> None:
        """Mark the task as completed."""
        self.completed = True

    def render(self) -> str:
        """Return the fields shared by every task, one per line."""
        state = self._completed_label if self.completed else "Pendiente"
        return (
            f"{_SEPARATOR}\n"
            f"Descripcion: {self.description}\n"
            f"Titulo: {self.title}\n"
            f"Fecha limite: {self.deadline}\n"
            f"Estado: {state}\n"
            f"Prioridad: {self.priority}\n"
        )

    def serialize(self) -> str:
        """Return the shared fields as one comma-separated record."""
        return ",".join(
            (
                self.description,
                self.title,
                self.deadline,
                "1" if self.completed else "0",
                str(self.priority),
            )
        )


@dataclass
class PersonalTask(Task):
    """A personal task filed under a category."""

    category: str

    _completed_label: ClassVar[str] = " completada"

    def render(self) -> str:
        return super().render() + f"categoria: {self.category}\n"

    def serialize(self) -> str:
        return f"{super().serialize()},{self.category}"


@dataclass
class AcademicTask(Task):
    """A task for a school subject, such as an exam or a workshop."""

    subject: str
    kind: str

    def render(self) -> str:
        return super().render() + f"Materia: {self.subject}\ntipo: {self.kind}\n"

    def serialize(self) -> str:
        return f"{super().serialize()},{self.subject},{self.kind}"


@dataclass
class WorkTask(Task):
    """A task belonging to a project with an engineer in charge."""

    project: str
    manager: str

    def render(self) -> str:
        return (
            super().render()
            + f"Proyecto: {self.project}\nIngeniero a cargo: {self.manager}\n"
        )

    def serialize(self) -> str:
        return f"{super().serialize()},{self.project},{self.manager}"


def _parse_priority(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid priority: {text!r}")
    return int(match.group(1))


def parse_task(line: str) -> Task | None:
    """Build a task from one stored record.

    Fields are read in fixed columns: the category from column 6, the subject
    and kind from columns 7 and 8, the project and manager from columns 9 and
    10. Records of an unknown type give None; a priority that does not start
    with an integer raises ValueError.
    """
    fields = line.split(",")[:_FIELD_COUNT]
    fields += [""] * (_FIELD_COUNT - len(fields))
    (description, title, deadline, state, priority_text,
     category, subject, kind, project, manager) = fields

    completed = state == "1"
    priority = _parse_priority(priority_text)

    if description == PERSONAL:
        return PersonalTask(title, description, deadline, completed, priority, category)
    if description == ACADEMIC:
        return AcademicTask(title, description, deadline, completed, priority, subject, kind)
    if description == WORK:
        return WorkTask(title, description, deadline, completed, priority, project, manager)
    return None


def save_tasks(tasks: Iterable[Task], path: str | Path) -> None:
    """Write one serialized record per line to ``path``, replacing it."""
    with open(path, "w", encoding="utf-8") as handle:
        for task in tasks:
            handle.write(task.serialize() + "\n")


def load_tasks(path: str | Path) -> list[Task]:
    """Read every recognised record from ``path``."""
    with open(path, encoding="utf-8") as handle:
        parsed = (parse_task(line.rstrip("\n")) for line in handle)
        return [task for task in parsed if task is not None]