# src/taskbot/cli/commands.py

"""
Command parsing and dispatch.

parse_command(line) is a pure function from one input line to a Command (or a
ChatError). The keyword is looked up in a static registry of parser functions;
each parser validates its own arguments. Nothing touches the task list until
Command.execute() runs, and index-taking commands validate the index before
mutating anything.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from ..core.ports import Ui
from ..errors import InvalidArgumentError, MissingArgumentError, UnknownCommandError
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task, TaskKind, create_task

logger = logging.getLogger(__name__)


class Command:
    """A validated user request. execute() returns False to end the session."""

    def execute(self, tasks: TaskList, ui: Ui) -> bool:
        raise NotImplementedError


def _count_line(tasks: TaskList) -> str:
    n = len(tasks)
    return f"Now you have {n} {'task' if n == 1 else 'tasks'} in the list."


@dataclass(frozen=True, slots=True)
class ListCommand(Command):
    def execute(self, tasks: TaskList, ui: Ui) -> bool:
        if not len(tasks):
            ui.show("Your list is empty.")
            return True
        ui.show(
            "Here are the tasks in your list:",
            *(f"{i}. {t.to_display()}" for i, t in enumerate(tasks, start=1)),
        )
        return True


@dataclass(frozen=True, slots=True)
class AddCommand(Command):
    task: Task

    def execute(self, tasks: TaskList, ui: Ui) -> bool:
        tasks.add(self.task)
        logger.debug("Task added kind=%s description=%r", self.task.kind, self.task.description)
        ui.show("Got it. I've added this task:", f"  {self.task.to_display()}", _count_line(tasks))
        return True


@dataclass(frozen=True, slots=True)
class MarkCommand(Command):
    index: int
    done: bool

    def execute(self, tasks: TaskList, ui: Ui) -> bool:
        task = tasks.get(self.index)
        if self.done:
            task.mark()
            ui.show("Nice! I've marked this task as done:", f"  {task.to_display()}")
        else:
            task.unmark()
            ui.show("OK, I've marked this task as not done yet:", f"  {task.to_display()}")
        return True


@dataclass(frozen=True, slots=True)
class DeleteCommand(Command):
    index: int

    def execute(self, tasks: TaskList, ui: Ui) -> bool:
        removed = tasks.remove(self.index)
        ui.show("Noted. I've removed this task:", f"  {removed.to_display()}", _count_line(tasks))
        return True


@dataclass(frozen=True, slots=True)
class FindCommand(Command):
    keyword: str

    def execute(self, tasks: TaskList, ui: Ui) -> bool:
        matches = tasks.find(self.keyword)
        if not matches:
            ui.show(f"No tasks match '{self.keyword}'.")
            return True
        ui.show(
            "Here are the matching tasks in your list:",
            *(f"{i}. {t.to_display()}" for i, t in matches),
        )
        return True


@dataclass(frozen=True, slots=True)
class HelpCommand(Command):
    text: str

    def execute(self, tasks: TaskList, ui: Ui) -> bool:
        ui.show(self.text)
        return True


@dataclass(frozen=True, slots=True)
class ByeCommand(Command):
    def execute(self, tasks: TaskList, ui: Ui) -> bool:
        return False


# ---- argument helpers ----

def _split_on(marker: str, text: str, usage: str) -> tuple[str, str]:
    # "/by" only counts as a marker when it is a whole whitespace-separated word.
    parts = re.split(rf"(?:^|\s)/{marker}(?:\s+|$)", text, maxsplit=1)
    if len(parts) != 2:
        raise MissingArgumentError(f"Missing '/{marker}'. Usage: {usage}")
    return parts[0].strip(), parts[1].strip()


def _require(value: str, what: str, usage: str) -> str:
    if not value:
        raise MissingArgumentError(f"The {what} cannot be empty. Usage: {usage}")
    return value


def _no_args(name: str, args: str) -> None:
    if args:
        raise InvalidArgumentError(f"'{name}' takes no arguments.")


def _parse_index(name: str, args: str) -> int:
    usage = f"{name} N"
    tokens = args.split()
    if not tokens:
        raise MissingArgumentError(f"Which task? Usage: {usage}")
    if len(tokens) > 1:
        raise InvalidArgumentError(f"'{name}' takes exactly one task number. Usage: {usage}")
    try:
        return int(tokens[0])
    except ValueError:
        raise InvalidArgumentError(f"'{tokens[0]}' is not a task number. Usage: {usage}") from None


# ---- parsers (one per keyword) ----

CommandParser = Callable[[str], Command]

TODO_USAGE = "todo DESCRIPTION"
DEADLINE_USAGE = "deadline DESCRIPTION /by WHEN"
EVENT_USAGE = "event DESCRIPTION /from START /to END"


def parse_list(args: str) -> Command:
    _no_args("list", args)
    return ListCommand()


def parse_todo(args: str) -> Command:
    description = _require(args.strip(), "description of a todo", TODO_USAGE)
    return AddCommand(create_task(TaskKind.TODO, description))


def parse_deadline(args: str) -> Command:
    description, when = _split_on("by", args, DEADLINE_USAGE)
    _require(description, "description of a deadline", DEADLINE_USAGE)
    _require(when, "'/by' date", DEADLINE_USAGE)
    return AddCommand(create_task(TaskKind.DEADLINE, description, when))


def parse_event(args: str) -> Command:
    description, span = _split_on("from", args, EVENT_USAGE)
    start, end = _split_on("to", span, EVENT_USAGE)
    _require(description, "description of an event", EVENT_USAGE)
    _require(start, "'/from' date", EVENT_USAGE)
    _require(end, "'/to' date", EVENT_USAGE)
    return AddCommand(create_task(TaskKind.EVENT, description, start, end))


def parse_mark(args: str) -> Command:
    return MarkCommand(index=_parse_index("mark", args), done=True)


def parse_unmark(args: str) -> Command:
    return MarkCommand(index=_parse_index("unmark", args), done=False)


def parse_delete(args: str) -> Command:
    return DeleteCommand(index=_parse_index("delete", args))


def parse_find(args: str) -> Command:
    return FindCommand(keyword=_require(args.strip(), "keyword", "find KEYWORD"))


def parse_bye(args: str) -> Command:
    _no_args("bye", args)
    return ByeCommand()


def parse_help(args: str) -> Command:
    _no_args("help", args)
    return HelpCommand(text=registry.build_help())


class CommandRegistry:
    """Static keyword -> parser table (list, todo, deadline, ...)."""

    def __init__(self) -> None:
        self._parsers: dict[str, CommandParser] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        parser: CommandParser,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._parsers[key] = parser
        self._help[key] = help_text
        for alias in aliases:
            self._parsers[alias.lower()] = parser

    def parse(self, line: str) -> Command:
        """
        Resolve one input line to a Command.
        Raises a ChatError subclass if the line cannot be turned into one.
        """
        parts = line.strip().split(maxsplit=1)
        if not parts:
            raise MissingArgumentError("Empty command. Type 'help' to see what I can do.")

        keyword = parts[0].lower()
        args = parts[1].strip() if len(parts) > 1 else ""

        parser = self._parsers.get(keyword)
        if parser is None:
            raise UnknownCommandError(parts[0])
        return parser(args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_command(line: str) -> Command:
    return registry.parse(line)


registry.register("list", parse_list, help_text="Show all tasks.", aliases=["ls"])
registry.register("todo", parse_todo, help_text=f"Add a plain task: {TODO_USAGE}")
registry.register("deadline", parse_deadline, help_text=f"Add a task with a due date: {DEADLINE_USAGE}")
registry.register("event", parse_event, help_text=f"Add an event: {EVENT_USAGE}")
registry.register("mark", parse_mark, help_text="Mark task N as done: mark N")
registry.register("unmark", parse_unmark, help_text="Mark task N as not done: unmark N")
registry.register("delete", parse_delete, help_text="Remove task N: delete N", aliases=["rm", "del"])
registry.register("find", parse_find, help_text="List tasks whose description contains KEYWORD (case-sensitive).")
registry.register("help", parse_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("bye", parse_bye, help_text="Save and quit.", aliases=["exit", "quit"])
