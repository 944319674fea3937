"""Command pattern with an undo history vs. a document that snapshots itself."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bench_harness import BenchmarkSuite, SuiteContext

DEFAULT_ITERATIONS = 100
TEXT_TO_ADD = "Hello, World! "


class Document:
    def __init__(self, content: str = ""):
        self.content = content


class Command(ABC):
    @abstractmethod
    def execute(self) -> None: ...

    @abstractmethod
    def undo(self) -> None: ...


class AddTextCommand(Command):
    def __init__(self, document: Document, text: str):
        self.document = document
        self.text = text
        self.previous_content = document.content

    def execute(self) -> None:
        self.document.content = self.document.content + self.text

    def undo(self) -> None:
        self.document.content = self.previous_content


class DeleteTextCommand(Command):
    def __init__(self, document: Document, start: int, length: int):
        self.document = document
        self.start = start
        self.length = length
        self.previous_content = document.content

    def execute(self) -> None:
        content = self.document.content
        self.document.content = content[: self.start] + content[self.start + self.length :]

    def undo(self) -> None:
        self.document.content = self.previous_content


class CommandInvoker:
    def __init__(self):
        self.history: list[Command] = []

    def execute_command(self, command: Command) -> None:
        command.execute()
        self.history.append(command)

    def undo(self) -> None:
        """Undo the latest command; a no-op when the history is empty."""
        if self.history:
            self.history.pop().undo()


class SimpleDocument:
    """Document keeping its own content snapshots for undo."""

    def __init__(self):
        self.content = ""
        self.history: list[str] = []

    def add_text(self, text: str) -> None:
        self.history.append(self.content)
        self.content += text

    def delete_text(self, start: int, length: int) -> None:
        self.history.append(self.content)
        self.content = self.content[:start] + self.content[start + length :]

    def undo(self) -> None:
        if self.history:
            self.content = self.history.pop()


class CommandSuite(BenchmarkSuite):
    name = "command"
    description = "Command Pattern Benchmark"

    def __init__(self, iterations: int = DEFAULT_ITERATIONS):
        self.iterations = iterations

    def setup(self, context: SuiteContext) -> None:
        self.document = Document()
        self.invoker = CommandInvoker()
        self.simple_document = SimpleDocument()

    def execute(self, context: SuiteContext) -> None:
        document, invoker = self.document, self.invoker
        context.measure(
            "Add Text (Command Pattern)",
            self.iterations,
            lambda: invoker.execute_command(AddTextCommand(document, TEXT_TO_ADD)),
            group="Add Text",
        )
        context.measure(
            "Delete Text (Command Pattern)",
            self.iterations,
            lambda: invoker.execute_command(DeleteTextCommand(document, 0, 5)),
            group="Delete Text",
        )
        context.measure(
            "Undo Operations (Command Pattern)",
            self.iterations,
            invoker.undo,
            group="Undo Operations",
        )

        simple = self.simple_document
        context.measure(
            "Add Text (Non-Command Pattern)",
            self.iterations,
            lambda: simple.add_text(TEXT_TO_ADD),
            group="Add Text",
        )
        context.measure(
            "Delete Text (Non-Command Pattern)",
            self.iterations,
            lambda: simple.delete_text(0, 5),
            group="Delete Text",
        )
        context.measure(
            "Undo Operations (Non-Command Pattern)",
            self.iterations,
            simple.undo,
            group="Undo Operations",
        )
