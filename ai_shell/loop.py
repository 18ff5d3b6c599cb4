import signal

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from .ai import Assistant, Classification
from .shell import CommandOutcome, CommandRunner, first_token, is_resolvable

try:
    # Line editing for the prompt where the platform provides it.
    import readline  # noqa: F401
except ImportError:
    pass


PROMPT = "[green]ai-shell>[/green] "
EXIT_WORDS = {"exit", "quit"}
INVALID_COMMAND_CONTEXT = "The user entered an invalid command."


class LoopState(Enum):
    IDLE = "idle"
    CLASSIFYING = "classifying"
    RESOLVING = "resolving"
    EXECUTING = "executing"
    EXITED = "exited"


@dataclass
class Turn:
    """Everything the loop learned while handling one input line."""

    raw: str
    text: str
    classification: Optional[Classification] = None
    resolvable: Optional[bool] = None
    reply: Optional[str] = None
    outcome: Optional[CommandOutcome] = None


class InteractionLoop:
    """
    The read-eval-print loop of the shell.

    Each line is classified by the assistant, then either executed (when it is
    a command whose first word resolves to an executable), or answered by the
    assistant. Lines are handled strictly one at a time.
    """

    def __init__(
        self,
        assistant: Assistant,
        runner: Optional[CommandRunner] = None,
        console: Optional[Console] = None,
        resolver: Callable[[str], bool] = is_resolvable,
    ):
        self.assistant = assistant
        self.runner = runner if runner is not None else CommandRunner()
        self.console = console if console is not None else Console()
        self.resolver = resolver
        self.state = LoopState.IDLE
        self.last_turn: Optional[Turn] = None

    def run(self) -> int:
        """Runs the loop until the user leaves. Returns the process exit status."""
        previous_handler = signal.signal(signal.SIGINT, self._handle_interrupt)
        try:
            self._print_banner()
            while self.state is not LoopState.EXITED:
                try:
                    line = self.console.input(PROMPT)
                except EOFError:
                    self.console.print()
                    self._exit()
                    break
                self.handle_line(line)
        finally:
            signal.signal(signal.SIGINT, previous_handler)
        return 0

    def handle_line(self, line: str) -> Turn:
        turn = Turn(raw=line, text=line.strip())
        self.last_turn = turn

        if turn.text.lower() in EXIT_WORDS:
            self._exit()
            return turn

        if not turn.text:
            return turn

        self.state = LoopState.CLASSIFYING
        result = self.assistant.classify(turn.text)
        # A failed request falls back to the assistant rather than the shell.
        turn.classification = result.value if result.ok else Classification.NATURAL

        if turn.classification is Classification.NATURAL:
            self.console.print("[cyan]🤖 AI:[/cyan] [dim]Thinking...[/dim]")
            turn.reply = self._ask(turn.text)
        else:
            self._dispatch_command(turn)

        self.state = LoopState.IDLE
        return turn

    def _dispatch_command(self, turn: Turn):
        self.state = LoopState.RESOLVING
        turn.resolvable = self.resolver(first_token(turn.text))

        if turn.resolvable:
            self.state = LoopState.EXECUTING
            turn.outcome = self.runner.execute(turn.text)
            if not turn.outcome.completed:
                self.console.print(
                    f"[red]Error executing command: {escape(turn.outcome.error)}[/red]"
                )
            return

        self.console.print("[yellow]⚠️  Command not found or invalid syntax[/yellow]")
        turn.reply = self._ask(turn.text, INVALID_COMMAND_CONTEXT)

    def _ask(self, text: str, context: str = "") -> Optional[str]:
        result = self.assistant.ask(text, context)
        # Failures are already logged by the assistant.
        if not result.ok or not result.value:
            return None

        # The reply is printed verbatim: no markup, emoji codes or Markdown.
        self.console.print(Text.assemble(("🤖 AI: ", "cyan"), result.value), soft_wrap=True)
        return result.value

    def _handle_interrupt(self, signum, frame):
        # While a command runs, the child receives Ctrl+C from the terminal itself.
        if self.runner.is_running():
            return

        self.console.print()
        self._exit()
        raise SystemExit(0)

    def _exit(self):
        self.console.print("[yellow]Goodbye![/yellow]")
        self.state = LoopState.EXITED

    def _print_banner(self):
        self.console.print("[blue]Welcome to AI Shell! 🚀[/blue]")
        self.console.print("[dim]Type commands or ask questions in natural language.[/dim]")
        self.console.print('[dim]Type "exit" or Ctrl+C to quit.[/dim]\n')
