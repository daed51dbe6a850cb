"""
cli.py - command line front end for the AVL autocompleter
Features:
- One-shot mode (--query): load the word list, print prefix matches then
  spelling suggestions, one word per line
- Interactive mode: prompt loop with slash commands, results in Rich tables
- Word list errors are reported, never raised as tracebacks
- Timing of loads/queries recorded through the application Log
"""

import argparse
import logging
import shlex
import sys
import time
from typing import List, Optional, TextIO

# ui styling with Rich
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from avl_autocompleter.autocompleter import AutoCompleter
from avl_autocompleter.utils.config_manager import Config
from avl_autocompleter.utils.logger_utils import Log
from avl_autocompleter.utils.wordlist_loader import WordListError

BANNER = "AVL Autocompleter (type /help for cmds)"

HELP = """\
/prefix <p>         words starting with <p>
/fuzzy <w>          spelling suggestions for <w>
/find <w>           exact lookup
/words              every stored word, in order
/stats              tree statistics
/load <path>        add the words from another list
/config [key val]   show or change settings
/quit               exit
anything else       prefix matches and spelling suggestions"""


class CLI:
    """Command-line interface: owns the AutoCompleter, renders its results."""

    def __init__(self, completer: AutoCompleter, cfg: Config, log: Log,
                 console: Optional[Console] = None, stream: Optional[TextIO] = None):
        self.completer = completer
        self.cfg = cfg
        self.log = log
        self.console = console or Console()
        # stream=None reads stdin through input()
        self.stream = stream
        self.running = True

    # LOADING ------------------------------------------------------------------
    def load(self, path: str) -> bool:
        """Load a word list. Reports and logs failures, returns False on error."""
        try:
            with self.log.time_block(f"load {path}"):
                added = self.completer.load(path)
        except WordListError as e:
            self.log.error(str(e))
            self.console.print(f"[red]{escape(str(e))}[/red]")
            return False
        self.console.print(f"[dim]{added} words loaded from {escape(str(path))}[/dim]")
        return True

    # ONE-SHOT -------------------------------------------------------------
    def run_query(self, query: str):
        """Print both result lists the plain way, one word per line."""
        self.console.print("Words suggested based on prefix:")
        for w in self.completer.suggest(query):
            self.console.print(w, markup=False, highlight=False)

        self.console.print("Misspelled word suggestions:")
        for w in self.completer.spelling(query):
            self.console.print(w, markup=False, highlight=False)

    # INTERACTIVE ------------------------------------------------------------
    def run(self):
        """
        Main interactive loop:
        - Prompts the user for input.
        - Handles slash commands.
        - Shows prefix matches and spelling suggestions for anything else.
        """
        self.console.rule(f"[bold magenta]{BANNER}[/bold magenta]")
        while self.running:
            try:
                line = self._read()
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break
            if not line:
                continue
            if line.startswith("/"):
                self.cmd(line)
            else:
                self._show_both(line)

    def _read(self) -> str:
        line = self.console.input("[green]>>[/green] ", stream=self.stream)
        if self.stream is not None and line == "":
            raise EOFError
        return line.strip()

    def cmd(self, line: str):
        try:
            p = shlex.split(line)
        except ValueError as e:
            self.console.print(f"[red]bad command:[/red] {escape(str(e))}")
            return
        if not p:
            return
        c = p[0].lower()

        if c in ("/q", "/quit", "/exit"):
            self._exit()
        elif c == "/help":
            self.console.print(Panel(HELP, title="Commands", border_style="cyan"))
        elif c == "/prefix" and len(p) > 1:
            self._show("Prefix matches", self._timed("prefix", self.completer.suggest, p[1]))
        elif c == "/fuzzy" and len(p) > 1:
            self._show("Spelling suggestions", self._timed("fuzzy", self.completer.spelling, p[1]))
        elif c == "/find" and len(p) > 1:
            if self.completer.lookup(p[1]):
                self.console.print(f"[green]found:[/green] {escape(p[1])}")
            else:
                self.console.print(f"[yellow]not found:[/yellow] {escape(p[1])}")
        elif c == "/words":
            self._show("Words", self.completer.words())
        elif c == "/stats":
            self._show_stats()
        elif c == "/load" and len(p) > 1:
            self.load(p[1])
        elif c == "/config":
            self._config(p[1:])
        else:
            self.console.print(f"[red]Unknown command:[/red] {escape(line)}")

    # DISPLAY -------------------------------------------------------------------
    def _timed(self, label: str, fn, arg: str) -> List[str]:
        t0 = time.perf_counter()
        out = fn(arg)
        self.log.metric(f"{label} '{arg}'", round((time.perf_counter() - t0) * 1000, 3), "ms")
        return out

    def _show_both(self, text: str):
        self._show("Prefix matches", self._timed("prefix", self.completer.suggest, text))
        self._show("Spelling suggestions", self._timed("fuzzy", self.completer.spelling, text))

    def _show(self, title: str, words: List[str]):
        if not words:
            self.console.print(f"[dim]{title}: (none)[/dim]")
            return
        table = Table(title=title, box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        for i, w in enumerate(words, 1):
            table.add_row(str(i), escape(w))
        self.console.print(table)

    def _show_stats(self):
        t = Table(title="Tree", box=box.MINIMAL)
        t.add_column("Metric", style="cyan")
        t.add_column("Value", style="white")
        for k, v in self.completer.stats().items():
            t.add_row(k, str(v))
        self.console.print(t)

    def _config(self, args: List[str]):
        if not args:
            for row in self.cfg.show():
                self.console.print(row, markup=False, highlight=False)
        elif len(args) == 2:
            try:
                self.cfg.set(args[0], args[1])
            except KeyError:
                self.console.print(f"[red]No such option:[/red] {escape(args[0])}")
            except ValueError as e:
                self.console.print(f"[red]bad value:[/red] {escape(str(e))}")
            else:
                self.console.print(f"{escape(args[0])} = {escape(str(self.cfg[args[0]]))}")
        else:
            self.console.print("usage: /config [key val]")

    def _exit(self):
        self.console.print("bye.")
        self.running = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="avl-autocompleter",
        description="Prefix completion and spelling suggestions over a word list.",
    )
    parser.add_argument("--words", help="word list, one word per line (default: config 'wordlist')")
    parser.add_argument("--config", default="config.json", help="JSON config file")
    parser.add_argument("--query", help="run one query and exit")
    parser.add_argument("--limit", type=int, help="max results per query (0 = all)")
    parser.add_argument("--no-color", action="store_true", help="plain output")
    parser.add_argument("-v", "--verbose", action="store_true", help="echo log lines to stderr")
    return parser


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None,
         stream: Optional[TextIO] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    cfg = Config(args.config)
    log = Log(cfg["log_path"], use_color=not args.no_color, echo=args.verbose)
    if console is None:
        console = Console(no_color=args.no_color, highlight=not args.no_color)

    cli = CLI(AutoCompleter(cfg, limit=args.limit), cfg, log, console=console, stream=stream)
    ok = cli.load(args.words or cfg["wordlist"])

    if args.query is not None:
        if not ok:
            return 1
        cli.run_query(args.query)
        return 0

    cli.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
