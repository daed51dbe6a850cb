# tui_app.py — AVL Autocompleter TUI Application
# -------------------------------------------------------
# Text based terminal UI over the AutoCompleter.
# Features:
#  - Live prefix completions and spelling suggestions as you type
#  - Accept the top completion with TAB
#  - Real-time latency readout
# -------------------------------------------------------

from __future__ import annotations
import sys
import time
from typing import List, Optional

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.reactive import reactive
from textual.widgets import Footer, Header, Input, Static

from avl_autocompleter.autocompleter import AutoCompleter
from avl_autocompleter.utils.config_manager import Config
from avl_autocompleter.utils.wordlist_loader import WordListError

MAX_SHOWN = 10


def format_suggestions(words: List[str], title: str, color: str = "cyan",
                       limit: int = MAX_SHOWN) -> str:
    """
    Render a suggestion list as Rich markup:
     - title line
     - numbered words, up to `limit`
     - a '+N more' line if some were cut
    """
    if not words:
        return f"[b]{title}[/b]\n[dim]No suggestions[/dim]"
    lines = [f"[b]{title}[/b]"]
    for i, w in enumerate(words[:limit], 1):
        lines.append(f"[b]{i}[/b] • [{color}]{escape(w)}[/{color}]")
    if len(words) > limit:
        lines.append(f"[dim]+{len(words) - limit} more[/dim]")
    return "\n".join(lines)


class SuggestionPanel(Static):
    """One column of suggestions (prefix or spelling)."""
    def __init__(self, title: str, color: str, **kwargs):
        super().__init__(**kwargs)
        self.heading = title
        self.accent = color
        self.words: List[str] = []

    def show(self, words: List[str]):
        self.words = list(words)
        self.update(format_suggestions(words, self.heading, self.accent))


class TypingLatency(Static):
    """Bottom-left readout showing how long the last lookup took."""
    def set_latency(self, seconds: float):
        self.update(f"[dim]Latency:[/dim] {seconds * 1000:.2f}ms")


# Main Application -----------------------------------------------------------------
class TUIAutocompleter(App):
    """
    The main Textual app.
    UI events -> AutoCompleter queries -> reactive state -> panel updates.
    """
    CSS = """
    #panels { height: 1fr; }
    #prefix, #spelling { width: 1fr; padding: 1 2; }
    #bottom { height: 1; }
    #status { padding-left: 2; }
    """

    BINDINGS = [
        Binding("tab", "accept_top", "Accept Top Completion", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    # panels are filled in on_mount, watchers only react to typing
    prefix_hits = reactive(list, init=False)
    spelling_hits = reactive(list, init=False)
    latency = reactive(0.0, init=False)

    def __init__(self, completer: Optional[AutoCompleter] = None, wordlist: Optional[str] = None):
        super().__init__()
        self.cfg = None
        if completer is None:
            self.cfg = Config()
            completer = AutoCompleter(self.cfg)
        self.completer = completer
        self.wordlist = wordlist or (self.cfg["wordlist"] if self.cfg else None)
        self.status_text = ""

    # UI --------------------------------------------------------------------
    def compose(self) -> ComposeResult:
        yield Header()
        yield Input(placeholder="Start typing…", id="text_input")
        with Horizontal(id="panels"):
            yield SuggestionPanel("Completions", "green", id="prefix")
            yield SuggestionPanel("Did you mean", "yellow", id="spelling")
        with Horizontal(id="bottom"):
            yield TypingLatency(id="latency")
            yield Static(id="status")
        yield Footer()

    def on_mount(self):
        """Load the word list once the UI is up, report problems in the status bar."""
        self.query_one(Input).focus()
        self.query_one("#prefix", SuggestionPanel).show([])
        self.query_one("#spelling", SuggestionPanel).show([])
        if not self.wordlist:
            return
        try:
            added = self.completer.load(self.wordlist)
        except WordListError as e:
            self.set_status(str(e), "red")
            return
        self.set_status(f"{added} words loaded", "green")

    def set_status(self, msg: str, color: str):
        self.status_text = msg
        self.query_one("#status", Static).update(f"[{color}]{escape(msg)}[/{color}]")

    # Input has changed so update both panels
    def on_input_changed(self, event: Input.Changed) -> None:
        fragment = event.value.strip()
        if not fragment:
            self.prefix_hits = []
            self.spelling_hits = []
            return

        start = time.perf_counter()
        self.prefix_hits = self.completer.suggest(fragment)
        self.spelling_hits = self.completer.spelling(fragment)
        self.latency = time.perf_counter() - start

    # Reactive state (watcher functions) ---------------------------------------
    def watch_prefix_hits(self, words):
        self.query_one("#prefix", SuggestionPanel).show(words)

    def watch_spelling_hits(self, words):
        self.query_one("#spelling", SuggestionPanel).show(words)

    def watch_latency(self, latency):
        self.query_one(TypingLatency).set_latency(latency)

    # Actions ----------------------------------------------------------------------
    def action_accept_top(self):
        """TAB = replace the input with the top completion."""
        if not self.prefix_hits:
            return
        self.query_one(Input).value = self.prefix_hits[0]


def main():
    wordlist = sys.argv[1] if len(sys.argv) > 1 else None
    TUIAutocompleter(wordlist=wordlist).run()


if __name__ == "__main__":
    main()
