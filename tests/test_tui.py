# tests/test_tui.py - suggestion panel formatting and the running app (via run_test)
import asyncio

from textual.widgets import Input

from avl_autocompleter.autocompleter import AutoCompleter
from avl_autocompleter.tui_app import SuggestionPanel, TUIAutocompleter, format_suggestions


def test_empty_panel():
    out = format_suggestions([], "Completions")
    assert "Completions" in out
    assert "No suggestions" in out


def test_numbered_words():
    out = format_suggestions(["apple", "apply"], "Completions", color="green")
    lines = out.splitlines()
    assert lines[0] == "[b]Completions[/b]"
    assert lines[1] == "[b]1[/b] • [green]apple[/green]"
    assert lines[2] == "[b]2[/b] • [green]apply[/green]"


def test_overflow_line():
    words = [f"w{i}" for i in range(15)]
    out = format_suggestions(words, "Did you mean", limit=10)
    assert out.splitlines()[-1] == "[dim]+5 more[/dim]"
    assert "w10" not in out


def test_markup_in_words_is_escaped():
    out = format_suggestions(["[bold]"], "Completions")
    assert "\\[bold]" in out


# running app ----------------------------------------------------------------


def _words(tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("apple\napplication\nhello\nhelp\nkitten\n", encoding="utf-8")
    return str(p)


def test_typing_refreshes_both_panels(tmp_path):
    async def scenario():
        app = TUIAutocompleter(AutoCompleter(), wordlist=_words(tmp_path))
        async with app.run_test() as pilot:
            assert app.status_text == "5 words loaded"
            await pilot.press(*"hel")
            await pilot.pause()
            assert app.prefix_hits == ["hello", "help"]
            assert app.spelling_hits == ["help"]
            assert app.query_one("#prefix", SuggestionPanel).words == ["hello", "help"]
            assert app.query_one("#spelling", SuggestionPanel).words == ["help"]

    asyncio.run(scenario())


def test_tab_accepts_top_completion(tmp_path):
    async def scenario():
        app = TUIAutocompleter(AutoCompleter(), wordlist=_words(tmp_path))
        async with app.run_test() as pilot:
            await pilot.press(*"app")
            await pilot.pause()
            await pilot.press("tab")
            await pilot.pause()
            assert app.query_one(Input).value == "apple"
            assert app.prefix_hits == ["apple"]

    asyncio.run(scenario())


def test_tab_without_completions_keeps_input(tmp_path):
    async def scenario():
        app = TUIAutocompleter(AutoCompleter(), wordlist=_words(tmp_path))
        async with app.run_test() as pilot:
            await pilot.press(*"zz")
            await pilot.pause()
            await pilot.press("tab")
            await pilot.pause()
            assert app.query_one(Input).value == "zz"

    asyncio.run(scenario())


def test_missing_word_list_shown_in_status(tmp_path):
    async def scenario():
        app = TUIAutocompleter(AutoCompleter(), wordlist=str(tmp_path / "nope.txt"))
        async with app.run_test() as pilot:
            await pilot.pause()
            assert "not found" in app.status_text
            assert app.query_one("#prefix", SuggestionPanel).words == []
            # still usable, just empty
            await pilot.press("a")
            await pilot.pause()
            assert app.prefix_hits == []

    asyncio.run(scenario())
