"""Terminal reader: one chunk at a time with bionic emphasis."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional

from rich.text import Text
from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical
from textual.message import Message
from textual.widgets import Footer, Header, Label, ProgressBar, Rule, Static

from focusreader.bionic import bionic_segments
from focusreader.errors import ReaderError
from focusreader.models import (
    BionicIntensity,
    Chunk,
    ChunkSize,
    ReaderSettings,
    ReadingDocument,
)
from focusreader.pipeline import load_document, rechunk


def _next_member(member, enum_cls):
    members = list(enum_cls)
    return members[(members.index(member) + 1) % len(members)]


def render_chunk(content: str, intensity: Optional[BionicIntensity]) -> Text:
    """Rich text for a chunk, bolding word prefixes when intensity is set."""
    if intensity is None:
        return Text(content)
    text = Text()
    for segment in bionic_segments(content, intensity):
        text.append(segment.text, style="bold" if segment.kind == "bold" else None)
    return text


@dataclass(frozen=True)
class ReaderState:
    """Reading position over a document."""

    document: Optional[ReadingDocument] = None
    index: int = 0
    settings: ReaderSettings = field(default_factory=ReaderSettings)

    @property
    def total(self) -> int:
        return len(self.document.chunks) if self.document else 0

    @property
    def current(self) -> Optional[Chunk]:
        if not self.total:
            return None
        return self.document.chunks[self.index]

    @property
    def progress(self) -> float:
        if not self.total:
            return 0.0
        return (self.index + 1) / self.total

    def go_to(self, index: int) -> "ReaderState":
        if not self.total:
            return self
        return replace(self, index=max(0, min(index, self.total - 1)))

    def next(self) -> "ReaderState":
        return self.go_to(self.index + 1)

    def previous(self) -> "ReaderState":
        return self.go_to(self.index - 1)

    def with_settings(self, settings: ReaderSettings) -> "ReaderState":
        """Apply new settings, keeping the relative reading position."""
        if self.document is None:
            return replace(self, settings=settings)
        document = rechunk(self.document, settings)
        state = replace(self, document=document, settings=settings)
        if settings.chunk_size == self.document.settings.chunk_size:
            # Same chunks, only the bionic content changed
            return state
        if not self.total:
            return state.go_to(0)
        return state.go_to(self.index * state.total // self.total)

    def toggle_bionic(self) -> "ReaderState":
        return self.with_settings(
            replace(self.settings, bionic_enabled=not self.settings.bionic_enabled)
        )

    def cycle_intensity(self) -> "ReaderState":
        intensity = _next_member(self.settings.bionic_intensity, BionicIntensity)
        return self.with_settings(replace(self.settings, bionic_intensity=intensity))

    def cycle_chunk_size(self) -> "ReaderState":
        size = _next_member(self.settings.chunk_size, ChunkSize)
        return self.with_settings(replace(self.settings, chunk_size=size))


class SettingsPanel(Static):
    """Current settings and position."""

    def compose(self) -> ComposeResult:
        yield Static(id="settings-content")

    def on_mount(self) -> None:
        self.update_display(ReaderState())

    def update_display(self, state: ReaderState) -> None:
        settings = state.settings
        bionic = (
            f"[green]{settings.bionic_intensity.value}[/]"
            if settings.bionic_enabled
            else "[dim]off[/]"
        )
        position = f"{state.index + 1} / {state.total}" if state.total else "--"
        self.query_one("#settings-content", Static).update(f"""[b]CHUNK SIZE[/b]
  [cyan]{settings.chunk_size.value}[/]

[b]BIONIC[/b]
  {bionic}

[b]POSITION[/b]
  [magenta]{position}[/]""")


class ChunkView(Static):
    """The chunk being read."""

    def show(self, state: ReaderState) -> None:
        chunk = state.current
        if chunk is None:
            self.update("[dim]Nothing to read.[/]")
            return
        self.update(render_chunk(chunk.content, state.settings.intensity))


class FocusReader(App):
    """The FocusReader terminal app."""

    # Messages for thread-safe communication
    class DocumentLoaded(Message):
        def __init__(self, document: ReadingDocument) -> None:
            self.document = document
            super().__init__()

    class LoadFailed(Message):
        def __init__(self, message: str) -> None:
            self.message = message
            super().__init__()

    CSS = """
    Screen {
        background: $surface;
    }

    Header {
        background: $primary-darken-3;
        color: $text;
    }

    Footer {
        background: $primary-darken-3;
    }

    #main-container {
        layout: horizontal;
        height: 100%;
    }

    #side-panel {
        width: 26;
        background: $surface-darken-1;
        border-right: solid $primary-darken-2;
        padding: 1;
    }

    #reading-panel {
        width: 1fr;
        padding: 1 4;
        align: center middle;
    }

    SettingsPanel {
        height: auto;
        padding: 1;
        background: $surface-darken-2;
        border: round $primary;
    }

    ChunkView {
        width: 100%;
        max-width: 72;
        height: auto;
        padding: 2;
        border: round $primary-darken-1;
    }

    #progress-bar {
        width: 100%;
        margin-top: 1;
    }

    .section-title {
        text-style: bold;
        color: $text;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        Binding("right,space,j", "next", "Next", show=True),
        Binding("left,k", "previous", "Previous", show=True),
        Binding("home", "first", "First"),
        Binding("end", "last", "Last"),
        Binding("b", "toggle_bionic", "Bionic", show=True),
        Binding("i", "cycle_intensity", "Intensity", show=True),
        Binding("s", "cycle_size", "Size", show=True),
        Binding("d", "toggle_dark", "Toggle Dark Mode"),
        Binding("q", "quit", "Quit", show=True),
    ]

    TITLE = "FocusReader"

    def __init__(self, path: Path | str, settings: Optional[ReaderSettings] = None) -> None:
        super().__init__()
        self.source_path = Path(path)
        self.reader_state = ReaderState(settings=settings or ReaderSettings())

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="main-container"):
            with Vertical(id="side-panel"):
                yield Label("SETTINGS", classes="section-title")
                yield SettingsPanel()
            with Vertical(id="reading-panel"):
                yield ChunkView("[dim]Loading...[/]", id="chunk-view")
                yield ProgressBar(id="progress-bar", show_eta=False)
                yield Rule()
        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = self.source_path.name
        self.load_source(self.reader_state.settings)

    @work(exclusive=True, thread=True)
    def load_source(self, settings: ReaderSettings) -> None:
        """Run the pipeline in a background thread."""
        try:
            document = load_document(self.source_path, settings)
        except (ReaderError, OSError) as e:
            self.post_message(self.LoadFailed(str(e)))
            return
        self.post_message(self.DocumentLoaded(document))

    def on_focus_reader_document_loaded(self, event: DocumentLoaded) -> None:
        self.sub_title = event.document.title
        self._set_state(ReaderState(document=event.document, settings=event.document.settings))

    def on_focus_reader_load_failed(self, event: LoadFailed) -> None:
        self.query_one("#chunk-view", ChunkView).update(f"[red]ERROR: {event.message}[/]")

    def _set_state(self, state: ReaderState) -> None:
        self.reader_state = state
        self.query_one("#chunk-view", ChunkView).show(state)
        self.query_one(SettingsPanel).update_display(state)
        bar = self.query_one("#progress-bar", ProgressBar)
        bar.update(total=max(state.total, 1), progress=state.index + 1 if state.total else 0)

    def action_next(self) -> None:
        self._set_state(self.reader_state.next())

    def action_previous(self) -> None:
        self._set_state(self.reader_state.previous())

    def action_first(self) -> None:
        self._set_state(self.reader_state.go_to(0))

    def action_last(self) -> None:
        self._set_state(self.reader_state.go_to(self.reader_state.total - 1))

    def action_toggle_bionic(self) -> None:
        self._set_state(self.reader_state.toggle_bionic())

    def action_cycle_intensity(self) -> None:
        self._set_state(self.reader_state.cycle_intensity())

    def action_cycle_size(self) -> None:
        self._set_state(self.reader_state.cycle_chunk_size())

    def action_toggle_dark(self) -> None:
        """Toggle dark mode."""
        self.theme = "textual-light" if self.theme == "textual-dark" else "textual-dark"


def main(path: Path | str, settings: Optional[ReaderSettings] = None) -> None:
    """Run the reader TUI on a file."""
    app = FocusReader(path, settings)
    app.run()
