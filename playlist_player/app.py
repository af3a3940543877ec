"""Tkinter GUI application: YAML playlist editor plus player."""

import logging
import tkinter as tk

from playlist_player.binding import PlayerHost, RenderDirective, Renderer
from playlist_player.document import (
    DEFAULT_DOCUMENT,
    DocumentError,
    dump_yaml,
    format_issues,
    load_yaml,
    schema_hint,
    validate_document,
)
from playlist_player.hotkeys import MediaKeys
from playlist_player.media import ClockMediaElement, ImageElement, MediaElement
from playlist_player.session import PlaybackSession
from playlist_player.store import PlaylistStore
from playlist_player.theme import (
    ACCENT,
    BG,
    BTN_PAD,
    CARD,
    EDITOR_FONT,
    EDITOR_ROWS,
    ENTRY_BG,
    ENTRY_FG,
    ERROR_RED,
    FG,
    HEADING_FONT,
    ICON_NEXT,
    ICON_PAUSE,
    ICON_PLAY,
    ICON_PREV,
    ICON_SAVE,
    LABEL_FONT,
    OK_GREEN,
    PAD,
    PLAY_GREEN,
    PLAY_GREEN_HOVER,
    SMALL_FONT,
    SMALL_PAD,
    STATUS_WRAP,
    STOP_RED,
    SUBTLE,
    TITLE_FONT,
    VIEW_REFRESH_MS,
)
from playlist_player.version import APP_NAME
from playlist_player.visibility import HIDDEN, VISIBLE, VisibilityCoordinator

log = logging.getLogger(__name__)


def _fmt_time(seconds: float) -> str:
    seconds = int(seconds)
    m, s = divmod(seconds, 60)
    h, m = divmod(m, 60)
    return f'{h}:{m:02d}:{s:02d}' if h else f'{m}:{s:02d}'


class TkHost(PlayerHost):
    """Timers on the Tk event loop; presentation delegated to the App."""

    def __init__(self, app: 'App'):
        self.app = app

    def create_element(self, item):
        if item.is_image:
            return ImageElement(item.url)
        return ClockMediaElement(item.type, self, item.url, duration=item.duration)

    def schedule(self, delay_sec, callback):
        return self.app.root.after(int(delay_sec * 1000), callback)

    def cancel(self, handle):
        self.app.root.after_cancel(handle)

    def present(self, directive, element):
        self.app.show_item(directive, element)

    def show_ended(self):
        self.app.show_ended()

    def go_back(self):
        self.app.root.after(0, self.app.close)


class App:
    def __init__(self, root, store: PlaylistStore, key: str, edit_mode: bool = True):
        self.root = root
        self.store = store
        self.key = key
        self.edit_mode = edit_mode
        root.title(f'{APP_NAME} — {key}')
        root.configure(bg=BG)
        root.minsize(480, 360)
        root.option_add('*Font', LABEL_FONT)
        root.option_add('*Background', BG)
        root.option_add('*Foreground', FG)

        self.session = PlaybackSession()
        self.renderer = Renderer(self.session, TkHost(self))
        self.visibility = VisibilityCoordinator(self.renderer)
        self.media_keys = MediaKeys(self.renderer, lambda fn: root.after(0, fn))
        self._element: MediaElement | ImageElement | None = None
        self._directive: RenderDirective | None = None

        header = tk.Frame(root, bg=BG)
        header.pack(fill='x', padx=PAD, pady=(PAD, SMALL_PAD))
        tk.Label(header, text=APP_NAME, font=TITLE_FONT, fg=ACCENT, bg=BG).pack(anchor='w')
        tk.Label(
            header, text=f'Playlist: {key}', font=SMALL_FONT, fg=SUBTLE, bg=BG
        ).pack(anchor='w')

        # ---- Editor (edit mode only) ----
        self.editor = None
        if edit_mode:
            ed_frame = tk.LabelFrame(
                root, text='  Playlist YAML  ', font=LABEL_FONT,
                fg=SUBTLE, bg=CARD, labelanchor='n'
            )
            ed_frame.pack(fill='both', expand=True, padx=PAD, pady=(0, PAD))
            self.editor = tk.Text(
                ed_frame, height=EDITOR_ROWS, font=EDITOR_FONT, bg=ENTRY_BG, fg=ENTRY_FG,
                insertbackground=FG, relief='flat', highlightthickness=0, undo=True
            )
            self.editor.pack(fill='both', expand=True, padx=PAD, pady=(SMALL_PAD, SMALL_PAD))
            ed_toolbar = tk.Frame(ed_frame, bg=CARD)
            ed_toolbar.pack(fill='x', padx=PAD, pady=(0, PAD))
            save_btn = tk.Button(
                ed_toolbar, text=ICON_SAVE, command=self.validate_and_save,
                font=LABEL_FONT, bg=PLAY_GREEN, fg=BG, activebackground=PLAY_GREEN_HOVER,
                activeforeground=BG, relief='flat', padx=BTN_PAD[0], pady=BTN_PAD[1],
                cursor='hand2'
            )
            save_btn.pack(side='left', padx=(0, 8))
            schema_btn = tk.Button(
                ed_toolbar, text='Schema', command=self._show_schema,
                font=LABEL_FONT, bg=SUBTLE, fg=FG, activebackground=ENTRY_BG,
                activeforeground=FG, relief='flat', padx=BTN_PAD[0], pady=BTN_PAD[1],
                cursor='hand2'
            )
            schema_btn.pack(side='left')
            schema_btn.bind('<Enter>', lambda e: schema_btn.configure(bg=ACCENT))
            schema_btn.bind('<Leave>', lambda e: schema_btn.configure(bg=SUBTLE))
            root.bind('<Control-s>', lambda e: self.validate_and_save())

        self.status = tk.Label(
            root, text='', font=SMALL_FONT, fg=SUBTLE, bg=BG,
            wraplength=STATUS_WRAP, justify='left'
        )
        self.status.pack(anchor='w', padx=PAD)

        # ---- Player ----
        player = tk.Frame(root, bg=CARD)
        player.pack(fill='both', expand=True, padx=PAD, pady=(SMALL_PAD, PAD))
        self.heading = tk.Label(player, text='', font=HEADING_FONT, fg=FG, bg=CARD)
        self.heading.pack(anchor='w', padx=PAD, pady=(SMALL_PAD, 0))
        self.item_title = tk.Label(player, text='', font=LABEL_FONT, fg=ACCENT, bg=CARD)
        self.item_title.pack(anchor='w', padx=PAD)
        self.banner_btn = tk.Button(
            player, text='', command=self.renderer.toggle, font=SMALL_FONT,
            bg=ENTRY_BG, fg=FG, relief='flat', cursor='hand2'
        )
        self.element_view = tk.Label(
            player, text='Nothing loaded.', font=LABEL_FONT, fg=ENTRY_FG, bg=ENTRY_BG,
            anchor='w', justify='left', padx=PAD, pady=PAD, cursor='hand2'
        )
        self.element_view.pack(fill='x', padx=PAD, pady=SMALL_PAD)
        self.element_view.bind('<Button-1>', self._on_element_click)
        self.controls_btn = tk.Button(
            player, text=ICON_PLAY, command=self.renderer.toggle, font=LABEL_FONT,
            bg=SUBTLE, fg=FG, relief='flat', cursor='hand2', width=3
        )

        nav = tk.Frame(player, bg=CARD)
        nav.pack(fill='x', padx=PAD, pady=(0, SMALL_PAD))
        tk.Button(
            nav, text=ICON_PREV, command=self.renderer.previous, font=LABEL_FONT,
            bg=SUBTLE, fg=FG, relief='flat', padx=BTN_PAD[0], pady=BTN_PAD[1], cursor='hand2'
        ).pack(side='left')
        self.position_label = tk.Label(nav, text='', font=LABEL_FONT, fg=FG, bg=CARD)
        self.position_label.pack(side='left', padx=PAD)
        tk.Button(
            nav, text=ICON_NEXT, command=self.renderer.next, font=LABEL_FONT,
            bg=SUBTLE, fg=FG, relief='flat', padx=BTN_PAD[0], pady=BTN_PAD[1], cursor='hand2'
        ).pack(side='left')
        self.ended_label = tk.Label(
            player, text='Playlist ended', font=HEADING_FONT, fg=STOP_RED, bg=CARD
        )

        root.bind('<Unmap>', self._on_unmap)
        root.bind('<Map>', self._on_map)
        root.protocol('WM_DELETE_WINDOW', self.close)
        self.media_keys.start()
        self.load_config()
        self._refresh_view()

    # ---- configuration ----

    def _set_status(self, text: str, ok: bool) -> None:
        self.status.config(text=text, fg=OK_GREEN if ok else ERROR_RED)

    def _set_editor(self, text: str) -> None:
        if self.editor is None:
            return
        self.editor.delete('1.0', tk.END)
        self.editor.insert('1.0', text)

    def load_config(self) -> None:
        """Load the stored document for this key, or put the sample into the editor."""
        stored = self.store.load(self.key)
        if stored is None:
            self._set_editor(dump_yaml(DEFAULT_DOCUMENT))
            if self.editor is None:
                self._set_status(f'No playlist stored under {self.key!r}', ok=False)
            return
        self._set_editor(dump_yaml(stored))
        document, issues = validate_document(stored)
        if document is None:
            self._set_status('Error loading config: ' + format_issues(issues), ok=False)
            return
        self._play(document)
        self._set_status('Configuration loaded successfully', ok=True)

    def validate_and_save(self) -> None:
        if self.editor is None:
            return
        text = self.editor.get('1.0', tk.END)
        try:
            data = load_yaml(text)
        except DocumentError as e:
            self._set_status('YAML parsing error: ' + str(e), ok=False)
            return
        document, issues = validate_document(data)
        if document is None:
            self._set_status('Validation errors: ' + format_issues(issues), ok=False)
            return
        self.store.save(self.key, data)
        self._play(document)
        self._set_status('Configuration saved successfully', ok=True)

    def _play(self, document) -> None:
        self.renderer.clear()
        self.session.load(document)
        self.renderer.start()

    def _show_schema(self) -> None:
        win = tk.Toplevel(self.root, bg=BG)
        win.title('Playlist schema')
        text = tk.Text(win, font=EDITOR_FONT, bg=ENTRY_BG, fg=ENTRY_FG, relief='flat', width=60)
        text.insert('1.0', schema_hint())
        text.config(state='disabled')
        text.pack(fill='both', expand=True, padx=PAD, pady=PAD)

    # ---- presentation (called by TkHost) ----

    def show_item(self, directive: RenderDirective, element) -> None:
        self._directive = directive
        self._element = element
        self.ended_label.pack_forget()
        self.heading.config(text=directive.heading or '')
        self.item_title.config(text=directive.title)
        self.position_label.config(text=directive.label)
        if directive.banner:
            self.banner_btn.config(text=f'[banner] {directive.banner}')
            self.banner_btn.pack(fill='x', padx=PAD, before=self.element_view)
        else:
            self.banner_btn.pack_forget()
        if directive.controls and isinstance(element, MediaElement):
            self.controls_btn.pack(anchor='w', padx=PAD, after=self.element_view)
        else:
            self.controls_btn.pack_forget()
        self._update_element_view()

    def show_ended(self) -> None:
        self.ended_label.pack(anchor='w', padx=PAD, pady=(0, PAD))

    def _update_element_view(self) -> None:
        element, directive = self._element, self._directive
        if element is None or directive is None:
            return
        if isinstance(element, ImageElement):
            lines = [f'[image] {element.src}']
            if directive.duration:
                lines.append(f'shown for {directive.duration:g}s')
        else:
            state = ICON_PAUSE if not element.paused else ICON_PLAY
            lines = [f'[{element.kind}] {element.src}', f'{state}  {_fmt_time(element.current_time)}']
            if directive.end is not None:
                lines[-1] += f' / {_fmt_time(directive.end)}'
            if element.playback_rate != 1:
                lines[-1] += f'  ×{element.playback_rate:g}'
            if element.poster and element.current_time <= directive.start:
                lines.append(f'poster: {element.poster}')
            self.controls_btn.config(text=ICON_PLAY if element.paused else ICON_PAUSE)
        self.element_view.config(text='\n'.join(lines))

    def _refresh_view(self) -> None:
        self._update_element_view()
        self.root.after(VIEW_REFRESH_MS, self._refresh_view)

    def _on_element_click(self, _event) -> None:
        if isinstance(self._element, MediaElement):
            self._element.click()

    def _on_unmap(self, event) -> None:
        if event.widget is self.root:
            self.visibility.visibility_changed(HIDDEN)

    def _on_map(self, event) -> None:
        if event.widget is self.root:
            self.visibility.visibility_changed(VISIBLE)

    def close(self) -> None:
        self.media_keys.stop()
        self.renderer.clear()
        try:
            self.root.destroy()
        except tk.TclError:
            pass
