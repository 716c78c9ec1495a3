"""Interactive-style model for choosing a hack script of a weave."""

from __future__ import annotations

from dataclasses import dataclass, field

from weaves.hacks import Hack, Weave

__all__ = [
    "KeyBinding",
    "KeyMap",
    "HackPicker",
    "DEFAULT_KEY_MAP",
    "TITLE",
    "LIST_HEIGHT",
    "DEFAULT_WIDTH",
    "render_item",
]

TITLE = "Which hack do you want to run?"
LIST_HEIGHT = 10
DEFAULT_WIDTH = len(TITLE) * 2

_TITLE_MARGIN = " " * 2
_ITEM_PADDING = " " * 4
_SELECTED_PADDING = " " * 2
_HELP_PADDING = " " * 4
# Title, its gap, the gap before help and the help line take four rows.
_ITEMS_PER_PAGE = max(1, LIST_HEIGHT - 4)


@dataclass(frozen=True)
class KeyBinding:
    """A set of keys that trigger one action, with its help text."""

    keys: tuple[str, ...]
    help_key: str
    help_desc: str

    def matches(self, key: str) -> bool:
        """Return whether ``key`` triggers this binding."""
        return key in self.keys

    @property
    def help(self) -> str:
        return f"{self.help_key} {self.help_desc}"


@dataclass(frozen=True)
class KeyMap:
    """The keys that end the picker."""

    quit: KeyBinding
    select: KeyBinding


DEFAULT_KEY_MAP = KeyMap(
    quit=KeyBinding(("ctrl+c", "q"), "ctrl+c/q", "quit"),
    select=KeyBinding(("enter", " "), "enter/spacebar", "select"),
)

_CURSOR_UP = KeyBinding(("up", "k"), "↑/k", "up")
_CURSOR_DOWN = KeyBinding(("down", "j"), "↓/j", "down")
_PREV_PAGE = KeyBinding(("left", "h", "pgup", "b", "u"), "←/h/pgup", "prev page")
_NEXT_PAGE = KeyBinding(("right", "l", "pgdown", "f", "d"), "→/l/pgdn", "next page")
_GO_TO_START = KeyBinding(("home", "g"), "g/home", "go to start")
_GO_TO_END = KeyBinding(("end", "G"), "G/end", "go to end")


def render_item(index: int, hack: Hack, selected: bool) -> str:
    """Render one list row for ``hack`` at zero-based ``index``."""
    line = f"{index + 1}) {hack.name}"
    if selected:
        return f"{_SELECTED_PADDING}> {line}"
    return f"{_ITEM_PADDING}{line}"


@dataclass
class HackPicker:
    """A list of hacks with a cursor, driven one key press at a time."""

    hacks: list[Hack]
    keys: KeyMap = DEFAULT_KEY_MAP
    cursor: int = 0
    selected: Hack | None = None
    done: bool = field(default=False, init=False)

    @classmethod
    def from_project(cls, project: str) -> HackPicker:
        """Build a picker over every hack of ``project``."""
        return cls(list(Weave(project).hacks()))

    @property
    def page(self) -> int:
        return self.cursor // _ITEMS_PER_PAGE

    @property
    def page_count(self) -> int:
        return max(1, -(-len(self.hacks) // _ITEMS_PER_PAGE))

    def update(self, key: str) -> bool:
        """Handle one key press; return whether the picker has finished."""
        if self.done:
            return True
        if self.keys.quit.matches(key):
            self.done = True
        elif self.keys.select.matches(key):
            self.select()
        elif self.hacks:
            self._navigate(key)
        return self.done

    def _navigate(self, key: str) -> None:
        last = len(self.hacks) - 1
        if _CURSOR_UP.matches(key):
            self.cursor = max(0, self.cursor - 1)
        elif _CURSOR_DOWN.matches(key):
            self.cursor = min(last, self.cursor + 1)
        elif _PREV_PAGE.matches(key):
            if self.page > 0:
                self.cursor = (self.page - 1) * _ITEMS_PER_PAGE
        elif _NEXT_PAGE.matches(key):
            if self.page < self.page_count - 1:
                self.cursor = (self.page + 1) * _ITEMS_PER_PAGE
        elif _GO_TO_START.matches(key):
            self.cursor = 0
        elif _GO_TO_END.matches(key):
            self.cursor = last

    def view(self) -> str:
        """Render the title, the current page of hacks and the help line."""
        start = self.page * _ITEMS_PER_PAGE
        rows = [
            render_item(index, hack, index == self.cursor)
            for index, hack in enumerate(
                self.hacks[start : start + _ITEMS_PER_PAGE], start=start
            )
        ]
        if not rows:
            rows = [f"{_ITEM_PADDING}No items."]
        bindings = [_CURSOR_UP, _CURSOR_DOWN, self.keys.select, self.keys.quit]
        help_line = _HELP_PADDING + " • ".join(b.help for b in bindings)
        return "\n".join([f"{_TITLE_MARGIN}{TITLE}", "", *rows, "", help_line])

    def select(self) -> Hack:
        """Choose the hack under the cursor and finish the picker."""
        if not self.hacks:
            raise LookupError("there is no hack to select")
        self.selected = self.hacks[self.cursor]
        self.done = True
        return self.selected