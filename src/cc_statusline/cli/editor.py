"""Interactive configuration editor.

Menus form a small state machine: the editor keeps a stack of menu names,
entering a section pushes it and "back" pops it. The loop ends when the
stack is empty, after either "save" or "cancel".
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from pydantic import ValidationError

from ..config.defaults import get_default_config
from ..config.loader import (
    ConfigImportError,
    export_config,
    import_config,
    load_config,
    save_config,
)
from ..config.schema import (
    BAR_COLORS,
    BAR_LENGTHS,
    PATH_DISPLAY_MODES,
    SEPARATORS,
    StatusLineConfig,
)
from ..config.tree import get_value, set_value

MAIN_MENU = "main"


@dataclass(frozen=True)
class MenuField:
    """One editable leaf of the configuration."""

    path: str
    label: str
    kind: str  # "toggle", "choice" or "number"
    choices: tuple[Any, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Section:
    title: str
    fields: tuple[MenuField, ...]


SECTIONS: dict[str, Section] = {
    "display": Section(
        "Display Options",
        (
            MenuField("oneLine", "One line", "toggle"),
            MenuField("showFirstLine", "Show first line (branch, path, model)", "toggle"),
            MenuField("showSonnetModel", "Show Sonnet model", "toggle"),
            MenuField("pathDisplayMode", "Path mode", "choice", PATH_DISPLAY_MODES),
            MenuField("useIconLabels", "Icon labels (📚 🕔 📅)", "toggle"),
            MenuField("separator", "Separator", "choice", SEPARATORS),
        ),
    ),
    "git": Section(
        "Git Settings",
        (
            MenuField("git.showBranch", "Show branch", "toggle"),
            MenuField("git.showDirtyIndicator", "Dirty indicator (•)", "toggle"),
            MenuField("git.showChanges", "Line changes (+/-)", "toggle"),
            MenuField("git.showStaged", "Staged files", "toggle"),
            MenuField("git.showUnstaged", "Unstaged files", "toggle"),
        ),
    ),
    "session": Section(
        "Session Info",
        (
            MenuField("session.infoSeparator", "Info separator", "choice", (None,) + SEPARATORS),
            MenuField("session.showTokens", "Show tokens", "toggle"),
            MenuField("session.showMaxTokens", "Show max tokens", "toggle"),
            MenuField("session.showTokenDecimals", "Token decimals", "toggle"),
            MenuField("session.showPercentage", "Show percentage", "toggle"),
        ),
    ),
    "context": Section(
        "Context Window",
        (
            MenuField("context.maxContextTokens", "Max context tokens", "number"),
            MenuField("context.autocompactBufferTokens", "Autocompact buffer", "number"),
            MenuField("context.useUsableContextOnly", "Use usable context only", "toggle"),
            MenuField("context.overheadTokens", "Overhead tokens", "number"),
        ),
    ),
    "limits": Section(
        "Usage Limits",
        (
            MenuField("limits.showProgressBar", "Show progress bar", "toggle"),
            MenuField("limits.progressBarLength", "Bar length", "choice", BAR_LENGTHS),
            MenuField("limits.color", "Color mode", "choice", BAR_COLORS),
            MenuField("limits.showSevenDay", "Seven-day limit", "toggle"),
        ),
    ),
}

MAIN_ACTIONS = (
    ("import", "Import Config"),
    ("export", "Export Config"),
    ("reset", "Reset to Defaults"),
    ("save", "Save & Exit"),
    ("cancel", "Cancel (discard changes)"),
)


def _describe(value: Any) -> str:
    if value is True:
        return "✓"
    if value is False:
        return "✗"
    if value is None:
        return "none"
    return str(value)


class ConfigEditor:
    """Menu-driven editor over a working copy of the configuration.

    Args:
        config: Starting configuration (not modified)
        ask: Prompt function (defaults to input); EOFError or
            KeyboardInterrupt cancels the editor
        say: Output function (defaults to print)
    """

    def __init__(
        self,
        config: StatusLineConfig,
        ask: Optional[Callable[[str], str]] = None,
        say: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.config = config
        self.stack: list[str] = [MAIN_MENU]
        self.saved = False
        self._ask = ask or input
        self._say = say or print

    def run(self) -> Optional[StatusLineConfig]:
        """Run until save or cancel.

        Returns:
            The edited configuration if saved, None if cancelled
        """
        while self.stack:
            state = self.stack[-1]
            try:
                if state == MAIN_MENU:
                    self._main_menu()
                else:
                    self._section_menu(state)
            except (EOFError, KeyboardInterrupt):
                self._say("\nConfiguration cancelled")
                self.stack.clear()
                self.saved = False

        return self.config if self.saved else None

    def _choose(self, prompt: str, options: list[str]) -> Optional[int]:
        """Show numbered options.

        Returns:
            Chosen index, None for back, or -1 for an invalid answer
        """
        for number, label in enumerate(options, start=1):
            self._say(f"  {number}) {label}")

        answer = self._ask(f"{prompt} ").strip().lower()
        if answer in ("", "b", "back", "q"):
            return None
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return int(answer) - 1

        self._say(f"✗ Invalid choice: {answer}")
        return -1

    def _main_menu(self) -> None:
        self._say("\n=== Statusline Configuration ===")
        section_names = list(SECTIONS)
        labels = [SECTIONS[name].title for name in section_names]
        labels += [label for _, label in MAIN_ACTIONS]

        index = self._choose("Select category to configure:", labels)
        if index is None or index < 0:
            return

        if index < len(section_names):
            self.stack.append(section_names[index])
            return

        action = MAIN_ACTIONS[index - len(section_names)][0]
        if action == "import":
            self._import()
        elif action == "export":
            self._export()
        elif action == "reset":
            self._reset()
        elif action == "save":
            self.saved = True
            self.stack.clear()
        elif action == "cancel":
            self._say("Changes discarded")
            self.stack.clear()

    def _section_menu(self, name: str) -> None:
        section = SECTIONS[name]
        self._say(f"\n=== {section.title} ===")

        labels = [
            f"{menu_field.label}: {_describe(get_value(self.config, menu_field.path))}"
            for menu_field in section.fields
        ]
        labels.append("← Back to main menu")

        index = self._choose("What would you like to change?", labels)
        if index is None or index == len(section.fields):
            self.stack.pop()
            return
        if index < 0:
            return

        self._edit_field(section.fields[index])

    def _edit_field(self, menu_field: MenuField) -> None:
        current = get_value(self.config, menu_field.path)

        if menu_field.kind == "toggle":
            self._apply(menu_field.path, not current)
            return

        if menu_field.kind == "choice":
            index = self._choose(
                f"Select {menu_field.label.lower()}:",
                [_describe(choice) for choice in menu_field.choices],
            )
            if index is not None and index >= 0:
                self._apply(menu_field.path, menu_field.choices[index])
            return

        answer = self._ask(f"{menu_field.label} [{current}]: ").strip()
        if not answer:
            return
        try:
            self._apply(menu_field.path, int(answer))
        except ValueError:
            self._say("✗ Must be a whole number")

    def _apply(self, path: str, value: Any) -> None:
        try:
            tree = set_value(self.config, path, value)
            self.config = StatusLineConfig.model_validate(tree)
        except ValidationError as e:
            self._say(f"✗ Invalid value for {path}: {e.errors()[0]['msg']}")

    def _import(self) -> None:
        path = self._ask("Enter path to config file: ").strip()
        if not path:
            return
        try:
            self.config = import_config(path)
        except ConfigImportError as e:
            self._say(f"✗ {e}")
            return
        self._say("✓ Config imported")

    def _export(self) -> None:
        path = self._ask("Enter export path: ").strip()
        if not path:
            return
        try:
            export_config(self.config, path)
        except OSError as e:
            self._say(f"✗ Failed to export: {e}")
            return
        self._say(f"✓ Config exported to {path}")

    def _reset(self) -> None:
        answer = self._ask("Reset all settings to defaults? [y/N]: ").strip().lower()
        if answer in ("y", "yes"):
            self.config = get_default_config()
            self._say("✓ Config reset to defaults")


def cmd_edit() -> int:
    """Run the interactive editor and save on request.

    Returns:
        Exit code (always 0)
    """
    result = ConfigEditor(load_config()).run()

    if result is None:
        return 0

    save_config(result)
    print("✓ Config saved successfully!")
    return 0
