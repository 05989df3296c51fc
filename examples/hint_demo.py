"""Interactive hint-mode demo over a plain Rich list.

Run: python examples/hint_demo.py
Press f to show hints, type a hint to pick a row, Esc to cancel, q to quit.
"""

from __future__ import annotations

import readchar
from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from hintmode import HintNavigator, Rect, TargetBuilder, TargetRegistry, banner_text, hint_label, load_config
from hintmode.keys import is_interrupt

ITEMS = [f"file_{i:02d}.py" for i in range(1, 15)]


def register_rows(registry: TargetRegistry) -> None:
    """Per-frame widget adapter: one target per visible row."""
    registry.clear()
    builder = TargetBuilder()
    for row, name in enumerate(ITEMS):
        registry.register(builder.list_item(Rect(0, row + 1, 40, 1), name))


def render(navigator: HintNavigator, status: str) -> Panel:
    hint_set = navigator.hint_set
    prefix = navigator.matcher.prefix
    lines = []
    if hint_set is not None:
        lines.append(banner_text(hint_set, prefix, navigator.config.style))
    for target in navigator.registry:
        line = Text()
        hint = hint_set.hint_for_target(target.id) if hint_set is not None else None
        if hint is not None:
            line.append_text(hint_label(hint, prefix, navigator.config.style))
            line.append(" ")
        line.append(target.label or "")
        lines.append(line)
    lines.append(Text(status, style="dim"))
    return Panel(Group(*lines), title="[bold]hintmode demo[/bold]", width=60)


def main() -> None:
    registry = TargetRegistry()
    navigator = HintNavigator(registry, load_config())
    status = "f hints • q quit"
    console = Console()

    register_rows(registry)
    with Live(render(navigator, status), console=console, refresh_per_second=20) as live:
        while True:
            try:
                key = readchar.readkey()
            except KeyboardInterrupt:
                break
            register_rows(registry)
            result = navigator.handle_key(key)
            if not result.consumed and (key == "q" or is_interrupt(key)):
                break
            if result.target_id is not None:
                status = f"Activated {registry.by_id(result.target_id).label}"
            live.update(render(navigator, status))


if __name__ == "__main__":
    main()
