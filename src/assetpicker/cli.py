"""Typer-based CLI: replay a scripted click session against an asset list."""

from __future__ import annotations

import logging
from functools import wraps
from pathlib import Path
from typing import Any, Dict, List

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from assetpicker.appctx import PickerSession
from assetpicker.domain.models.action import Action
from assetpicker.domain.models.asset import AssetItem
from assetpicker.domain.models.dialog import DialogDescriptor, DialogKind
from assetpicker.errors import AssetPickerError
from assetpicker.gui.interaction import ClickEvent, ClickTarget
from assetpicker.models.selection import RangePolicy
from assetpicker.utils.jsonio import read_json

app = typer.Typer(help="Selection and dialog state for a media asset browser")
console = Console()


@app.callback()
def _root() -> None:
    """Selection and dialog state for a media asset browser."""


def _handle_errors(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (OSError, ValueError, KeyError) as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc
        except AssetPickerError as exc:
            typer.echo(f"Unexpected error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


def _load_items(path: Path) -> List[AssetItem]:
    payload = read_json(path)
    if not isinstance(payload, list):
        raise ValueError(f"{path}: expected a JSON array of assets")
    items: List[AssetItem] = []
    for entry in payload:
        if isinstance(entry, dict):
            items.append(AssetItem.from_asset(entry))
        else:
            items.append(AssetItem(id=entry))
    return items


def _dialog_from_step(step: Dict[str, Any]) -> DialogDescriptor:
    action = step.get("action")
    return DialogDescriptor(
        id=step["id"],
        kind=DialogKind(step.get("kind", DialogKind.CONFIRM.value)),
        close_dialog_id=step.get("close_dialog_id"),
        confirm_callback_action=Action(action["type"], action.get("payload", {})) if action else None,
        header_title=step.get("header_title"),
        title=step.get("title"),
        description=step.get("description"),
        confirm_text=step.get("confirm_text"),
        tone=step.get("tone"),
    )


def _apply(session: PickerSession, step: Dict[str, Any]) -> Any:
    op = step["op"]
    state = session.state
    if op == "click":
        target = ClickTarget(step.get("target", ClickTarget.ROW.value))
        return session.binding.handle(ClickEvent(step["id"], bool(step.get("shift", False)), target)).value
    if op == "pick":
        return state.pick(step["id"], bool(step.get("picked", True)))
    if op == "pick_range":
        return state.pick_range(step.get("start"), step["end"])
    if op == "pick_all":
        return state.pick_all()
    if op == "pick_clear":
        return state.pick_clear()
    if op == "show":
        return state.show(_dialog_from_step(step))
    if op == "confirm":
        return state.confirm(step["id"])
    if op in ("close", "remove"):
        return state.close(step["id"])
    if op == "delete_picked":
        return session.request_delete(close_dialog_id=step.get("close_dialog_id"))
    if op == "set_updating":
        return state.set_updating(step["id"], bool(step.get("updating", True)))
    if op == "set_error":
        return state.set_error(step["id"], step.get("error"))
    raise ValueError(f"Unknown step op {op!r}")


def _render(session: PickerSession) -> None:
    items = Table(title="Assets")
    items.add_column("#", justify="right")
    items.add_column("id")
    items.add_column("picked")
    items.add_column("updating")
    items.add_column("error")
    anchor = session.state.last_picked
    for index, item in enumerate(session.state.items()):
        marker = " (anchor)" if item.id == anchor else ""
        items.add_row(
            str(index),
            f"{item.id}{marker}",
            "x" if item.picked else "",
            "..." if item.updating else "",
            item.error or "",
        )
    console.print(items)

    dialogs = Table(title="Dialogs (top last)")
    dialogs.add_column("id")
    dialogs.add_column("kind")
    dialogs.add_column("closes")
    dialogs.add_column("follow-up")
    for descriptor in session.state.open_dialogs():
        action = descriptor.confirm_callback_action
        dialogs.add_row(
            descriptor.id,
            descriptor.kind.value,
            descriptor.close_dialog_id or "",
            getattr(action, "type", "") if action is not None else "",
        )
    console.print(dialogs)


@app.command()
@_handle_errors
def replay(
    items_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON array of assets"),
    script_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON array of steps"),
    document_context: bool = typer.Option(False, "--document-context", help="Embed mode for a single document"),
    range_policy: RangePolicy = typer.Option(RangePolicy.ADDITIVE, "--range-policy"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Run each scripted step and print the resulting picker state."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    dispatched: List[Any] = []
    selected: List[Any] = []
    session = PickerSession.create(
        _load_items(items_path),
        fallback_sink=dispatched.append,
        document_context=document_context,
        on_select=selected.extend,
    )
    session.state.selection.range_policy = range_policy
    try:
        steps = read_json(script_path)
        if not isinstance(steps, list) or not all(isinstance(step, dict) for step in steps):
            raise ValueError(f"{script_path}: expected a JSON array of step objects")
        for number, step in enumerate(steps, start=1):
            result = _apply(session, step)
            console.log(f"[{number}] {step['op']} -> {result!r}")
    finally:
        session.shutdown()

    _render(session)
    if selected:
        console.print(f"Reported to host document: {selected}")
    if dispatched:
        console.print(f"Unrouted follow-up actions: {dispatched}")


def main() -> None:  # pragma: no cover - console entry point
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
