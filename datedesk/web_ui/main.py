"""NiceGUI entrypoint for the calendar tool web runtime."""

from __future__ import annotations

import argparse
import json

from nicegui import ui

from datedesk.domain.ports import UseCaseError
from datedesk.viewmodels.calendar_vm import FORMAT_LABEL_CHOICES, Command
from datedesk.web_ui.runtime import WebRuntime
from datedesk.web_ui.viewmodels import WebCalendarForm, WebSettingsVM, parse_settings_json
from datedesk.utils import logging as logging_utils

COMMAND_BUTTONS = (
    (Command.SHOW_NOW, "Current date/time"),
    (Command.VALIDATE, "Validate date"),
    (Command.CONVERT, "Convert format"),
    (Command.CHECK_RANGE, "Check range"),
    (Command.DIFFERENCE, "Calculate difference"),
)


def _install_theme() -> None:
    """Install global CSS tokens for the web runtime."""
    ui.add_head_html(
        """
<style>
:root {
  --dd-card: rgba(255, 255, 255, 0.9);
  --dd-border: #c9d7e9;
}
body { background: #f3f5f9; }
.dd-page { max-width: 900px; margin: 0 auto; padding: 14px; }
.dd-card { background: var(--dd-card); border: 1px solid var(--dd-border); border-radius: 14px; }
.dd-mono { font-family: monospace; white-space: pre-wrap; }
</style>
        """
    )


def _notify_error(exc: Exception) -> None:
    """Render exceptions as concise NiceGUI toasts."""
    message = exc.message if isinstance(exc, UseCaseError) else str(exc)
    ui.notify(message, color="negative", close_button="OK")


def _build_ui(runtime: WebRuntime) -> None:
    """Register the NiceGUI pages for the runtime."""

    @ui.page("/")
    def index() -> None:
        calendar_vm = runtime.new_calendar_vm()
        form = WebCalendarForm(format_label=calendar_vm.format_label)
        settings_vm = WebSettingsVM.from_settings_vm(runtime.settings_vm)

        def run_command(command: Command) -> None:
            output.value = form.submit(calendar_vm, command)

        def save_settings() -> None:
            try:
                runtime.apply_settings_payload(settings_vm.to_payload())
            except (ValueError, UseCaseError) as exc:
                _notify_error(exc)
                return
            calendar_vm.set_range(runtime.settings_vm.range_start, runtime.settings_vm.range_end)
            ui.notify(runtime.status_message, color="positive")

        def import_settings() -> None:
            try:
                runtime.apply_settings_payload(parse_settings_json(import_text.value or ""))
            except (ValueError, UseCaseError) as exc:
                _notify_error(exc)
                return
            settings_vm.load(runtime.settings_vm)
            calendar_vm.set_range(runtime.settings_vm.range_start, runtime.settings_vm.range_end)
            ui.notify("Settings imported.", color="positive")

        with ui.column().classes("dd-page w-full q-gutter-md"):
            with ui.card().classes("dd-card w-full"):
                ui.label("Calendar Tool").classes("text-h5")
                ui.input("Date 1 (dd.mm.yyyy)").bind_value(form, "date1")
                ui.input("Date 2 (optional, for difference)").bind_value(form, "date2")
                ui.select(list(FORMAT_LABEL_CHOICES), label="Target format").bind_value(form, "format_label")
                with ui.row().classes("q-gutter-sm"):
                    for command, label in COMMAND_BUTTONS:
                        ui.button(label, on_click=lambda _, c=command: run_command(c))
                output = ui.textarea("Output").props("readonly").classes("w-full dd-mono")

            with ui.expansion("Settings").classes("dd-card w-full"):
                with ui.row().classes("q-gutter-sm"):
                    ui.input("Range from").bind_value(settings_vm, "range_start")
                    ui.input("Range to").bind_value(settings_vm, "range_end")
                ui.select(list(FORMAT_LABEL_CHOICES), label="Default format").bind_value(
                    settings_vm, "default_format"
                )
                ui.checkbox("Enable debug logging").bind_value(settings_vm, "debug_logging")
                ui.button("Save", on_click=save_settings, color="primary")
                import_text = ui.textarea("Import settings JSON").classes("w-full dd-mono")
                ui.button("Import", on_click=import_settings)


def _parse_args() -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the calendar tool NiceGUI web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args()


def main() -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args()
    logging_utils.configure_root()
    runtime = WebRuntime()
    if args.smoke_test:
        vm = runtime.new_calendar_vm()
        print("web-smoke-ok", json.dumps(runtime.settings_payload(), sort_keys=True), vm.format_label)
        return
    _install_theme()
    _build_ui(runtime)
    ui.run(
        host=args.host,
        port=args.port,
        title="Calendar Tool",
        reload=args.reload,
        show=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
