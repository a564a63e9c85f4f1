"""Command dispatch for the calendar tool.

Call context:
    ``datedesk.app.main.App`` (Tkinter) and ``datedesk.web_ui.main`` (NiceGUI)
    copy field values into :class:`CalendarVM` and call :meth:`CalendarVM.dispatch`
    when a button is pressed. The returned text goes into the output area.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from ..domain.calendar_date import FormatPattern
from ..domain.date_engine import DateFormatEngine

DEFAULT_RANGE_START = "01.01.1900"
DEFAULT_RANGE_END = "31.12.2100"

FORMAT_LABELS: Dict[str, FormatPattern] = {
    "Format 1 - ISO (yyyy-mm-dd)": FormatPattern.ISO,
    "Format 2 - German (dd.mm.yyyy)": FormatPattern.GERMAN,
    "Format 3 - US (mm/dd/yyyy)": FormatPattern.US,
    "Format 4 - Long (weekday, dd month yyyy)": FormatPattern.LONG,
}
FORMAT_LABEL_CHOICES: Tuple[str, ...] = tuple(FORMAT_LABELS)
DEFAULT_FORMAT_LABEL = FORMAT_LABEL_CHOICES[0]

PROMPT_ONE_DATE = "Please enter a date."
PROMPT_TWO_DATES = "Please fill in both date fields."
MSG_VALID = "The entered date is valid."
MSG_INVALID = "Invalid date or wrong format (dd.mm.yyyy)."


class Command(str, Enum):
    SHOW_NOW = "show_now"
    VALIDATE = "validate"
    CONVERT = "convert"
    CHECK_RANGE = "check_range"
    DIFFERENCE = "difference"


def pattern_for_label(label: Optional[str]) -> FormatPattern:
    """Map a dropdown label to its pattern; unknown labels select ISO."""
    return FORMAT_LABELS.get((label or "").strip(), FormatPattern.ISO)


class CalendarVM:
    """Holds the input field state and routes commands to the engine."""

    def __init__(
        self,
        engine: Optional[DateFormatEngine] = None,
        *,
        range_start: str = DEFAULT_RANGE_START,
        range_end: str = DEFAULT_RANGE_END,
        format_label: str = DEFAULT_FORMAT_LABEL,
        on_output: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.engine = engine or DateFormatEngine()
        self.range_start = range_start
        self.range_end = range_end
        self.on_output = on_output
        self._log = logging.getLogger(__name__)

        self.date1: str = ""
        self.date2: str = ""
        self.format_label: str = format_label
        self.output_text: str = ""

        self._handlers: Dict[Command, Callable[[], str]] = {
            Command.SHOW_NOW: self._show_now,
            Command.VALIDATE: self._validate,
            Command.CONVERT: self._convert,
            Command.CHECK_RANGE: self._check_range,
            Command.DIFFERENCE: self._difference,
        }

    # ------------------------------------------------------------------
    # Field setters (called from view callbacks)
    # ------------------------------------------------------------------
    def set_date1(self, value: Optional[str]) -> None:
        self.date1 = value or ""

    def set_date2(self, value: Optional[str]) -> None:
        self.date2 = value or ""

    def set_format_label(self, value: Optional[str]) -> None:
        self.format_label = value or ""

    def set_range(self, start: str, end: str) -> None:
        self.range_start = start
        self.range_end = end

    # ------------------------------------------------------------------
    def dispatch(self, command: Command | str) -> str:
        """Run one command and return (and publish) its display text.

        Raises:
            ValueError: for names that are not a :class:`Command`.
        """
        cmd = Command(command)
        self._log.debug("Dispatching %s", cmd.value)
        text = self._handlers[cmd]()
        self.output_text = text
        if self.on_output:
            self.on_output(text)
        return text

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------
    def _show_now(self) -> str:
        return "Current date & time:\n" + self.engine.current_timestamp()

    def _validate(self) -> str:
        text = self.date1.strip()
        if not text:
            return PROMPT_ONE_DATE
        return MSG_VALID if self.engine.is_valid_date(text) else MSG_INVALID

    def _convert(self) -> str:
        text = self.date1.strip()
        if not text:
            return PROMPT_ONE_DATE
        pattern = pattern_for_label(self.format_label)
        return "Converted date:\n" + self.engine.convert(text, pattern)

    def _check_range(self) -> str:
        text = self.date1.strip()
        if not text:
            return PROMPT_ONE_DATE
        return self.engine.validate_in_range(text, self.range_start, self.range_end)

    def _difference(self) -> str:
        first = self.date1.strip()
        second = self.date2.strip()
        if not first or not second:
            return PROMPT_TWO_DATES
        return self.engine.difference(first, second)


__all__ = [
    "CalendarVM",
    "Command",
    "DEFAULT_FORMAT_LABEL",
    "DEFAULT_RANGE_END",
    "DEFAULT_RANGE_START",
    "FORMAT_LABELS",
    "FORMAT_LABEL_CHOICES",
    "MSG_INVALID",
    "MSG_VALID",
    "PROMPT_ONE_DATE",
    "PROMPT_TWO_DATES",
    "pattern_for_label",
]
