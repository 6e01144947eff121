"""User interface for the Life Clock.

This module builds the customtkinter window: a header with the
light/dark switch, the year/month/day entries, start and reset buttons,
an error line and the elapsed-time readout.  All state lives in the
``ClockController``; the window only forwards user input to it and
redraws itself whenever the controller reports a change.  What each
widget should show is decided by ``view_model`` so it can be checked
without a display.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Mapping

import customtkinter as ctk

from lifeclock.config import Settings
from lifeclock.controller import ClockController
from lifeclock.engine import FIELDS, format_date_row, format_time_row
from lifeclock.icons import GREY, LIGHT_GREY, draw_moon, draw_sun


# (name, label, placeholder) for each birth date entry.  Values are not
# clamped; 1900-2099 / 1-12 / 1-31 are only the expected ranges.
ENTRY_SPECS = [
    ("year", "Year", "YYYY"),
    ("month", "Month", "MM"),
    ("day", "Day", "DD"),
]

# Edits that change an entry without a key press (mouse paste included).
EDIT_SEQUENCES = ("<KeyRelease>", "<FocusOut>", "<<Paste>>", "<ButtonRelease-2>")


@dataclass(frozen=True)
class ViewModel:
    start_text: str
    start_enabled: bool
    error_visible: bool
    error_text: str
    readout_visible: bool
    date_row: str = ""
    time_row: str = ""
    totals: tuple[str, str, str] = ("", "", "")


def view_model(state: ClockController) -> ViewModel:
    """Decide what the window shows for the given controller state."""
    elapsed = state.elapsed
    vm = ViewModel(
        start_text="Clock Running" if state.running else "Start Clock",
        start_enabled=not state.running,
        error_visible=bool(state.error),
        error_text=state.error,
        readout_visible=elapsed is not None,
    )
    if elapsed is None:
        return vm
    return replace(
        vm,
        date_row=format_date_row(elapsed),
        time_row=format_time_row(elapsed),
        totals=(str(elapsed.years), str(elapsed.months), str(elapsed.days)),
    )


def start_from_entries(controller: ClockController, values: Mapping[str, str]) -> None:
    """Push the entries' current text into the controller, then start it."""
    for name in FIELDS:
        controller.set_field(name, values.get(name, ""))
    controller.start()


class LifeClockApp(ctk.CTk):
    """Main application window for the life clock."""

    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self.title(settings.app.title)
        self.geometry(settings.app.geometry)

        # The color theme is applied by main() before the window exists.
        ctk.set_appearance_mode(settings.app.appearance)
        self._applied_mode = settings.app.appearance

        # The window doubles as the controller's scheduler via after/after_cancel.
        self.controller = ClockController(
            scheduler=self,
            tick_ms=settings.clock.tick_ms,
            dark_mode=settings.app.appearance == "dark",
        )

        self.card = ctk.CTkFrame(self, corner_radius=12)
        self.card.pack(expand=True, fill="both", padx=20, pady=20)
        self.card.grid_columnconfigure(0, weight=1)

        self._build_header()
        self._build_inputs()
        self._build_controls()
        self._build_readout()

        self.controller.subscribe(self.render)
        self.protocol("WM_DELETE_WINDOW", self.on_exit)
        self.render(self.controller)

    def _build_header(self) -> None:
        """Create the title and the appearance switch with its icons."""
        header = ctk.CTkFrame(self.card, fg_color="transparent")
        header.grid(row=0, column=0, sticky="ew", padx=16, pady=(16, 8))
        ctk.CTkLabel(header, text="Life Clock", font=ctk.CTkFont(size=24, weight="normal")).pack(side="left")

        self.moon_image = ctk.CTkImage(
            light_image=draw_moon(color=GREY), dark_image=draw_moon(color=LIGHT_GREY), size=(16, 16)
        )
        self.sun_image = ctk.CTkImage(
            light_image=draw_sun(color=GREY), dark_image=draw_sun(color=LIGHT_GREY), size=(16, 16)
        )
        ctk.CTkLabel(header, image=self.moon_image, text="").pack(side="right")
        self.mode_switch = ctk.CTkSwitch(header, text="", width=40, command=self._on_mode_switch)
        self.mode_switch.pack(side="right", padx=4)
        ctk.CTkLabel(header, image=self.sun_image, text="").pack(side="right")

    def _build_inputs(self) -> None:
        """Create the three labelled birth date entries."""
        frame = ctk.CTkFrame(self.card, fg_color="transparent")
        frame.grid(row=1, column=0, sticky="ew", padx=16, pady=4)
        self.entries: dict[str, ctk.CTkEntry] = {}
        for col, (name, label, placeholder) in enumerate(ENTRY_SPECS):
            frame.grid_columnconfigure(col, weight=1)
            ctk.CTkLabel(frame, text=label, font=ctk.CTkFont(size=13)).grid(row=0, column=col, sticky="w", padx=4)
            # No textvariable: customtkinter hides the placeholder when one is set.
            entry = ctk.CTkEntry(frame, placeholder_text=placeholder)
            entry.grid(row=1, column=col, sticky="ew", padx=4, pady=(2, 0))
            for sequence in EDIT_SEQUENCES:
                # Paste events fire before the text lands, so read the entry once idle.
                entry.bind(sequence, lambda _evt, n=name: self.after_idle(self._on_field_edit, n))
            self.entries[name] = entry

        self.error_label = ctk.CTkLabel(self.card, text="", text_color="#ef4444", font=ctk.CTkFont(size=13))
        self.error_label.grid(row=2, column=0, sticky="w", padx=20, pady=(6, 0))

    def _build_controls(self) -> None:
        frame = ctk.CTkFrame(self.card, fg_color="transparent")
        frame.grid(row=3, column=0, sticky="ew", padx=16, pady=10)
        frame.grid_columnconfigure((0, 1), weight=1)
        self.start_btn = ctk.CTkButton(frame, text="Start Clock", command=self._on_start)
        self.start_btn.grid(row=0, column=0, sticky="ew", padx=(4, 8))
        self.reset_btn = ctk.CTkButton(
            frame,
            text="Reset",
            fg_color="transparent",
            border_width=1,
            text_color=("gray10", "gray90"),
            command=self.controller.reset,
        )
        self.reset_btn.grid(row=0, column=1, sticky="ew", padx=(8, 4))

    def _build_readout(self) -> None:
        """Create the elapsed-time section; it stays hidden until the first tick."""
        self.readout = ctk.CTkFrame(self.card, fg_color="transparent")
        self.readout.grid(row=4, column=0, sticky="ew", padx=16, pady=(10, 16))
        self.readout.grid_columnconfigure((0, 1, 2), weight=1)

        ctk.CTkLabel(self.readout, text="Time elapsed since your birth:", text_color="gray50").grid(
            row=0, column=0, columnspan=3
        )
        self.date_row = ctk.CTkLabel(self.readout, text="", font=ctk.CTkFont(size=40))
        self.date_row.grid(row=1, column=0, columnspan=3, pady=(6, 0))
        self.time_row = ctk.CTkLabel(self.readout, text="", font=ctk.CTkFont(size=24), text_color="gray50")
        self.time_row.grid(row=2, column=0, columnspan=3, pady=(0, 10))

        self.totals: dict[str, ctk.CTkLabel] = {}
        for col, (key, title) in enumerate([("years", "Years"), ("months", "Months"), ("days", "Days")]):
            ctk.CTkLabel(self.readout, text=title, font=ctk.CTkFont(size=13, weight="bold")).grid(row=3, column=col)
            value = ctk.CTkLabel(self.readout, text="", font=ctk.CTkFont(size=13))
            value.grid(row=4, column=col)
            self.totals[key] = value
        self.readout.grid_remove()

    # --- Event handlers ---
    def _on_field_edit(self, name: str) -> None:
        self.controller.set_field(name, self.entries[name].get())

    def _on_start(self) -> None:
        start_from_entries(self.controller, {name: entry.get() for name, entry in self.entries.items()})

    def _on_mode_switch(self) -> None:
        self.controller.set_display_mode(bool(self.mode_switch.get()))

    def on_exit(self) -> None:
        """Cancel the pending tick and close the window."""
        self.controller.shutdown()
        self.destroy()

    # --- Rendering ---
    def render(self, state: ClockController) -> None:
        """Bring every widget in line with the controller state."""
        for name in FIELDS:
            value = getattr(state.birth_date, name)
            entry = self.entries[name]
            if entry.get() != value:
                entry.delete(0, "end")
                if value:
                    entry.insert(0, value)

        mode = "dark" if state.dark_mode else "light"
        if mode != self._applied_mode:
            ctk.set_appearance_mode(mode)
            self._applied_mode = mode
        if bool(self.mode_switch.get()) != state.dark_mode:
            if state.dark_mode:
                self.mode_switch.select()
            else:
                self.mode_switch.deselect()

        vm = view_model(state)
        if vm.error_visible:
            self.error_label.configure(text=vm.error_text)
            self.error_label.grid()
        else:
            self.error_label.grid_remove()

        self.start_btn.configure(
            text=vm.start_text,
            state="normal" if vm.start_enabled else "disabled",
        )

        if not vm.readout_visible:
            self.readout.grid_remove()
            return
        self.date_row.configure(text=vm.date_row)
        self.time_row.configure(text=vm.time_row)
        for key, text in zip(("years", "months", "days"), vm.totals):
            self.totals[key].configure(text=text)
        self.readout.grid()
