import logging
from datetime import datetime

from nicegui import ui

from dice_roller.core.formatting import format_results
from dice_roller.gui.theme import Theme

logger = logging.getLogger(__name__)


class HistoryComponent:
    """Roll history list with reroll, save-as-preset and clear actions."""

    def __init__(self, service, on_presets_changed=None):
        self.service = service
        self.on_presets_changed = on_presets_changed
        self.container = None

        # Reusable save-preset dialog state
        self.save_dialog = None
        self.name_input = None
        self.description_input = None
        self._roll_to_save = None

    def render(self):
        with ui.dialog() as self.save_dialog, ui.card():
            ui.label("Save as preset").classes("font-bold")
            self.name_input = ui.input("Name").classes("w-64")
            self.description_input = ui.input("Description (optional)").classes("w-64")
            with ui.row().classes("w-full justify-end mt-2"):
                ui.button("Cancel", on_click=self.save_dialog.close).props("flat")
                ui.button("Save", on_click=self._execute_save).classes("bg-green-600")

        self.container = ui.card().classes(Theme.card)
        self.refresh()

    def refresh(self):
        if not self.container:
            return

        self.container.clear()
        rolls = self.service.rolls

        with self.container:
            with ui.row().classes("w-full items-center justify-between mb-2"):
                Theme.section_title("Roll History")
                if rolls:
                    ui.button("Clear History", on_click=self.clear_history).classes(
                        "bg-red-600 text-sm"
                    )

            if not rolls:
                ui.label("No rolls yet. Roll some dice!").classes(
                    "w-full text-center py-8 " + Theme.text_secondary
                )
                return

            with ui.scroll_area().classes("w-full h-96"):
                for roll in rolls:
                    self._render_roll(roll)

    def _render_roll(self, roll):
        with ui.row().classes(
            "w-full p-3 mb-2 rounded-lg items-center justify-between "
            + Theme.bg_tertiary
        ):
            with ui.column().classes("gap-0 flex-grow"):
                with ui.row().classes("items-center gap-4"):
                    title = f"{roll.expression} = {roll.total}"
                    if roll.name:
                        title = f"{roll.name}: {title}"
                    ui.label(title).classes(
                        "text-lg font-semibold " + Theme.text_total
                    )
                    ui.label(format_results(roll)).classes(
                        "text-sm " + Theme.text_secondary
                    )
                ui.label(
                    datetime.fromtimestamp(roll.timestamp / 1000).strftime("%H:%M:%S")
                ).classes("text-xs text-gray-500")

            with ui.row().classes("gap-1"):
                if roll.is_custom:
                    ui.button(
                        icon="bookmark_add",
                        on_click=lambda r=roll: self.open_save_dialog(r),
                    ).props("flat dense round").classes("text-green-400").tooltip(
                        "Save as preset"
                    )
                ui.button(
                    "Reroll", on_click=lambda r=roll: self.reroll(r)
                ).props("dense").classes("bg-blue-600 text-sm")

    async def reroll(self, roll):
        await self.service.reroll(roll)
        self.refresh()

    async def clear_history(self):
        await self.service.clear_history()
        self.refresh()

    def open_save_dialog(self, roll):
        self._roll_to_save = roll
        self.name_input.set_value("")
        self.description_input.set_value("")
        self.save_dialog.open()

    def _execute_save(self):
        if not self._roll_to_save:
            return

        preset = self.service.save_as_preset(
            self._roll_to_save,
            self.name_input.value or "",
            self.description_input.value or None,
        )
        if preset is None:
            ui.notify("Could not save preset", type="warning")
            return

        ui.notify(f"Saved '{preset.name}'")
        self._roll_to_save = None
        self.save_dialog.close()
        if self.on_presets_changed:
            self.on_presets_changed()
