from nicegui import ui

from dice_roller.core.selection import MAX_DICE_PER_KIND, DiceSelection, parse_modifier
from dice_roller.gui.theme import Theme
from dice_roller.models.dice import DiceKind


class RollerComponent:
    """Quick-roll buttons plus the multi-dice picker."""

    def __init__(self, service, on_rolled):
        self.service = service
        self.on_rolled = on_rolled
        self.selection = DiceSelection()
        self.modifier = 0

        self.count_inputs = {}
        self.roll_button = None
        self.clear_button = None

    def render(self):
        with ui.column().classes("w-full gap-2 mb-6"):
            Theme.section_title("Quick Rolls")
            with ui.row().classes("w-full gap-2"):
                for kind in DiceKind:
                    ui.button(
                        kind.value.upper(),
                        on_click=lambda k=kind: self.quick_roll(k),
                    ).classes("bg-blue-600 px-4 font-semibold")

        with ui.card().classes(Theme.card + " mb-6"):
            with ui.row().classes("w-full items-center justify-between"):
                Theme.section_title("Dice Roll")
                self.clear_button = ui.button(
                    "Clear", on_click=self.clear_selection
                ).props("dense").classes("bg-red-600 text-sm")

            with ui.row().classes("w-full gap-4"):
                for kind in DiceKind:
                    self.count_inputs[kind] = ui.number(
                        label=kind.value.upper(),
                        value=0,
                        min=0,
                        max=MAX_DICE_PER_KIND,
                        precision=0,
                        on_change=lambda e, k=kind: self.set_count(k, e.value),
                    ).classes("w-20")

            with ui.row().classes("w-full items-end gap-4"):
                ui.number(
                    label="Modifier",
                    value=0,
                    precision=0,
                    on_change=lambda e: self.set_modifier(e.value),
                ).classes("flex-1")
                self.roll_button = ui.button(on_click=self.roll_selection).classes(
                    "flex-1 bg-purple-600 font-semibold"
                )

        self._update_controls()

    def set_count(self, kind: DiceKind, value):
        self.selection.set_count(kind, value)
        self._update_controls()

    def set_modifier(self, value):
        self.modifier = parse_modifier(value)
        self._update_controls()

    def clear_selection(self):
        self.selection.clear()
        for count_input in self.count_inputs.values():
            count_input.set_value(0)
        self._update_controls()

    def _update_controls(self):
        if not self.roll_button:
            return
        active = self.selection.has_active_dice
        self.roll_button.set_text(self.selection.button_label(self.modifier))
        self.roll_button.set_enabled(active)
        self.clear_button.set_visibility(active)

    async def quick_roll(self, kind: DiceKind):
        await self.service.quick_roll(kind)
        self.on_rolled()

    async def roll_selection(self):
        roll = await self.service.roll_selection(
            self.selection.active_specs(), self.modifier
        )
        if roll:
            self.on_rolled()
