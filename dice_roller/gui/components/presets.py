from nicegui import ui

from dice_roller.core.formatting import format_expression
from dice_roller.data.common_rolls import COMMON_ROLLS
from dice_roller.gui.theme import Theme


class PresetBrowserComponent:
    """Built-in categories plus the user's saved presets."""

    def __init__(self, service, on_rolled):
        self.service = service
        self.on_rolled = on_rolled
        self.container = None

    def render(self):
        self.container = ui.column().classes("w-full gap-2 mb-6")
        self.refresh()

    def refresh(self):
        if not self.container:
            return

        self.container.clear()
        with self.container:
            Theme.section_title("Common Rolls")

            for category in COMMON_ROLLS:
                with ui.expansion(category.name, icon="casino").classes(
                    "w-full bg-slate-800 border border-slate-700 rounded"
                ):
                    for preset in category.rolls:
                        self._render_preset(preset)

            user_presets = self.service.named_rolls.list()
            with ui.expansion(
                f"My Rolls ({len(user_presets)})", icon="bookmark"
            ).classes("w-full bg-slate-800 border border-slate-700 rounded"):
                if not user_presets:
                    ui.label("Save a custom roll from history to see it here.").classes(
                        "text-xs italic " + Theme.text_secondary
                    )
                for preset in user_presets:
                    self._render_preset(preset, deletable=True)

    def _render_preset(self, preset, deletable: bool = False):
        with ui.row().classes("w-full items-center justify-between p-1"):
            with ui.column().classes("gap-0"):
                ui.label(preset.name).classes("font-bold text-sm")
                detail = format_expression(preset.dice, preset.modifier)
                if preset.description:
                    detail = f"{detail} ({preset.description})"
                ui.label(detail).classes("text-xs " + Theme.text_secondary)

            with ui.row().classes("gap-1"):
                ui.button(
                    icon="casino", on_click=lambda p=preset: self.roll(p)
                ).props("flat dense round").classes("text-amber-400").tooltip("Roll")
                if deletable:
                    ui.button(
                        icon="delete", on_click=lambda p=preset: self.delete(p.name)
                    ).props("flat dense round").classes("text-red-500").tooltip(
                        "Delete preset"
                    )

    async def roll(self, preset):
        await self.service.roll_preset(preset)
        self.on_rolled()

    def delete(self, name: str):
        self.service.delete_preset(name)
        ui.notify(f"Deleted '{name}'")
        self.refresh()
