from nicegui import ui, app
import logging
from dice_roller.database.roll_store import SqliteRollStore
from dice_roller.gui.theme import Theme
from dice_roller.services.dice_service import DiceService
from dice_roller.services.history_service import RollHistory
from dice_roller.services.named_roll_service import NamedRollStore
from dice_roller.storage.key_value_store import LocalKeyValueStore

# Components
from dice_roller.gui.components.history import HistoryComponent
from dice_roller.gui.components.presets import PresetBrowserComponent
from dice_roller.gui.components.roller import RollerComponent

logger = logging.getLogger(__name__)


def build_service(
    db_path: str, data_dir: str, demote_on_write_failure: bool = False
) -> DiceService:
    local_store = LocalKeyValueStore(data_dir)
    history = RollHistory(
        SqliteRollStore(db_path),
        local_store,
        demote_on_write_failure=demote_on_write_failure,
    )
    return DiceService(history, NamedRollStore(local_store))


def init_gui(db_path: str, data_dir: str, demote_on_write_failure: bool = False):
    # 1. One service per process; history loads once the event loop is running
    app.dice_service = build_service(db_path, data_dir, demote_on_write_failure)

    async def load_history():
        await app.dice_service.history.initialize()
        logger.info(f"History tier: {app.dice_service.history.tier.value}")

    app.on_startup(load_history)

    @ui.page("/")
    def main_page():
        Theme.apply_global_styles()
        service = app.dice_service

        # --- Init Components ---
        history_comp = HistoryComponent(service)
        presets_comp = PresetBrowserComponent(service, on_rolled=history_comp.refresh)
        roller_comp = RollerComponent(service, on_rolled=history_comp.refresh)
        history_comp.on_presets_changed = presets_comp.refresh

        # --- Layout ---
        with Theme.header():
            ui.label("D&D 5e Dice Roller").classes(
                "text-2xl font-bold " + Theme.text_accent
            )
            ui.space()
            ui.button(icon="power_settings_new", on_click=app.shutdown).props(
                "flat dense round color=red"
            )

        with ui.column().classes("w-full max-w-4xl mx-auto p-4 gap-0"):
            roller_comp.render()
            presets_comp.render()
            history_comp.render()


def run(db_path: str, data_dir: str, demote_on_write_failure: bool = False, native: bool = False):
    init_gui(db_path, data_dir, demote_on_write_failure)
    ui.run(title="Dice Roller", dark=True, reload=False, native=native)
