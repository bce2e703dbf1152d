import os

from dice_roller.gui.main import run
from dice_roller.utils.logger_config import setup_logging
from dotenv import load_dotenv


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in {"1", "true", "yes"}


# Allow __mp_main__ for NiceGUI reload/multiprocessing on Windows
if __name__ in {"__main__", "__mp_main__"}:
    load_dotenv()
    setup_logging()
    run(
        os.environ.get("DICE_DB_PATH", "dice_rolls.db"),
        os.environ.get("DICE_DATA_DIR", ".dice_data"),
        demote_on_write_failure=_env_flag("DICE_DEMOTE_ON_PRIMARY_FAILURE"),
        native=_env_flag("DICE_NATIVE"),
    )
