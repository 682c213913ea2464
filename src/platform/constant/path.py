from pathlib import Path


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent

# Log directory
LOG_DIR = BASE_DIR / 'logs'

# Static menu catalog shipped with the restaurant service
DEFAULT_MENU_DATA_PATH = (
    BASE_DIR / 'src' / 'service' / 'restaurant' / 'driven_adapter' / 'menu' / 'menu_data.json'
)
