"""
Buzzsaw Configuration

Centralized settings, paths, and constants for the application.
"""

from pathlib import Path
from dataclasses import dataclass
import appdirs


# Application info
APP_NAME = "Buzzsaw"
APP_AUTHOR = "Buzzsaw"
APP_VERSION = "1.0.0"


@dataclass(frozen=True)
class Paths:
    """Application paths."""
    # Data directory (stores database)
    data_dir: Path = Path(appdirs.user_data_dir(APP_NAME, APP_AUTHOR))

    # Config directory (stores user preferences)
    config_dir: Path = Path(appdirs.user_config_dir(APP_NAME, APP_AUTHOR))

    # Log directory
    log_dir: Path = Path(appdirs.user_log_dir(APP_NAME, APP_AUTHOR))

    # Bundled sound cues
    sounds_dir: Path = Path(__file__).parent / "sounds"

    @property
    def database(self) -> Path:
        return self.data_dir / "buzzsaw.db"

    @property
    def database_url(self) -> str:
        return f"sqlite:///{self.database}"

    @property
    def log_file(self) -> Path:
        return self.log_dir / "buzzsaw.log"

    def ensure_directories(self) -> None:
        """Create all required directories."""
        for dir_path in [self.data_dir, self.config_dir, self.log_dir]:
            dir_path.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class RoundSettings:
    """Round timing settings."""
    # Countdown length in whole seconds
    countdown_seconds: int = 5

    # Countdown tick interval in milliseconds
    tick_interval_ms: int = 1000

    # Early-buzzer lockout after the floor opens, in milliseconds
    grace_period_ms: int = 250

    # Size of the fixed roster created on first launch
    default_player_count: int = 3


@dataclass(frozen=True)
class DeviceSettings:
    """USB button settings (Delcom USB HID buttons)."""
    vendor_id: int = 0x0FC5
    product_id: int = 0xB080

    # Report byte that is non-zero while the button is held
    press_byte_index: int = 3

    # Maximum report size read per call
    report_size: int = 64

    # Read timeout so reader threads can notice a stop request
    read_timeout_ms: int = 100

    # Delay between window creation and device discovery
    startup_delay_ms: int = 1000


@dataclass(frozen=True)
class UISettings:
    """UI-related settings."""
    # Host console default size
    host_width: int = 900
    host_height: int = 700

    # Board display default size
    board_width: int = 800
    board_height: int = 600

    # Application-wide shortcuts
    open_floor_shortcut: str = "Ctrl+Shift+O"
    reset_shortcut: str = "Ctrl+Shift+R"

    # Number of queue entries shown on the board
    board_queue_rows: int = 3


# Singleton instances
PATHS = Paths()
ROUND_SETTINGS = RoundSettings()
DEVICE_SETTINGS = DeviceSettings()
UI_SETTINGS = UISettings()


def init_config() -> None:
    """Initialize configuration and create required directories."""
    PATHS.ensure_directories()
