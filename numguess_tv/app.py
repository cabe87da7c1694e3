import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from PySide6.QtCore import QObject
from PySide6.QtWidgets import QApplication

from ui.main_window import MainWindow
from ui.theme import apply_theme
from storage.settings import SettingsManager, AppSettings
from audio.playback import ClickPlayer
from games.guess_number import GameState
from games.keypad import Keypad

LOG = logging.getLogger("numguess")


class GameController(QObject):
    def __init__(self, settings: AppSettings, rng=None):
        super().__init__()
        self.settings = settings
        self.state = GameState(rng=rng, seed=settings.seed)
        self.keypad = Keypad()
        self.clicker = ClickPlayer(
            enabled=settings.click_sound,
            volume=settings.click_volume,
            device=settings.speaker_device,
        )

        self.ui = MainWindow(self.keypad)
        self.ui.resize(settings.window_width, settings.window_height)
        self.ui.keyActivated.connect(self.handle_key)
        self.state.subscribe(self.ui.on_state_changed)
        self.state.subscribe(self._log_change)

    def start(self):
        self.ui.set_kiosk_mode(self.settings.kiosk_mode)
        self.ui.show()
        self.new_game()
        self.ui.focus_first_key()

    def new_game(self):
        self.state.reset()
        LOG.info("New game started")

    def handle_key(self, label: str):
        self.clicker.play()
        self.keypad.activate(self.state, label)

    def _log_change(self, field: str, value):
        if field == "attempts" and value:
            LOG.info("Guess %s submitted (attempt %d): %s", self.state.input, value, self.state.feedback)
        elif field == "game_over" and value:
            LOG.info("Solved in %d attempts", self.state.attempts)

    def shutdown(self):
        self.state.unsubscribe(self.ui.on_state_changed)
        self.state.unsubscribe(self._log_change)
        self.clicker.stop()


def setup_logging(data_dir: Path, level: str = "INFO"):
    log_path = data_dir / "numguess.log"
    logging.basicConfig(
        level=_level(level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.FileHandler(log_path, encoding="utf-8"), logging.StreamHandler(sys.stdout)],
    )


def set_log_level(level: str):
    logging.getLogger().setLevel(_level(level))


def _level(name) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="numguess-tv", description="Guess the number with a remote-friendly keypad.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the secret number")
    parser.add_argument("--kiosk", action="store_true", default=None, help="start fullscreen")
    parser.add_argument("--no-sound", dest="sound", action="store_false", default=None, help="disable key clicks")
    parser.add_argument("--data-dir", type=Path, default=None, help="directory for settings.json and the log")
    args, _ = parser.parse_known_args(argv)
    return args


def apply_overrides(settings: AppSettings, args) -> AppSettings:
    settings = replace(settings)
    if args.seed is not None:
        settings.seed = args.seed
    if args.kiosk is not None:
        settings.kiosk_mode = args.kiosk
    if args.sound is not None:
        settings.click_sound = args.sound
    return settings


def load_settings(args) -> AppSettings:
    settings_manager = SettingsManager(args.data_dir)
    # logging goes first so a broken settings file is reported in the log
    setup_logging(settings_manager.data_dir)
    settings = apply_overrides(settings_manager.load(), args)
    set_log_level(settings.log_level)
    return settings


def main():
    settings = load_settings(parse_args(sys.argv[1:]))

    app = QApplication(sys.argv)
    apply_theme(app)

    controller = GameController(settings)
    controller.start()

    app.aboutToQuit.connect(controller.shutdown)
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
