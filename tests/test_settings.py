import json

from audio.playback import ClickPlayer
from storage.settings import AppSettings, SettingsManager


def test_defaults_when_file_missing(tmp_path):
    manager = SettingsManager(tmp_path / "data")
    assert manager.data_dir.is_dir()
    assert manager.load() == AppSettings()


def test_save_and_load(tmp_path):
    manager = SettingsManager(tmp_path)
    settings = AppSettings(seed=11, kiosk_mode=True, click_sound=False)
    manager.save(settings)

    assert json.loads(manager.path.read_text(encoding="utf-8"))["seed"] == 11
    assert manager.load() == settings


def test_unknown_keys_ignored(tmp_path):
    manager = SettingsManager(tmp_path)
    manager.path.write_text(json.dumps({"seed": 3, "ollama_model": "x"}), encoding="utf-8")

    loaded = manager.load()

    assert loaded.seed == 3
    assert not hasattr(loaded, "ollama_model")


def test_corrupt_file_falls_back_to_defaults(tmp_path, caplog):
    manager = SettingsManager(tmp_path)
    manager.path.write_text("{not json", encoding="utf-8")

    assert manager.load() == AppSettings()
    assert "using defaults" in caplog.text


def test_non_object_json_falls_back_to_defaults(tmp_path):
    manager = SettingsManager(tmp_path)
    manager.path.write_text("[1, 2]", encoding="utf-8")

    assert manager.load() == AppSettings()


def test_wrong_types_fall_back_to_defaults(tmp_path, caplog):
    manager = SettingsManager(tmp_path)
    manager.path.write_text(
        json.dumps(
            {
                "click_volume": "loud",
                "window_width": "wide",
                "seed": [1, 2],
                "kiosk_mode": 1,
                "click_sound": "no",
                "window_height": True,
                "log_level": "DEBUG",
            }
        ),
        encoding="utf-8",
    )

    loaded = manager.load()
    defaults = AppSettings()

    assert loaded.click_volume == defaults.click_volume
    assert loaded.window_width == defaults.window_width
    assert loaded.window_height == defaults.window_height
    assert loaded.seed is None
    assert loaded.kiosk_mode is False
    assert loaded.click_sound is True
    assert loaded.log_level == "DEBUG"
    assert "click_volume" in caplog.text
    # the result must be usable where the values end up
    ClickPlayer(volume=loaded.click_volume)


def test_int_volume_and_null_seed_accepted(tmp_path):
    manager = SettingsManager(tmp_path)
    manager.path.write_text(json.dumps({"click_volume": 1, "seed": None, "window_width": 1280}), encoding="utf-8")

    loaded = manager.load()

    assert loaded.click_volume == 1.0
    assert isinstance(loaded.click_volume, float)
    assert loaded.seed is None
    assert loaded.window_width == 1280
