import io

import pytest

from tilequest.settings import (
    APP_SETTINGS_PATH,
    AppSettings,
    load_from_file,
    load_from_stream,
    save_to_file,
    save_to_stream,
)


def _dump(settings):
    buffer = io.StringIO()
    save_to_stream(buffer, settings)
    return buffer.getvalue()


def test_default_output_format():
    assert _dump(AppSettings()) == (
        "fullscreen 0\n"
        "window_scale 5\n"
        "vsync 0\n"
        "volume_master 1\n"
        "volume_music 1\n"
        "volume_sound 1\n"
    )


def test_stream_round_trip():
    original = AppSettings(
        fullscreen=True, window_scale=3, vsync=True,
        volume_master=0.5, volume_music=0.25, volume_sound=0.75,
    )
    loaded = load_from_stream(io.StringIO(_dump(original)))
    assert loaded == original


def test_missing_keys_keep_base_values():
    base = AppSettings(window_scale=2, volume_music=0.5)
    loaded = load_from_stream(io.StringIO("vsync 1\n"), base)
    assert loaded.vsync is True
    assert loaded.window_scale == 2
    assert loaded.volume_music == 0.5


def test_unknown_keys_and_blank_lines_ignored():
    text = "\nbrightness 9\n  fullscreen 1\n"
    loaded = load_from_stream(io.StringIO(text))
    assert loaded == AppSettings(fullscreen=True)


def test_invalid_values_become_zero():
    loaded = load_from_stream(io.StringIO("window_scale abc\nvolume_sound xyz\n"))
    assert loaded.window_scale == 0
    assert loaded.volume_sound == 0.0


def test_base_settings_not_mutated():
    base = AppSettings()
    load_from_stream(io.StringIO("fullscreen 1\n"), base)
    assert base.fullscreen is False


def test_file_round_trip(tmp_path):
    path = tmp_path / APP_SETTINGS_PATH
    original = AppSettings(fullscreen=True, volume_master=0.5)
    save_to_file(path, original)
    assert load_from_file(path) == original


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_from_file(tmp_path / "absent.txt")