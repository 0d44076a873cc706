"""Application settings and their plain-text key/value file format."""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO, Union

APP_SETTINGS_PATH = "settings.txt"

_INT_PREFIX = re.compile(r"\+?\d+")
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass
class AppSettings:
    fullscreen: bool = False
    window_scale: int = 5  # window size relative to the game framebuffer size
    vsync: bool = False
    volume_master: float = 1.0
    volume_music: float = 1.0
    volume_sound: float = 1.0


def _format_float(value: float) -> str:
    return format(value, "g")


def save_to_stream(stream: TextIO, settings: AppSettings) -> None:
    """Write the settings as one "key value" line each."""
    stream.write(f"fullscreen {int(settings.fullscreen)}\n")
    stream.write(f"window_scale {settings.window_scale}\n")
    stream.write(f"vsync {int(settings.vsync)}\n")
    stream.write(f"volume_master {_format_float(settings.volume_master)}\n")
    stream.write(f"volume_music {_format_float(settings.volume_music)}\n")
    stream.write(f"volume_sound {_format_float(settings.volume_sound)}\n")


def _parse_bool(token: str) -> bool:
    match = re.match(r"[+-]?\d+", token)
    if not match:
        return False
    return int(match.group()) != 0


def _parse_uint(token: str) -> int:
    match = _INT_PREFIX.match(token)
    return int(match.group()) if match else 0


def _parse_float(token: str) -> float:
    match = _FLOAT_PREFIX.match(token)
    return float(match.group()) if match else 0.0


_PARSERS = {
    "fullscreen": _parse_bool,
    "window_scale": _parse_uint,
    "vsync": _parse_bool,
    "volume_master": _parse_float,
    "volume_music": _parse_float,
    "volume_sound": _parse_float,
}


def load_from_stream(stream: TextIO, settings: Optional[AppSettings] = None) -> AppSettings:
    """Read settings, starting from the given ones; unknown keys are ignored."""
    values = dataclasses.asdict(settings if settings is not None else AppSettings())
    for line in stream:
        tokens = line.split()
        if not tokens:
            continue
        key = tokens[0]
        parser = _PARSERS.get(key)
        if parser is None or len(tokens) < 2:
            continue
        values[key] = parser(tokens[1])
    return AppSettings(**values)


def save_to_file(path: Union[str, Path], settings: AppSettings) -> None:
    with open(path, "w", encoding="utf-8") as stream:
        save_to_stream(stream, settings)


def load_from_file(
    path: Union[str, Path], settings: Optional[AppSettings] = None
) -> AppSettings:
    """Load settings from a file; raises OSError if it cannot be read."""
    with open(path, encoding="utf-8") as stream:
        return load_from_stream(stream, settings)