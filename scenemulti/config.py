"""Loading and saving the list of destinations as JSON."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from .destination import DestinationConfig

log = logging.getLogger(__name__)

CONFIG_FILE_NAME = "destinations.json"

_OPTIONAL_INT_FIELDS = (
    "width",
    "height",
    "fps_num",
    "fps_den",
    "video_bitrate_kbps",
    "audio_bitrate_kbps",
    "audio_track",
)


def config_file_path(config_dir: str | Path) -> Path:
    """Return the destinations file inside ``config_dir``."""
    return Path(config_dir) / CONFIG_FILE_NAME


def _has(data: Mapping[str, Any], key: str) -> bool:
    return data.get(key) is not None


def _string(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""


def from_dict(data: Mapping[str, Any]) -> DestinationConfig:
    """Build a destination from its stored form.

    Missing numeric fields keep their defaults. When the follow flags are
    absent they are inferred from older files: an explicit scene name means
    the scene was fixed, and explicit width or bitrate means the video
    settings were fixed.
    """
    cfg = DestinationConfig(
        name=_string(data, "name"),
        scene_name=_string(data, "scene_name"),
        rtmp_url=_string(data, "rtmp_url"),
        stream_key=_string(data, "stream_key"),
    )
    video_encoder = _string(data, "video_encoder")
    if video_encoder:
        cfg.video_encoder = video_encoder
    audio_encoder = _string(data, "audio_encoder")
    if audio_encoder:
        cfg.audio_encoder = audio_encoder

    for field in _OPTIONAL_INT_FIELDS:
        if _has(data, field):
            setattr(cfg, field, int(data[field]))
    if _has(data, "enabled"):
        cfg.enabled = bool(data["enabled"])

    if _has(data, "follow_obs_scene"):
        cfg.follow_obs_scene = bool(data["follow_obs_scene"])
    else:
        cfg.follow_obs_scene = not cfg.scene_name

    if _has(data, "follow_obs_video"):
        cfg.follow_obs_video = bool(data["follow_obs_video"])
    else:
        cfg.follow_obs_video = not (_has(data, "width") or _has(data, "video_bitrate_kbps"))
    return cfg


def to_dict(config: DestinationConfig) -> dict[str, Any]:
    """Return the stored form of a destination."""
    return {
        "name": config.name,
        "scene_name": config.scene_name,
        "follow_obs_scene": config.follow_obs_scene,
        "follow_obs_video": config.follow_obs_video,
        "rtmp_url": config.rtmp_url,
        "stream_key": config.stream_key,
        "video_encoder": config.video_encoder,
        "audio_encoder": config.audio_encoder,
        "width": config.width,
        "height": config.height,
        "fps_num": config.fps_num,
        "fps_den": config.fps_den,
        "video_bitrate_kbps": config.video_bitrate_kbps,
        "audio_bitrate_kbps": config.audio_bitrate_kbps,
        "audio_track": config.audio_track,
        "enabled": config.enabled,
    }


def load_destinations(path: str | Path) -> list[DestinationConfig]:
    """Read destinations from ``path``; an absent or unreadable file gives none."""
    path = Path(path)
    if not path.is_file():
        return []
    try:
        root = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        log.warning("failed to parse %s", path)
        return []
    if not isinstance(root, Mapping):
        log.warning("failed to parse %s", path)
        return []
    items = root.get("destinations")
    if not isinstance(items, list):
        return []
    return [from_dict(item) for item in items if isinstance(item, Mapping)]


def save_destinations(dests: Iterable[DestinationConfig], path: str | Path) -> bool:
    """Write destinations to ``path``, creating its directory; report success."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        pass
    document = {"destinations": [to_dict(d) for d in dests]}
    try:
        path.write_text(json.dumps(document, indent=4), encoding="utf-8")
    except OSError:
        log.warning("failed to save %s", path)
        return False
    return True