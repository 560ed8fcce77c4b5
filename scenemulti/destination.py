"""Settings for one streaming destination."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DestinationConfig:
    """A single RTMP destination and how its output is produced.

    ``scene_name`` is ignored while ``follow_obs_scene`` is set, and the
    explicit video/audio settings are ignored while ``follow_obs_video``
    is set.
    """

    name: str = ""
    scene_name: str = ""
    follow_obs_scene: bool = True
    follow_obs_video: bool = True
    rtmp_url: str = ""
    stream_key: str = ""
    video_encoder: str = "obs_x264"
    audio_encoder: str = "ffmpeg_aac"
    width: int = 1920
    height: int = 1080
    fps_num: int = 30
    fps_den: int = 1
    video_bitrate_kbps: int = 6000
    audio_bitrate_kbps: int = 160
    audio_track: int = 0
    enabled: bool = True