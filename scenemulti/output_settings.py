"""Resolve the encoder, bitrate and video settings a destination streams with."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .destination import DestinationConfig

DEFAULT_VIDEO_ENCODER = "obs_x264"
DEFAULT_AUDIO_ENCODER = "ffmpeg_aac"
DEFAULT_VIDEO_BITRATE_KBPS = 6000
DEFAULT_AUDIO_BITRATE_KBPS = 160

_SIMPLE_ENCODER_IDS = {
    "x264": "obs_x264",
    "obs_x264": "obs_x264",
    "nvenc": "jim_nvenc",
    "jim_nvenc": "jim_nvenc",
    "nvenc_hevc": "jim_hevc_nvenc",
    "jim_hevc_nvenc": "jim_hevc_nvenc",
    "amd": "h264_texture_amf",
    "h264_texture_amf": "h264_texture_amf",
    "qsv": "obs_qsv11_v2",
    "obs_qsv11_v2": "obs_qsv11_v2",
    "apple_h264": "com.apple.videotoolbox.videoencoder.ave.avc",
    "com.apple.videotoolbox.videoencoder.ave.avc": "com.apple.videotoolbox.videoencoder.ave.avc",
}


@dataclass(frozen=True)
class VideoInfo:
    """The base canvas size and frame rate of the running video pipeline."""

    base_width: int = 1920
    base_height: int = 1080
    fps_num: int = 30
    fps_den: int = 1


@dataclass
class ResolvedOutput:
    """The concrete settings an output is built with."""

    video_encoder_id: str = ""
    audio_encoder_id: str = ""
    video_bitrate_kbps: int = DEFAULT_VIDEO_BITRATE_KBPS
    audio_bitrate_kbps: int = DEFAULT_AUDIO_BITRATE_KBPS
    width: int = 1920
    height: int = 1080
    fps_num: int = 30
    fps_den: int = 1


def simple_encoder_to_id(simple_name: str | None) -> str:
    """Map a simple-output encoder name to an encoder id; unknown names pass through."""
    if simple_name is None:
        return DEFAULT_VIDEO_ENCODER
    return _SIMPLE_ENCODER_IDS.get(simple_name, simple_name)


Profile = Mapping[str, Mapping[str, Any]]


def _profile_string(profile: Profile, section: str, key: str) -> str | None:
    if section not in profile:
        return None
    value = profile[section].get(key)
    return None if value is None else str(value)


def _profile_int(profile: Profile, section: str, key: str) -> int:
    value = _profile_string(profile, section, key)
    if value is None:
        return 0
    try:
        return int(value.strip())
    except ValueError:
        return 0


def resolve_output_settings(
    cfg: DestinationConfig,
    video_info: VideoInfo,
    profile: Profile | None,
) -> ResolvedOutput:
    """Work out the output settings for ``cfg``.

    When the destination follows the main video settings, encoders and
    bitrates come from the active ``profile`` (a mapping of section name to
    key/value mapping, such as a ``ConfigParser``) and size and frame rate
    from ``video_info``. Otherwise the destination's own values are used.
    """
    if not cfg.follow_obs_video:
        return ResolvedOutput(
            video_encoder_id=cfg.video_encoder,
            audio_encoder_id=cfg.audio_encoder,
            video_bitrate_kbps=cfg.video_bitrate_kbps,
            audio_bitrate_kbps=cfg.audio_bitrate_kbps,
            width=cfg.width,
            height=cfg.height,
            fps_num=cfg.fps_num,
            fps_den=cfg.fps_den,
        )

    resolved = ResolvedOutput(
        width=video_info.base_width,
        height=video_info.base_height,
        fps_num=video_info.fps_num,
        fps_den=video_info.fps_den,
    )

    if profile is None:
        resolved.video_encoder_id = DEFAULT_VIDEO_ENCODER
        resolved.audio_encoder_id = DEFAULT_AUDIO_ENCODER
        return resolved

    if _profile_string(profile, "Output", "Mode") == "Advanced":
        encoder = _profile_string(profile, "AdvOut", "Encoder")
        resolved.video_encoder_id = DEFAULT_VIDEO_ENCODER if encoder is None else encoder
        # The advanced-mode video bitrate is kept outside the profile.
        resolved.video_bitrate_kbps = DEFAULT_VIDEO_BITRATE_KBPS
        audio_encoder = _profile_string(profile, "AdvOut", "AudioEncoder")
        resolved.audio_encoder_id = DEFAULT_AUDIO_ENCODER if audio_encoder is None else audio_encoder
        resolved.audio_bitrate_kbps = (
            _profile_int(profile, "AdvOut", "Track1Bitrate") or DEFAULT_AUDIO_BITRATE_KBPS
        )
    else:
        resolved.video_encoder_id = simple_encoder_to_id(
            _profile_string(profile, "SimpleOutput", "StreamEncoder")
        )
        resolved.video_bitrate_kbps = (
            _profile_int(profile, "SimpleOutput", "VBitrate") or DEFAULT_VIDEO_BITRATE_KBPS
        )
        resolved.audio_encoder_id = DEFAULT_AUDIO_ENCODER
        resolved.audio_bitrate_kbps = (
            _profile_int(profile, "SimpleOutput", "ABitrate") or DEFAULT_AUDIO_BITRATE_KBPS
        )
    return resolved