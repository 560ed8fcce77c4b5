import json

from scenemulti.config import (
    config_file_path,
    from_dict,
    load_destinations,
    save_destinations,
    to_dict,
)
from scenemulti.destination import DestinationConfig


def _sample():
    return DestinationConfig(
        name="backup",
        scene_name="Scene 2",
        follow_obs_scene=False,
        follow_obs_video=False,
        rtmp_url="rtmp://localhost/live",
        stream_key="placeholder",
        video_encoder="jim_nvenc",
        width=1280,
        height=720,
        video_bitrate_kbps=4500,
        audio_track=2,
        enabled=False,
    )


def test_config_file_path(tmp_path):
    path = config_file_path(tmp_path)
    assert path.name == "destinations.json"
    assert path.parent == tmp_path


def test_dict_round_trip():
    cfg = _sample()
    assert from_dict(to_dict(cfg)) == cfg


def test_to_dict_holds_every_field():
    data = to_dict(DestinationConfig())
    assert data["video_encoder"] == "obs_x264"
    assert data["audio_encoder"] == "ffmpeg_aac"
    assert data["follow_obs_scene"] is True
    assert len(data) == 16


def test_from_empty_dict_gives_defaults():
    assert from_dict({}) == DestinationConfig()


def test_explicit_scene_without_flag_disables_follow_scene():
    cfg = from_dict({"scene_name": "Scene 2"})
    assert cfg.follow_obs_scene is False
    assert cfg.scene_name == "Scene 2"


def test_width_without_flag_disables_follow_video():
    cfg = from_dict({"width": 1280})
    assert cfg.follow_obs_video is False
    assert cfg.width == 1280


def test_bitrate_without_flag_disables_follow_video():
    cfg = from_dict({"video_bitrate_kbps": 3000})
    assert cfg.follow_obs_video is False


def test_height_alone_keeps_follow_video():
    cfg = from_dict({"height": 720})
    assert cfg.follow_obs_video is True
    assert cfg.height == 720


def test_explicit_flags_win():
    cfg = from_dict({"scene_name": "Scene 2", "follow_obs_scene": True, "width": 640, "follow_obs_video": True})
    assert cfg.follow_obs_scene is True
    assert cfg.follow_obs_video is True


def test_empty_encoder_keeps_default():
    cfg = from_dict({"video_encoder": "", "audio_encoder": ""})
    assert cfg.video_encoder == "obs_x264"
    assert cfg.audio_encoder == "ffmpeg_aac"


def test_save_and_load(tmp_path):
    path = config_file_path(tmp_path / "nested" / "dir")
    dests = [_sample(), DestinationConfig(name="main", rtmp_url="rtmp://localhost/app")]
    assert save_destinations(dests, path) is True
    assert load_destinations(path) == dests


def test_saved_file_layout(tmp_path):
    path = tmp_path / "destinations.json"
    save_destinations([DestinationConfig(name="main")], path)
    root = json.loads(path.read_text())
    assert [item["name"] for item in root["destinations"]] == ["main"]


def test_load_missing_file(tmp_path):
    assert load_destinations(tmp_path / "absent.json") == []


def test_load_invalid_json(tmp_path):
    path = tmp_path / "destinations.json"
    path.write_text("{not json")
    assert load_destinations(path) == []


def test_load_without_destinations_key(tmp_path):
    path = tmp_path / "destinations.json"
    path.write_text(json.dumps({"other": 1}))
    assert load_destinations(path) == []


def test_load_skips_non_objects(tmp_path):
    path = tmp_path / "destinations.json"
    path.write_text(json.dumps({"destinations": [None, {"name": "main"}, 5]}))
    loaded = load_destinations(path)
    assert [d.name for d in loaded] == ["main"]


def test_save_fails_when_parent_is_file(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    assert save_destinations([DestinationConfig()], blocker / "destinations.json") is False