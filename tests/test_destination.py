from dataclasses import replace

from scenemulti.destination import DestinationConfig


def test_default_encoders_and_video():
    cfg = DestinationConfig()
    assert cfg.video_encoder == "obs_x264"
    assert cfg.audio_encoder == "ffmpeg_aac"
    assert (cfg.width, cfg.height) == (1920, 1080)
    assert (cfg.fps_num, cfg.fps_den) == (30, 1)


def test_default_bitrates_and_flags():
    cfg = DestinationConfig()
    assert cfg.video_bitrate_kbps == 6000
    assert cfg.audio_bitrate_kbps == 160
    assert cfg.audio_track == 0
    assert cfg.enabled is True
    assert cfg.follow_obs_scene is True
    assert cfg.follow_obs_video is True


def test_default_strings_empty():
    cfg = DestinationConfig()
    assert cfg.name == ""
    assert cfg.scene_name == ""
    assert cfg.rtmp_url == ""
    assert cfg.stream_key == ""


def test_equality_and_replace():
    a = DestinationConfig(name="main", rtmp_url="rtmp://localhost/live")
    b = DestinationConfig(name="main", rtmp_url="rtmp://localhost/live")
    assert a == b
    c = replace(a, enabled=False)
    assert c.enabled is False
    assert a.enabled is True
    assert c.name == a.name