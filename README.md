# scenemulti

Settings and storage for sending one program to several streaming
destinations at once. Each destination has its own scene, RTMP endpoint and
encoder settings. The package keeps the list of destinations on disk. It
works out the encoder, bitrate and video settings each destination streams
with, and it stores OAuth tokens for each provider.

## Modules

### `scenemulti.destination`

`DestinationConfig` is a dataclass that describes one destination. Its fields
and their defaults are:

- `name`, `scene_name`, `rtmp_url`, `stream_key`, all `""`
- `follow_obs_scene=True`, `follow_obs_video=True`
- `video_encoder="obs_x264"`, `audio_encoder="ffmpeg_aac"`
- `width=1920`, `height=1080`, `fps_num=30`, `fps_den=1`
- `video_bitrate_kbps=6000`, `audio_bitrate_kbps=160`
- `audio_track=0`, `enabled=True`

`scene_name` is ignored while `follow_obs_scene` is set. The explicit
video and audio settings are ignored while `follow_obs_video` is set.

### `scenemulti.config`

- `config_file_path(config_dir)` returns `config_dir / "destinations.json"`.
- `load_destinations(path)` reads a JSON document of the form
  `{"destinations": [...]}`. A file that is missing, unparsable or not an
  object gives an empty list. Entries that are not objects are skipped.
- `save_destinations(dests, path)` creates the parent directory and writes the
  document with an indent of 4. It returns `True` on success and `False` if the
  file could not be written.
- `from_dict(data)` and `to_dict(config)` convert a single entry. In
  `from_dict`, missing numeric fields and empty encoder names keep their
  defaults. When `follow_obs_scene` is absent, it is true only if no
  `scene_name` is stored. When `follow_obs_video` is absent, it is true only if
  neither `width` nor `video_bitrate_kbps` is stored.

Stream keys are written as given. They are not encrypted.

### `scenemulti.output_settings`

- `simple_encoder_to_id(simple_name)` maps simple-output encoder names to
  encoder ids:
  - `x264` becomes `obs_x264`
  - `nvenc` becomes `jim_nvenc`
  - `nvenc_hevc` becomes `jim_hevc_nvenc`
  - `amd` becomes `h264_texture_amf`
  - `qsv` becomes `obs_qsv11_v2`
  - `apple_h264` becomes `com.apple.videotoolbox.videoencoder.ave.avc`

  A name that is already an id, or that is unknown, is returned unchanged.
  `None` gives `obs_x264`.
- `resolve_output_settings(cfg, video_info, profile)` returns a
  `ResolvedOutput`. If `cfg.follow_obs_video` is false, the destination's own
  values are used. Otherwise the size and frame rate come from the
  `VideoInfo`, and the encoders and bitrates come from `profile`. `profile` is
  a mapping of section to key/value mapping, such as a `ConfigParser`:
  - If `[Output] Mode` is `Advanced`, the values come from `[AdvOut]`
    `Encoder`, `AudioEncoder` and `Track1Bitrate`. The video bitrate is then
    always 6000.
  - Otherwise they come from `[SimpleOutput]` `StreamEncoder`, `VBitrate` and
    `ABitrate`, and the audio encoder is `ffmpeg_aac`.
  - A bitrate that is missing or zero falls back to 6000 for video and 160 for
    audio.
  - With `profile=None` the encoders are `obs_x264` and `ffmpeg_aac`.

### `scenemulti.token_store`

`TokenStore(config_dir)` keeps an access token and a refresh token for each
provider. They are stored in `config_dir / "<provider>_tokens.dat"`, one token
per line, in plain text.

- `save(provider, access_token, refresh_token)` stores both tokens for the
  provider.
- `load(provider)` returns `(access_token, refresh_token)`. It returns `None`
  if the file is missing, has fewer than two lines, or has an empty access
  token.
- `clear(provider)` deletes the file.
- `path_for(provider)` returns the path of the file.

## Example

```python
from configparser import ConfigParser
from pathlib import Path

from scenemulti.config import config_file_path, load_destinations, save_destinations
from scenemulti.destination import DestinationConfig
from scenemulti.output_settings import VideoInfo, resolve_output_settings
from scenemulti.token_store import TokenStore

path = config_file_path(Path("config"))
dests = load_destinations(path)
dests.append(DestinationConfig(name="backup", rtmp_url="rtmp://localhost/live",
                               stream_key="placeholder"))
save_destinations(dests, path)

profile = ConfigParser()
profile.read_string("[SimpleOutput]\nStreamEncoder = nvenc\nVBitrate = 4500\n")
out = resolve_output_settings(dests[-1], VideoInfo(1280, 720, 60, 1), profile)
print(out.video_encoder_id, out.video_bitrate_kbps, out.width, out.height)

store = TokenStore(Path("config"))
store.save("twitch", "token", "token")
print(store.load("twitch"))
```

## What it does not do

- It does not start or stop streams, and it does not build RTMP outputs.
- It has no HTTP client and no OAuth login flow.
- It does not talk to any streaming platform's API.
- It has no user interface and no command-line command.

Its job is to describe destinations, to store them and their tokens, and to
decide which output settings apply.

## Tests

```
pip install -e .[test]
pytest
```