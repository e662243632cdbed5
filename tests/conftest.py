"""Test configuration and fixtures."""

from pathlib import Path
from typing import Iterable
from unittest.mock import Mock

import pytest
import requests

from artwall.artwork import ArtworkCache, MetadataResolver, OEmbedClient, build_session
from artwall.artwork.reference import ArtworkReference
from artwall.bus import PresenceDetector, SessionBus
from artwall.config import Config, WallpaperState
from artwall.constants import PLAYER_SERVICE
from artwall.poll_loop import PollLoop
from artwall.wallpaper import PlasmaWallpaperApplier


TRACK_URL = "https://open.spotify.com/track/4uLU6hMCjMI75M1A2tKUQC"
THUMBNAIL_URL = "https://x/img123.jpg"


def make_json_response(payload) -> Mock:
    """Fake oEmbed response carrying a JSON body."""
    response = Mock()
    response.status_code = 200
    response.raise_for_status.return_value = None
    response.json.return_value = payload
    return response


def make_image_response(chunks: Iterable[bytes], status_code: int = 200) -> Mock:
    """Fake streaming image response."""
    response = Mock()
    response.status_code = status_code
    if status_code >= 400:
        error = requests.HTTPError(f"{status_code} Error")
        error.response = response
        response.raise_for_status.side_effect = error
    else:
        response.raise_for_status.return_value = None
    response.iter_content.return_value = list(chunks)
    return response


def oembed_body(thumbnail_url: str = THUMBNAIL_URL) -> dict:
    """oEmbed payload as returned by open.spotify.com."""
    return {
        "html": "<iframe></iframe>",
        "type": "rich",
        "thumbnail_url": thumbnail_url,
        "provider_name": "Spotify",
    }


def route_get(thumbnail_chunks: Iterable[bytes] = (b"\xff\xd8jpeg-bytes",)):
    """
    side_effect for session.get: oEmbed URLs get JSON, anything else an image.
    """
    chunks = list(thumbnail_chunks)
    
    def _get(url, **kwargs):
        if "oembed" in url:
            return make_json_response(oembed_body())
        return make_image_response(chunks)
    return _get


@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    """Isolated artwork cache directory."""
    return tmp_path / "wallpapers"


@pytest.fixture
def config(cache_dir: Path) -> Config:
    """Config pointing at the temporary cache directory."""
    return Config.load(cache_dir=cache_dir, poll_interval=0.01)


@pytest.fixture
def session(config: Config) -> requests.Session:
    """Real session; tests patch its get method."""
    return build_session(config.http)


@pytest.fixture
def cache(config: Config, session: requests.Session) -> ArtworkCache:
    return ArtworkCache(config.cache, config.http, session)


@pytest.fixture
def default_reference(cache: ArtworkCache) -> ArtworkReference:
    return cache.default_reference


@pytest.fixture
def resolver(config: Config, cache: ArtworkCache, session: requests.Session) -> MetadataResolver:
    return MetadataResolver(cache, OEmbedClient(config.http, session))


@pytest.fixture
def bus() -> Mock:
    """Session bus with Spotify running and playing TRACK_URL."""
    fake = Mock(spec=SessionBus)
    fake.list_names.return_value = ["org.freedesktop.DBus", PLAYER_SERVICE]
    fake.get_property.return_value = {
        "mpris:trackid": "spotify:track:4uLU6hMCjMI75M1A2tKUQC",
        "xesam:url": TRACK_URL,
        "xesam:title": "Test Song",
    }
    fake.call_method.return_value = None
    return fake


@pytest.fixture
def poll_loop(bus: Mock, resolver: MetadataResolver, default_reference: ArtworkReference) -> PollLoop:
    return PollLoop(
        bus=bus,
        detector=PresenceDetector(),
        resolver=resolver,
        applier=PlasmaWallpaperApplier(),
        state=WallpaperState.initial(default_reference),
        interval=0.01,
    )
