"""
Step definitions for the poll loop feature.

Drives PollLoop.tick() against a mocked session bus and HTTP session.
"""

from unittest.mock import patch

import pytest
import requests
from pytest_bdd import scenarios, given, when, then, parsers

from artwall.artwork.reference import ArtworkReference
from artwall.constants import PLAYER_SERVICE

from conftest import make_image_response, make_json_response, oembed_body

scenarios("../features/poll_loop.feature")


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def world():
    """Scenario state shared between steps."""
    return {
        "thumbnail_url": "https://x/img123.jpg",
        "downloads_fail": False,
    }


@pytest.fixture
def http(poll_loop, world):
    """Patched session.get answering oEmbed lookups and image downloads."""
    def _get(url, **kwargs):
        if "oembed" in url:
            return make_json_response(oembed_body(world["thumbnail_url"]))
        if world["downloads_fail"]:
            raise requests.ConnectionError("Connection refused")
        return make_image_response([b"\xff\xd8image"])
    
    with patch.object(poll_loop.resolver.cache.session, "get", side_effect=_get) as mock_get:
        yield mock_get


def _image_calls(http):
    return [c for c in http.call_args_list if "oembed" not in c.args[0]]


def _apply_scripts(bus):
    return [c.args[4] for c in bus.call_method.call_args_list if c.args[3] == "evaluateScript"]


# ============================================================================
# Given Steps
# ============================================================================

@given("Spotify is running and playing a track")
def given_spotify_running(bus):
    bus.list_names.return_value = ["org.freedesktop.DBus", PLAYER_SERVICE]


@given("Spotify is not running")
def given_spotify_not_running(bus):
    bus.list_names.return_value = ["org.freedesktop.DBus", "org.kde.plasmashell"]


@given(parsers.parse('the oEmbed thumbnail is "{url}"'))
def given_thumbnail(world, url):
    world["thumbnail_url"] = url


@given("the artwork is not cached")
def given_not_cached(cache_dir):
    assert not cache_dir.exists() or not any(cache_dir.iterdir())


@given(parsers.parse('the artwork "{name}" is already cached'))
def given_cached(cache_dir, name):
    cache_dir.mkdir(parents=True, exist_ok=True)
    (cache_dir / name).write_bytes(b"cached image")


@given("image downloads fail")
def given_downloads_fail(world):
    world["downloads_fail"] = True


# ============================================================================
# When Steps
# ============================================================================

@when("the poll loop ticks")
def when_tick(poll_loop, http):
    poll_loop.tick()


@when(parsers.parse("the poll loop ticks {count:d} times"))
def when_tick_times(poll_loop, http, count):
    for _ in range(count):
        poll_loop.tick()


@when("Spotify quits")
def when_spotify_quits(bus):
    bus.list_names.return_value = ["org.freedesktop.DBus"]


# ============================================================================
# Then Steps
# ============================================================================

@then(parsers.parse('the image is downloaded once to "{name}"'))
def then_downloaded_once(http, cache_dir, name):
    assert len(_image_calls(http)) == 1
    assert (cache_dir / name).is_file()


@then("no image is downloaded")
def then_no_download(http):
    assert _image_calls(http) == []


@then(parsers.parse('the wallpaper script is sent once with "{name}"'))
def then_script_sent_once(bus, cache_dir, name):
    scripts = _apply_scripts(bus)
    assert len(scripts) == 1
    assert f'"file://{cache_dir / name}"' in scripts[0]


@then("the wallpaper script is never sent")
def then_script_never_sent(bus):
    assert _apply_scripts(bus) == []


@then(parsers.parse('the applied artwork is "{name}"'))
def then_applied(poll_loop, cache_dir, name):
    assert poll_loop.state.previous == ArtworkReference(cache_dir / name)


@then("the applied artwork is the default")
def then_applied_default(poll_loop, default_reference):
    assert poll_loop.state.previous == default_reference


@then("the current artwork is the default")
def then_current_default(poll_loop, default_reference):
    assert poll_loop.state.current == default_reference


@then(parsers.parse('no file named "{name}" is cached'))
def then_not_cached(cache_dir, name):
    assert not (cache_dir / name).exists()
