"""
oEmbed lookup for track artwork.

Turns a track URL from the player into the URL of its thumbnail image.
"""

import json
import logging
from typing import Any

import requests

from ..config.dataclasses import HttpConfig
from ..exceptions import ArtworkLookupError


logger = logging.getLogger(__name__)


def build_session(config: HttpConfig) -> requests.Session:
    """Create the HTTP session shared by the lookup client and the cache."""
    session = requests.Session()
    session.headers.update({'User-Agent': config.user_agent})
    return session


class OEmbedClient:
    """
    Minimal client for an oEmbed endpoint.
    
    Usage:
        client = OEmbedClient(http_config, session)
        thumbnail = client.thumbnail_url("https://open.spotify.com/track/...")
    """
    
    def __init__(self, config: HttpConfig, session: requests.Session) -> None:
        self.config = config
        self.session = session
    
    def build_url(self, track_url: str) -> str:
        """Embed the track URL into the endpoint template as-is."""
        return self.config.oembed_template.format(url=track_url)
    
    def thumbnail_url(self, track_url: str) -> str:
        """
        Look up the thumbnail URL for a track.
        
        Args:
            track_url: Identifying URL reported by the player
            
        Returns:
            Absolute URL of the artwork image
            
        Raises:
            ArtworkLookupError: On transport errors, bad status, bad JSON
                or a missing thumbnail_url field
        """
        url = self.build_url(track_url)
        
        try:
            response = self.session.get(url, timeout=self.config.lookup_timeout)
            response.raise_for_status()
            payload: Any = response.json()
        except requests.Timeout as e:
            raise ArtworkLookupError(f"oEmbed lookup timed out for {track_url}: {e}")
        except requests.ConnectionError as e:
            raise ArtworkLookupError(f"Cannot reach oEmbed endpoint for {track_url}: {e}")
        except requests.HTTPError as e:
            status = getattr(e.response, 'status_code', None)
            raise ArtworkLookupError(f"oEmbed lookup for {track_url} returned HTTP {status}")
        except (json.JSONDecodeError, ValueError) as e:
            raise ArtworkLookupError(f"oEmbed response for {track_url} is not JSON: {e}")
        except requests.RequestException as e:
            raise ArtworkLookupError(f"oEmbed lookup failed for {track_url}: {e}")
        
        if not isinstance(payload, dict):
            raise ArtworkLookupError(f"oEmbed response for {track_url} is not an object")
        
        thumbnail = payload.get('thumbnail_url')
        if not isinstance(thumbnail, str) or not thumbnail:
            raise ArtworkLookupError(f"oEmbed response for {track_url} has no thumbnail_url")
        
        logger.debug(f"oEmbed thumbnail for {track_url}: {thumbnail}")
        return thumbnail
