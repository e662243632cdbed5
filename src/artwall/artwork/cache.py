"""
On-disk artwork cache.

Thumbnails are stored under the cache directory, named after the last path
segment of their URL. Entries are never evicted or refreshed: a file that
exists is considered complete, which is why downloads are written to a
temporary file and renamed into place.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import requests

from ..config.dataclasses import CacheConfig, HttpConfig
from ..exceptions import ArtworkCacheError, ArtworkError, ArtworkFetchError
from .reference import ArtworkReference


class ArtworkCache:
    """
    Maps remote artwork URLs to local files and downloads missing ones.
    
    Responsibilities:
    - Deriving the local path for a thumbnail URL
    - Answering "already downloaded?"
    - Streaming downloads atomically into the cache directory
    """
    
    def __init__(self, cache_config: CacheConfig, http_config: HttpConfig,
                 session: requests.Session) -> None:
        self.config = cache_config
        self.http = http_config
        self.session = session
        self.logger = logging.getLogger(__name__)
    
    @property
    def directory(self) -> Path:
        """Cache directory."""
        return self.config.directory
    
    @property
    def default_reference(self) -> ArtworkReference:
        """Reference to the fallback artwork."""
        return ArtworkReference(self.config.default_path)
    
    def local_path_for(self, remote_url: str) -> Path:
        """
        Derive the cache path for a thumbnail URL.
        
        Args:
            remote_url: Absolute thumbnail URL
            
        Returns:
            <cache dir>/<last path segment>
            
        Raises:
            ArtworkCacheError: If the URL has no usable last segment
        """
        name = urlparse(remote_url).path.rsplit('/', 1)[-1]
        if name in ('', '.', '..'):
            raise ArtworkCacheError(f"Cannot derive a cache file name from {remote_url!r}")
        return self.directory / name
    
    def lookup(self, remote_url: str) -> Optional[ArtworkReference]:
        """
        Return the cached reference for a URL, or None if not downloaded yet.
        
        Raises:
            ArtworkCacheError: If the URL has no usable name or the cache
                directory cannot be inspected
        """
        path = self.local_path_for(remote_url)
        try:
            if path.is_file():
                return ArtworkReference(path)
        except OSError as e:
            raise ArtworkCacheError(f"Cannot inspect cache entry {path}: {e}")
        return None
    
    def fetch_and_store(self, remote_url: str, local_path: Path) -> ArtworkReference:
        """
        Download an image into the cache.
        
        Never raises: any network or filesystem failure is logged and the
        default reference is returned instead.
        
        Args:
            remote_url: Thumbnail URL to download
            local_path: Destination path inside the cache directory
            
        Returns:
            Reference to local_path on success, the default reference otherwise
        """
        try:
            size = self._download(remote_url, local_path)
        except ArtworkError as e:
            self.logger.warning(f"Artwork download failed, using default: {e}")
            return self.default_reference
        
        self.logger.info(f"Cached {size} bytes from {remote_url} at {local_path}")
        return ArtworkReference(local_path)
    
    def _download(self, remote_url: str, local_path: Path) -> int:
        """
        Stream remote_url to local_path via a temporary file.
        
        Returns:
            Number of bytes written
            
        Raises:
            ArtworkFetchError: On HTTP errors or an empty body
            ArtworkCacheError: On filesystem errors
        """
        try:
            local_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=local_path.parent, prefix=f".{local_path.name}.", suffix=".part"
            )
        except OSError as e:
            raise ArtworkCacheError(f"Cannot create cache file in {local_path.parent}: {e}")
        
        tmp_path = Path(tmp_name)
        try:
            size = 0
            with os.fdopen(fd, 'wb') as f:
                response = self.session.get(
                    remote_url, stream=True, timeout=self.http.download_timeout
                )
                try:
                    response.raise_for_status()
                    for chunk in response.iter_content(chunk_size=self.http.chunk_size):
                        if chunk:
                            f.write(chunk)
                            size += len(chunk)
                finally:
                    response.close()
            
            if size == 0:
                raise ArtworkFetchError(f"Empty image data received from {remote_url}")
            
            os.replace(tmp_path, local_path)
            return size
        
        except requests.Timeout as e:
            raise ArtworkFetchError(f"Download timeout for {remote_url}: {e}")
        except requests.HTTPError as e:
            status = getattr(e.response, 'status_code', None)
            raise ArtworkFetchError(f"HTTP {status} downloading {remote_url}")
        except requests.RequestException as e:
            raise ArtworkFetchError(f"Failed to download {remote_url}: {e}")
        except OSError as e:
            raise ArtworkCacheError(f"Filesystem error writing {local_path}: {e}")
        finally:
            if tmp_path.exists():
                try:
                    tmp_path.unlink()
                except OSError as e:
                    self.logger.warning(f"Failed to remove partial download {tmp_path}: {e}")
