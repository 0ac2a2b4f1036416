"""Remote collection adapter for the Art Institute of Chicago artworks API."""
from __future__ import annotations

import asyncio
import logging
import threading
from typing import Callable, List, Optional, Sequence

import requests

from pageselect.config import get_settings
from pageselect.domain.exceptions import FetchError
from pageselect.domain.repositories.collection_source import RemoteCollectionSource, SourcePage
from pageselect.infrastructure.remote.artic_response_parser import ArticResponseParser

logger = logging.getLogger(__name__)


class ArticCollectionSource(RemoteCollectionSource):
    """Fetch artwork pages over HTTP.

    The blocking ``requests`` call runs in a worker thread so every page fetch
    is a suspension point on the event loop. Fetches can overlap (navigation
    during a bulk walk), so each worker thread gets its own session.
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        fields: Optional[Sequence[str]] = None,
        key_field: Optional[str] = None,
        timeout: Optional[float] = None,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ) -> None:
        settings = get_settings()
        self._base_url = (base_url or settings.ensure_source_url()).rstrip("/")
        self._fields = tuple(fields) if fields is not None else settings.field_list()
        self._timeout = timeout if timeout is not None else settings.request_timeout
        self._parser = ArticResponseParser(key_field=key_field or settings.collection_key_field)
        self._session_factory = session_factory
        self._local = threading.local()
        self._sessions: List[requests.Session] = []
        self._sessions_lock = threading.Lock()

    @property
    def base_url(self) -> str:
        return self._base_url

    async def fetch_page(self, page_index: int, page_size: int) -> SourcePage:
        return await asyncio.to_thread(self._fetch_page_blocking, page_index, page_size)

    async def aclose(self) -> None:
        with self._sessions_lock:
            sessions, self._sessions = self._sessions, []
        for session in sessions:
            session.close()
        self._local = threading.local()

    def _thread_session(self) -> requests.Session:
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._session_factory()
            self._local.session = session
            with self._sessions_lock:
                self._sessions.append(session)
        return session

    def _fetch_page_blocking(self, page_index: int, page_size: int) -> SourcePage:
        params = {"page": page_index, "limit": page_size}
        if self._fields:
            params["fields"] = ",".join(self._fields)

        logger.debug("GET %s page=%s limit=%s", self._base_url, page_index, page_size)
        try:
            response = self._thread_session().get(self._base_url, params=params, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise FetchError(
                f"Request for page {page_index} failed: {exc}", page_index=page_index, cause=exc
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise FetchError(
                f"Page {page_index} response is not valid JSON", page_index=page_index, cause=exc
            ) from exc

        return self._parser.parse_page(page_index, payload)
