"""
Remote Transport - HTTP implementation of the transport contract

Translates resource operations into requests against one collection URL:

    list/query -> GET    base[?query]   (Range header when paging)
    get        -> GET    base/id
    create     -> POST   base
    update     -> PUT    base/id
    remove     -> DELETE base/id

Requests run on a shared thread pool; each call returns a Future at once.
"""

import logging
import socket
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Dict, List, Optional

import certifi  # Provides Mozilla's CA bundle for SSL certificate verification
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from resource_kit.codecs import Codec, JsonCodec
from resource_kit.exceptions import PreconditionError, RemoteTransportError, RequestTimeoutError
from resource_kit.schemas import OperationArgs
from resource_kit.settings import Settings, get_settings
from resource_kit.transports.base import ArgsLike, BaseTransport, Item
from resource_kit.utils.urls import build_full_url

logger = logging.getLogger(__name__)

ID_FIELD = "id"
_CHUNK_SIZE = 8192

_executor: Optional[ThreadPoolExecutor] = None
_executor_lock = threading.Lock()


def get_default_executor() -> ThreadPoolExecutor:
    """Thread pool shared by every RemoteTransport built without an explicit executor."""
    global _executor
    with _executor_lock:
        if _executor is None:
            workers = get_settings().max_workers
            _executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="resource-kit")
            logger.debug(f"Started remote transport pool with {workers} workers")
        return _executor


def build_session(settings: Settings) -> requests.Session:
    """
    Initializes a requests.Session with:
        - HTTPAdapter sized to the worker pool
        - retries disabled, so every failure reaches the caller once
        - timeouts surfaced as requests.Timeout
    """
    session = requests.Session()
    # read=False keeps read timeouts as ReadTimeout instead of MaxRetryError
    retry_strategy = Retry(total=0, read=False, raise_on_status=False)
    adapter = HTTPAdapter(max_retries=retry_strategy, pool_maxsize=settings.max_workers)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


class RemoteTransport(BaseTransport):
    """Transport implementation speaking HTTP to a collection URL"""

    def __init__(
        self,
        url: str,
        args: ArgsLike = None,
        codec: Optional[Codec] = None,
        session: Optional[requests.Session] = None,
        executor: Optional[ThreadPoolExecutor] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.url = url
        self.codec: Codec = codec or JsonCodec(self.settings.content_type)
        self.session = session or build_session(self.settings)
        self._executor = executor or get_default_executor()

        # Construction args only contribute a default timeout
        self._default_timeout_ms = OperationArgs.coerce(args).timeout or self.settings.default_timeout_ms

        if not self.settings.verify_ssl:
            self._verify: Any = False
        else:
            self._verify = self.settings.ca_bundle or certifi.where()

        logger.info(f"RemoteTransport initialized for {self.url}")

    def list(self, args: ArgsLike = None) -> Future:
        return self.query(None, args)

    def get(self, item_id: Any, args: ArgsLike = None) -> Future:
        return self._execute("GET", build_full_url(self.url, item_id), None, args)

    def query(self, predicate: Optional[Dict[str, Any]], args: ArgsLike = None) -> Future:
        args = OperationArgs.coerce(args)
        headers = {}
        range_header = args.range_header()
        if range_header is not None:
            headers["Range"] = range_header
        return self._execute("GET", build_full_url(self.url, None, predicate), None, args, headers)

    def create(self, item: Item, args: ArgsLike = None) -> Future:
        return self._execute("POST", self.url, item, args)

    def update(self, item: Item, args: ArgsLike = None) -> Future:
        return self._execute("PUT", self._item_url(item, "update"), item, args)

    def remove(self, item: Item, args: ArgsLike = None) -> Future:
        return self._execute("DELETE", self._item_url(item, "remove"), None, args)

    def close(self) -> None:
        """Release pooled connections. The shared executor is left running."""
        self.session.close()

    def _item_url(self, item: Item, operation: str) -> str:
        item_id = item.get(ID_FIELD)
        if not item_id:
            raise PreconditionError(f"{operation} requires an item with an id", operation, item)
        return build_full_url(self.url, item_id)

    def _execute(
        self,
        method: str,
        url: str,
        data: Optional[Item],
        args: ArgsLike,
        headers: Optional[Dict[str, str]] = None,
    ) -> Future:
        """Serialize the body and hand the request to the worker pool."""
        args = OperationArgs.coerce(args)
        body = self.codec.serialize(data) if data is not None else None
        timeout_ms = args.timeout or self._default_timeout_ms

        request_headers = {"Accept": self.codec.content_type}
        if body is not None:
            request_headers["Content-Type"] = self.codec.content_type
        request_headers.update(headers or {})

        logger.debug(f"{method} {url} queued (timeout {timeout_ms} ms)")
        return self._executor.submit(self._send, method, url, body, request_headers, args, timeout_ms)

    def _send(
        self,
        method: str,
        url: str,
        body: Optional[bytes],
        headers: Dict[str, str],
        args: OperationArgs,
        timeout_ms: int,
    ) -> List[Any]:
        """Runs on a worker thread: perform the request and dispatch to load/error."""
        deadline = time.monotonic() + timeout_ms / 1000
        try:
            resp = self.session.request(
                method,
                url,
                data=body,
                headers=headers,
                timeout=timeout_ms / 1000,
                verify=self._verify,
                stream=True,
            )
            content = self._receive(resp, deadline)
        except requests.Timeout:
            return self._fail(args, RequestTimeoutError(method, url, timeout_ms))
        except requests.RequestException as e:
            return self._fail(args, RemoteTransportError(f"{method} {url} failed: {e}", method, url))

        try:
            payload = self._handle_response(method, url, resp, content)
        except RemoteTransportError as e:
            return self._fail(args, e)

        if payload is None:
            return []
        return self._deliver(args, payload)

    def _receive(self, resp: requests.Response, deadline: float) -> bytes:
        """
        Read the streamed body before `deadline`.

        The socket read timeout only bounds each read, so a timer shuts the
        connection down once the whole-request deadline passes.

        Raises:
            requests.Timeout: If the deadline passed before the body was complete
        """
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            resp.close()
            raise requests.Timeout("deadline passed before the response body was read")

        aborted = threading.Event()

        def abort() -> None:
            aborted.set()
            _shutdown_connection(resp)

        timer = threading.Timer(remaining, abort)
        timer.daemon = True
        timer.start()
        try:
            content = b"".join(resp.iter_content(chunk_size=_CHUNK_SIZE))
        except (requests.RequestException, OSError) as e:
            if aborted.is_set() or time.monotonic() >= deadline:
                raise requests.Timeout("connection aborted at deadline") from e
            if isinstance(e, requests.RequestException):
                raise
            raise requests.ConnectionError(e) from e
        finally:
            timer.cancel()
            if aborted.is_set() and resp.raw is not None:
                resp.raw.close()
            resp.close()

        if aborted.is_set():
            raise requests.Timeout("connection aborted at deadline")
        return content

    def _handle_response(self, method: str, url: str, resp: requests.Response, content: bytes) -> Any:
        """
        Check the status and decode the body.

        Returns:
            Decoded payload, or None when the response has no content

        Raises:
            RemoteTransportError: For 4xx/5xx status codes or an undecodable body
        """
        excerpt = content[:200].decode("utf-8", errors="replace")
        if resp.status_code >= 400:
            logger.error(f"HTTP {resp.status_code} error for {method} {url}: {excerpt}")
            raise RemoteTransportError(
                f"{method} {url} returned HTTP {resp.status_code}", method, url, response=resp
            )

        if not content:
            logger.debug(f"Empty response received for {method} {url}")
            return None

        try:
            return self.codec.deserialize(content)
        except ValueError as e:
            logger.error(f"Invalid response body from {method} {url}: {excerpt}...")
            raise RemoteTransportError(
                f"Invalid response body: {e}", method, url, response=resp, error_code="DECODE_ERROR"
            )

    def _fail(self, args: OperationArgs, exc: RemoteTransportError) -> List[Any]:
        """Report a failure to args.error, then raise it into the Future."""
        if args.error is not None:
            args.error(exc)
        else:
            logger.warning(f"Dropped failure without error handler: {exc}")
        raise exc


def _shutdown_connection(resp: requests.Response) -> None:
    """Shut down the socket under a streamed response so a blocked read returns."""
    connection = getattr(resp.raw, "connection", None)
    sock = getattr(connection, "sock", None)
    if sock is None:
        return
    try:
        sock.shutdown(socket.SHUT_RDWR)
    except OSError as e:
        logger.debug(f"Socket already closed at deadline: {e}")
