"""
Sheet sources: published CSV URLs and local CSV exports.

Everything that touches the network or the filesystem lives here; the parser
only ever sees text.
"""

from pathlib import Path

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from resultportal.config.settings import CollegeConfig, FetchConfig, PortalConfig
from resultportal.utils.logging import get_logger

log = get_logger(__name__)


class SheetFetchError(Exception):
    """Raised when a published sheet cannot be downloaded."""


def build_session(fetch_config: FetchConfig) -> requests.Session:
    """
    Build a requests Session that retries transient failures.

    Google's CSV export endpoint occasionally answers 429 or 5xx.
    """
    session = requests.Session()

    retry = Retry(
        total=fetch_config.retries,
        connect=fetch_config.retries,
        read=fetch_config.retries,
        status=fetch_config.retries,
        backoff_factor=fetch_config.backoff_factor,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=frozenset({"GET"}),
        raise_on_status=False,
    )

    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)

    return session


def fetch_csv_text(
    url: str,
    fetch_config: FetchConfig,
    session: requests.Session | None = None,
) -> str:
    """
    Download a published CSV export.

    Args:
        url: CSV export URL.
        fetch_config: Timeout and retry settings.
        session: Optional session to reuse; one is built when omitted.

    Returns:
        Response body as text.

    Raises:
        SheetFetchError: On transport errors or non-2xx responses.
    """
    session = session or build_session(fetch_config)

    log.info("Fetching sheet", url=url)
    try:
        resp = session.get(url, timeout=fetch_config.timeout_seconds)
    except requests.RequestException as exc:
        msg = f"Could not connect to the result database: {exc}"
        raise SheetFetchError(msg) from exc

    if not resp.ok:
        msg = f"HTTP error while fetching sheet. Status: {resp.status_code}"
        raise SheetFetchError(msg)

    # Sheets exports are UTF-8 but rarely declare a charset
    if resp.encoding is None or resp.encoding.lower() == "iso-8859-1":
        resp.encoding = "utf-8"

    log.info("Fetched sheet", bytes=len(resp.content))
    return resp.text


def read_csv_file(path: Path) -> str:
    """
    Read a local CSV export.

    Tries UTF-8 first and falls back to cp1252 for spreadsheets saved by
    desktop Excel.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    if not path.exists():
        msg = f"Results sheet not found: {path}"
        raise FileNotFoundError(msg)

    log.info("Reading sheet", path=str(path))
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        return path.read_text(encoding="cp1252")


def load_sheet_text(
    college: CollegeConfig,
    config: PortalConfig,
    session: requests.Session | None = None,
) -> str:
    """Load the raw sheet text for a college from its configured source."""
    if college.csv_path is not None:
        return read_csv_file(config.resolve(college.csv_path))

    if college.csv_url is None:
        msg = f"College {college.name!r} has no sheet source"
        raise ValueError(msg)

    return fetch_csv_text(college.csv_url, config.fetch, session=session)
