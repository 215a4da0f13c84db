"""
Reading apt.dat files.

AptDatSource provides the lines of a local or downloaded file and
AptDatLoader feeds them through an AirportSession into a sink.

File layout:
    I
    1100 Version - data cycle 2024.01 ...

    1      433 1 0 KSEA Seattle Tacoma Intl
    ...
    99
"""

import gzip
import hashlib
import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple
from urllib.parse import urlparse

import requests

from ..config import ReaderOptions
from ..exceptions import AptDatFormatError
from ..parsers.row_codes import AirportRowCode, parse_row_code
from ..parsers.rows import parse_fields
from ..storage.base import SinkInterface
from ..utils.airport_index import AirportIndex
from ..utils.magvar import MagVarProvider
from ..utils.progress import ProgressHandler
from ..writer.context import ReaderContext
from ..writer.session import AirportSession

logger = logging.getLogger(__name__)

FILE_ORIGINS = ("I", "A")

def is_url(path: str) -> bool:
    return urlparse(str(path)).scheme in ("http", "https")


def split_rows(lines: Iterable[str], file_name: str = "", has_header: bool = True) -> Iterator[Tuple[int, List[str]]]:
    """
    Split lines into fields, skipping blank lines.

    Args:
        lines: Text lines of the file
        file_name: Name used in error messages
        has_header: Whether the lines start with the origin and version lines

    Yields:
        Tuple of 1-based line number and fields, up to and including the
        end of file row

    Raises:
        AptDatFormatError: If has_header is set and the header is missing
    """
    header_lines = 2 if has_header else 0

    for line_number, line in enumerate(lines, start=1):
        fields = line.split()

        if header_lines == 2:
            if not fields or fields[0] not in FILE_ORIGINS:
                raise AptDatFormatError("Missing file origin 'I' or 'A'", file_name, line_number)
            header_lines -= 1
            continue

        if header_lines == 1:
            if not fields or not fields[0].isdigit():
                raise AptDatFormatError("Missing version line", file_name, line_number)
            logger.debug(f"{file_name} version {fields[0]}")
            header_lines -= 1
            continue

        if not fields:
            continue

        yield line_number, fields

        if parse_row_code(fields[0]) == AirportRowCode.END_OF_FILE:
            return


class AptDatSource:
    """
    Source of apt.dat lines from local files or http(s) URLs.

    Local files ending in .gz are decompressed. Downloads are decompressed
    and cached as text below cache_dir, one file per URL.
    """

    DEFAULT_TIMEOUT = 30
    USER_AGENT = "xp-apt/0.1"

    def __init__(self, cache_dir: str = "cache", session: Optional[requests.Session] = None,
                 timeout: float = DEFAULT_TIMEOUT, max_age_days: Optional[int] = None):
        """
        Args:
            cache_dir: Base directory for cached downloads
            session: Optional requests.Session for dependency injection (testing)
            timeout: HTTP request timeout in seconds
            max_age_days: Maximum age of cached downloads, None for no limit
        """
        self.cache_path = Path(cache_dir) / self.__class__.__name__.lower()
        self.cache_path.mkdir(parents=True, exist_ok=True)
        self.max_age_days = max_age_days
        self._session = session or requests.Session()
        self._timeout = timeout
        self._force_refresh = False
        self._never_refresh = False
        self._session.headers.setdefault("User-Agent", self.USER_AGENT)

    def set_force_refresh(self, force_refresh: bool = True) -> None:
        """Always download, ignoring cached files."""
        self._force_refresh = force_refresh

    def set_never_refresh(self, never_refresh: bool = True) -> None:
        """Use a cached file if it exists, regardless of age."""
        self._never_refresh = never_refresh

    def cache_file(self, url: str) -> Path:
        """
        Cache file of a URL.

        The name is built from host and path so it stays readable, the
        hash of the full URL keeps URLs apart that only differ in
        characters replaced in the name or in the query.
        """
        parsed = urlparse(url)
        readable = re.sub(r'[^A-Za-z0-9._-]+', '_', f"{parsed.netloc}{parsed.path}").strip('_')
        digest = hashlib.sha1(url.encode('utf-8')).hexdigest()[:12]
        return self.cache_path / f"{readable}_{digest}.dat"

    def _is_cache_valid(self, cache_file: Path) -> Tuple[bool, Optional[str]]:
        """
        Returns:
            Tuple of validity and the reason if invalid
        """
        if self._force_refresh:
            return False, "force refresh"
        if not cache_file.exists():
            return False, "missing"
        if self._never_refresh or self.max_age_days is None:
            return True, None
        file_age = datetime.now() - datetime.fromtimestamp(cache_file.stat().st_mtime)
        if file_age.days <= self.max_age_days:
            return True, None
        return False, "expired"

    def _fetch(self, url: str) -> str:
        """Download a file, decompressing gzip content."""
        response = self._session.get(url, timeout=self._timeout)
        response.raise_for_status()
        content = response.content
        if content[:2] == b'\x1f\x8b':
            content = gzip.decompress(content)
        return content.decode('utf-8', errors='replace')

    def download(self, url: str) -> str:
        """Text of a URL, from the cache if still valid."""
        cache_file = self.cache_file(url)
        is_valid, reason = self._is_cache_valid(cache_file)
        if is_valid:
            logger.info(f"{cache_file.name} retrieved from cache")
            return cache_file.read_text(encoding='utf-8')

        text = self._fetch(url)
        cache_file.write_text(text, encoding='utf-8')
        logger.info(f"{cache_file.name} [{reason}] downloaded from {url}")
        return text

    def read_lines(self, path: str) -> List[str]:
        """
        Read all lines of a file or URL.

        Args:
            path: Local path or http(s) URL

        Returns:
            Lines without line terminators
        """
        if is_url(path):
            return self.download(path).splitlines()

        file_path = Path(path)
        if file_path.suffix == '.gz':
            with gzip.open(file_path, 'rt', encoding='utf-8', errors='replace') as f:
                return f.read().splitlines()
        with open(file_path, 'r', encoding='utf-8', errors='replace') as f:
            return f.read().splitlines()


class AptDatLoader:
    """
    Loads apt.dat files into a sink.

    Airport idents are deduplicated across all files loaded by the same
    loader, the first file providing an airport wins.

    Example:
        with DatabaseStorage("airports.db") as storage:
            loader = AptDatLoader(storage)
            loader.load_file("Custom Scenery/KSEA Demo/Earth nav data/apt.dat")
    """

    def __init__(self, sink: SinkInterface, options: Optional[ReaderOptions] = None,
                 source: Optional[AptDatSource] = None,
                 airport_index: Optional[AirportIndex] = None,
                 magvar: Optional[MagVarProvider] = None):
        self.sink = sink
        self.options = options or ReaderOptions()
        self.source = source
        self.magvar = magvar or self.options.create_magvar()
        self.progress = ProgressHandler(self.options.progress_interval)
        self.session = AirportSession(
            sink,
            airport_index=airport_index or AirportIndex(),
            airport_filter=self.options.create_filter(),
            progress=self.progress,
        )
        self.file_id = 0
        self.num_errors = 0

    def _get_source(self) -> AptDatSource:
        if self.source is None:
            self.source = AptDatSource(cache_dir=self.options.cache_dir, timeout=self.options.http_timeout)
        return self.source

    def _new_context(self, file_name: str, local_path: str,
                     is_addon: Optional[bool], is_3d: Optional[bool]) -> ReaderContext:
        self.file_id += 1
        return ReaderContext(
            file_id=self.file_id,
            file_name=file_name,
            local_path=local_path,
            is_addon=self.options.is_addon if is_addon is None else is_addon,
            is_3d=self.options.is_3d if is_3d is None else is_3d,
            magvar=self.magvar,
        )

    def load_file(self, path: str, is_addon: Optional[bool] = None, is_3d: Optional[bool] = None) -> int:
        """
        Load a local file or URL.

        Args:
            path: Path or http(s) URL of an apt.dat file
            is_addon: Overrides the add-on option for this file
            is_3d: Overrides the 3D option for this file

        Returns:
            Number of rows processed

        Raises:
            AptDatFormatError: If the file has no valid header
        """
        if is_url(path):
            file_name = Path(urlparse(path).path).name
            local_path = path
        else:
            file_name = Path(path).name
            local_path = str(Path(path).parent)

        lines = self._get_source().read_lines(path)
        context = self._new_context(file_name, local_path, is_addon, is_3d)
        return self._load(split_rows(lines, file_name), context)

    def load_lines(self, lines: Iterable[str], file_name: str = "memory", has_header: bool = False,
                   is_addon: Optional[bool] = None, is_3d: Optional[bool] = None) -> int:
        """
        Load lines already in memory.

        Returns:
            Number of rows processed
        """
        context = self._new_context(file_name, "", is_addon, is_3d)
        return self._load(split_rows(lines, file_name, has_header=has_header), context)

    def _load(self, rows: Iterator[Tuple[int, List[str]]], context: ReaderContext) -> int:
        self.progress.start_file(context.file_name)
        num_rows = 0

        try:
            for line_number, fields in rows:
                context.line_number = line_number
                num_rows += 1
                try:
                    self.session.process(parse_fields(fields), context)
                except Exception as e:
                    self.num_errors += 1
                    logger.error(f"{context.message_prefix()} Error processing row {fields[0]}: {e}")
        finally:
            try:
                self.session.finish(context)
            except Exception as e:
                self.num_errors += 1
                logger.error(f"{context.message_prefix()} Error finishing airport: {e}")
                self.session.reset()

        logger.info(f"{context.file_name}: {num_rows} rows, {self.progress.num_airports} airports written in total")
        return num_rows
