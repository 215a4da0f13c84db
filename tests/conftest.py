import pytest
from pathlib import Path
from typing import Callable, List

from xp_apt.parsers.rows import parse_line
from xp_apt.storage.memory_storage import MemoryStorage
from xp_apt.writer.context import ReaderContext
from xp_apt.writer.session import AirportSession


@pytest.fixture
def test_cache_dir(tmp_path) -> Path:
    """Return a temporary directory for cache testing."""
    return tmp_path / 'cache'

@pytest.fixture
def memory_storage() -> MemoryStorage:
    return MemoryStorage()

@pytest.fixture
def session(memory_storage) -> AirportSession:
    """Session writing into memory_storage."""
    return AirportSession(memory_storage)

@pytest.fixture
def context() -> ReaderContext:
    return ReaderContext(file_id=1, file_name="apt.dat", local_path="Custom Scenery/Test")

@pytest.fixture
def process_lines(session, context) -> Callable[[List[str]], None]:
    """Return a function feeding text lines through the session and finishing it."""
    def process(lines: List[str], finish: bool = True) -> None:
        for line_number, line in enumerate(lines, start=1):
            context.line_number = line_number
            session.process(parse_line(line), context)
        if finish:
            session.finish(context)
    return process
