"""
Pytest configuration for entrycard
"""

import logging
import sys
from pathlib import Path

import pytest

from entrycard.renderers import watermark_renderer


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests; the CLI installs its own handlers on the root logger."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture(autouse=True)
def clear_qr_cache():
    """Start every test with an empty QR code cache."""
    watermark_renderer._qr_cache.clear()
    yield
    watermark_renderer._qr_cache.clear()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    import tempfile
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def sample_lines():
    """Typical card content: bold title followed by two body lines."""
    return [
        {"text": "강남점 엔트리", "fontSize": 34, "fontWeight": "bold"},
        {"text": "총 출근인원: 12명", "gapBefore": 18},
        "오늘도 화이팅",
    ]


@pytest.fixture
def watermark_data():
    """Contact block with a QR link."""
    return {
        "linkUrl": "https://example.com/reserve",
        "phone": "010-1234-5678",
        "linkLabel": "예약하기",
        "caption": "문의 환영",
    }
