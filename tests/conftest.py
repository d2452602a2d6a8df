import json

import pytest
from loguru import logger

from beautiful_dogs.cart import Cart
from beautiful_dogs.core.locator import sl

MEDIA_FILES = [
    "Rex.png",
    "Bella.JPG",
    "Max.jpeg",
    "Puppy Video.mp4",
    "Beach Run.MOV",
    "notes.txt",
    "README",
]


@pytest.fixture
def caplog(caplog):
    """Route loguru records into pytest's caplog."""
    handler_id = logger.add(caplog.handler, format="{message}", level=0)
    yield caplog
    logger.remove(handler_id)


@pytest.fixture
def media_dir(tmp_path):
    folder = tmp_path / "Media" / "Dogs"
    folder.mkdir(parents=True)
    for name in MEDIA_FILES:
        (folder / name).write_bytes(b"\x00")
    # Sub folders are never catalog items, even with a media-like name
    (folder / "archive.png").mkdir()
    return folder


@pytest.fixture
def cart():
    return Cart()


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtCore import QCoreApplication
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def config_file(tmp_path, media_dir):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "general": {"debug_mode": False, "log_dir": ""},
        "catalog": {"media_dir": str(media_dir)},
    }), encoding="utf-8")
    return path


@pytest.fixture
def app_session(config_file):
    sl.reset()
    sl.init(str(config_file))
    yield sl
    sl.reset()
