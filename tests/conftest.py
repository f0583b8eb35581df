import io

import pytest

from video_to_text_service.shared.logger import RequestLogger


@pytest.fixture
def logger() -> RequestLogger:
    return RequestLogger("test", stream=io.StringIO())
