from typing import Callable, Tuple

import httpx
import pytest

from wistia_zapier.app import app
from wistia_zapier.runtime import AppTester, create_app_tester

from tests.helpers import RecordingHandler


@pytest.fixture
def make_tester() -> Callable[[Callable[[httpx.Request], httpx.Response]], Tuple[AppTester, RecordingHandler]]:
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> Tuple[AppTester, RecordingHandler]:
        recorder = RecordingHandler(handler)
        tester = create_app_tester(app, transport=httpx.MockTransport(recorder), timeout_s=5.0)
        return tester, recorder

    return _make
