import time
import datetime
import tkinter as tk
import pytest
import requests
import dudu_http_client
@pytest.fixture
def make_response():
    def _make(status_code=200, body=b"", reason="OK"):
        response = requests.Response()
        response.status_code = status_code
        response.reason = reason
        response._content = body
        response.encoding = "utf-8"
        response.elapsed = datetime.timedelta(milliseconds=120)
        return response
    return _make
@pytest.fixture(scope="module")
def app():
    try:
        app = dudu_http_client.HttpClientApp()
    except tk.TclError as e:
        pytest.skip(f"no display available: {e}")
    app.withdraw()
    yield app
    app.destroy()
def run_to_completion(guard, timeout=5):
    """Wait for the worker to finish and deliver its result like the UI loop would."""
    guard.worker.join(timeout)
    assert not guard.worker.is_alive()
    assert guard.poll()
@pytest.fixture
def complete():
    return run_to_completion
@pytest.fixture
def pump():
    def _pump(app, done, timeout=5):
        """Run the Tk event loop until done() holds."""
        deadline = time.monotonic() + timeout
        while not done():
            assert time.monotonic() < deadline, "UI loop did not settle"
            app.update()
            time.sleep(0.01)
    return _pump
