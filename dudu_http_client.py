#!/usr/bin/env python3
# Dudu's HTTP Client (ttkbootstrap)
# - One method menu, one URL field, one Execute button, one response pane
# - Requests run on a worker thread; results come back through a queue polled with after()
# - Execute is disabled while a request is pending and always re-enabled afterwards
# - Blank bodies are shown as a bold "<no content>"

import copy
import queue
import logging
import threading
from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Optional
import requests
import tkinter as tk
from tkinter import ttk, scrolledtext
from ttkbootstrap import Style
from ttkbootstrap.constants import PRIMARY, SECONDARY
APP_TITLE = "Dudu's HTTP Client"
DEFAULT_URL = "https://reqres.in/api/users/2"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
DEFAULT_SETTINGS = {
    "theme": "flatly",
    "geometry": "720x480",
    "default_url": DEFAULT_URL,
    "poll_interval_ms": 100,
    "log_level": "INFO",
}
class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    TRACE = "TRACE"
    @classmethod
    def default(cls) -> "HttpMethod":
        return next(iter(cls))
class ResponseBody:
    """Last response as shown in the response pane: Content or NoContent."""
    text: str
    emphasized: ClassVar[bool] = False
@dataclass(frozen=True)
class Content(ResponseBody):
    text: str
class NoContent(ResponseBody):
    text = "<no content>"
    emphasized = True
    def __eq__(self, other):
        return isinstance(other, NoContent)
    def __hash__(self):
        return hash(NoContent)
    def __repr__(self):
        return "NoContent()"
NO_CONTENT = NoContent()
def classify_body(text: str) -> ResponseBody:
    if not text or text.isspace():
        return NO_CONTENT
    return Content(text)
def fetch_url(method: HttpMethod, url: str) -> requests.Response:
    """Send one bodyless request and return the response; .text is the body.

    Malformed URLs and transport failures raise requests.exceptions.RequestException
    subclasses. Nothing is retried.
    """
    method = HttpMethod(method)
    logging.debug("Sending %s %s", method.value, url)
    response = requests.request(method=method.value, url=url)
    logging.info(
        "%s %s -> %s %s in %.2fs",
        method.value, url, response.status_code, response.reason, response.elapsed.total_seconds(),
    )
    return response
def _color_for_status(code: int) -> str:
    if   100 <= code < 200: return "info"
    elif 200 <= code < 300: return "success"
    elif 300 <= code < 400: return "warning"
    elif 400 <= code < 600: return "danger"
    return "secondary"
class MethodChoice:
    """Selected HTTP method plus whether the menu is open."""
    def __init__(self, on_change: Optional[Callable[[HttpMethod], None]] = None):
        self.options = tuple(HttpMethod)
        self.selected = HttpMethod.default()
        self.expanded = False
        self.on_change = on_change
    def open(self):
        self.expanded = True
    def dismiss(self):
        self.expanded = False
    def select(self, method):
        method = HttpMethod(method)
        self.selected = method
        self.expanded = False
        if self.on_change:
            self.on_change(method)
class MethodSelector(ttk.Menubutton):
    def __init__(self, master, choice: MethodChoice, **kw):
        super().__init__(master, **kw)
        self.choice = choice
        self.label_var = tk.StringVar(value=choice.selected.value)
        self.configure(textvariable=self.label_var)
        self.menu = tk.Menu(self, tearoff=False, postcommand=self.choice.open)
        for method in choice.options:
            self.menu.add_command(label=method.value, command=lambda m=method: self.pick(m))
        # <Unmap> only arrives for Tk-drawn (X11) menus; native menus close through pick() or the next post.
        self.menu.bind("<Unmap>", lambda _e: self.choice.dismiss())
        self["menu"] = self.menu
    def pick(self, method):
        self.choice.select(method)
        self.label_var.set(self.choice.selected.value)
class GuardedAction:
    """Runs a blocking action on a worker thread, one call at a time.

    The worker only ever talks to the UI thread through ``results``. ``poll()`` must
    be called from the UI thread; it hands a finished result to ``on_result`` or
    ``on_error`` and then returns to idle, even when the callback itself raises.
    """
    def __init__(self, action: Callable[[], Any], on_result: Callable[[Any], None],
                 on_error: Callable[[BaseException], None],
                 on_state_change: Optional[Callable[[bool], None]] = None):
        self.action = action
        self.on_result = on_result
        self.on_error = on_error
        self.on_state_change = on_state_change
        self.pending = False
        self.worker: Optional[threading.Thread] = None
        self.results: "queue.Queue[tuple]" = queue.Queue()
    def trigger(self, *args) -> bool:
        if self.pending:
            return False
        self._set_pending(True)
        self.worker = threading.Thread(target=self._run, args=args, daemon=True)
        self.worker.start()
        return True
    def _run(self, *args):
        try:
            value = self.action(*args)
        except Exception as e:
            self.results.put(("error", e))
        else:
            self.results.put(("success", value))
    def poll(self) -> bool:
        try:
            msg_type, data = self.results.get_nowait()
        except queue.Empty:
            return False
        try:
            if msg_type == "success":
                self.on_result(data)
            else:
                self.on_error(data)
        finally:
            self._set_pending(False)
        return True
    def _set_pending(self, pending: bool):
        self.pending = pending
        if self.on_state_change:
            self.on_state_change(pending)
class AsyncButton(ttk.Button):
    def __init__(self, master, text, action, on_result, on_error, on_state_change=None,
                 prepare=None, poll_interval_ms=100, **kw):
        super().__init__(master, text=text, command=self.trigger, **kw)
        self.prepare = prepare
        self._external_state_change = on_state_change
        self.guard = GuardedAction(action, on_result, on_error, on_state_change=self._on_state_change)
        self.poll_interval_ms = poll_interval_ms
        self.after(self.poll_interval_ms, self._process_queue)
    def trigger(self) -> bool:
        if self.guard.pending:
            return False
        args = self.prepare() if self.prepare else ()
        return self.guard.trigger(*args)
    def _on_state_change(self, pending: bool):
        self.configure(state="disabled" if pending else "normal")
        if self._external_state_change:
            self._external_state_change(pending)
    def _process_queue(self):
        try:
            self.guard.poll()
        finally:
            self.after(self.poll_interval_ms, self._process_queue)
@dataclass
class RequestState:
    url: str = DEFAULT_URL
    method: HttpMethod = field(default_factory=HttpMethod.default)
@dataclass
class AppState:
    request: RequestState = field(default_factory=RequestState)
    response: ResponseBody = field(default_factory=lambda: Content(""))
    loading: bool = False
    status: str = "Ready"
    status_style: str = "secondary"
    def set_url(self, url: str):
        self.request.url = url
    def set_method(self, method):
        self.request.method = HttpMethod(method)
    def set_loading(self, loading: bool):
        self.loading = loading
    def set_response(self, response: ResponseBody):
        self.response = response
    def set_status(self, text: str, style: str = "secondary"):
        self.status = text
        self.status_style = style
class RequestController:
    def __init__(self, state: AppState, fetch: Callable[[HttpMethod, str], requests.Response] = fetch_url):
        self.state = state
        self.fetch = fetch
    def snapshot(self):
        request = self.state.request
        return request.method, request.url
    def execute(self, method: HttpMethod, url: str) -> requests.Response:
        return self.fetch(method, url)
    def set_loading(self, pending: bool):
        self.state.set_loading(pending)
        if pending:
            self.state.set_status("Sending...", "info")
    def handle_response(self, response: requests.Response):
        # Error statuses still show their body; only the status line tells them apart.
        self.state.set_response(classify_body(response.text))
        elapsed = response.elapsed.total_seconds() if response.elapsed is not None else 0.0
        size_kb = len(response.content or b"") / 1024
        self.state.set_status(
            f"Status: {response.status_code} {response.reason or ''} | Time: {elapsed:.2f}s | Size: {size_kb:.2f} KB",
            _color_for_status(response.status_code),
        )
    def handle_error(self, exc: BaseException):
        logging.warning("Request failed: %s: %s", type(exc).__name__, exc)
        self.state.set_status(f"Error: {type(exc).__name__}: {exc}", "danger")
    def render(self):
        response = self.state.response
        return response.text, response.emphasized
class HttpClientApp(tk.Tk):
    def __init__(self, settings: Optional[dict] = None):
        super().__init__()
        self.settings = settings if settings is not None else copy.deepcopy(DEFAULT_SETTINGS)
        self.title(APP_TITLE)
        self.geometry(self.settings["geometry"])
        self.style = Style(self.settings["theme"])
        self.app_state = AppState(RequestState(url=self.settings["default_url"]))
        self.controller = RequestController(self.app_state)
        self._build_ui()
        self._render()
    def _build_ui(self):
        top = ttk.Frame(self, padding=10)
        top.pack(fill=tk.X, side=tk.TOP)
        top.columnconfigure(1, weight=1)
        self.method_choice = MethodChoice(on_change=self.app_state.set_method)
        self.method_selector = MethodSelector(top, self.method_choice, width=8, bootstyle=SECONDARY)
        self.method_selector.grid(row=0, column=0, sticky="ns", padx=(0, 10))
        self.url_var = tk.StringVar(value=self.app_state.request.url)
        self.url_var.trace_add("write", lambda *_: self.app_state.set_url(self.url_var.get()))
        self.url_entry = ttk.Entry(top, textvariable=self.url_var, font=("Segoe UI", 10))
        self.url_entry.grid(row=0, column=1, sticky="ew")
        self.url_entry.bind("<Return>", lambda _e: self.execute_button.trigger())
        self.execute_button = AsyncButton(
            top, "Execute", self.controller.execute,
            on_result=self._on_response,
            on_error=self._on_error,
            on_state_change=self._on_loading,
            prepare=self.controller.snapshot,
            poll_interval_ms=int(self.settings["poll_interval_ms"]),
            width=10,
            bootstyle=PRIMARY,
        )
        self.execute_button.grid(row=0, column=2, sticky="ns", padx=(10, 0))
        self.status_var = tk.StringVar()
        self.status_label = ttk.Label(self, textvariable=self.status_var, anchor="w", padding=(10, 4))
        self.status_label.pack(fill=tk.X, side=tk.BOTTOM)
        self.response_text = scrolledtext.ScrolledText(self, wrap=tk.WORD, font=("Consolas", 10), state="disabled")
        self.response_text.tag_configure("emphasized", font=("Consolas", 10, "bold"))
        self.response_text.pack(fill=tk.BOTH, expand=True, padx=10)
    def _on_loading(self, pending: bool):
        self.controller.set_loading(pending)
        self._render_status()
    def _on_response(self, response):
        self.controller.handle_response(response)
        self._render()
    def _on_error(self, exc):
        self.controller.handle_error(exc)
        self._render()
    def _render(self):
        text, emphasized = self.controller.render()
        self.response_text.configure(state="normal")
        self.response_text.delete("1.0", tk.END)
        if emphasized:
            self.response_text.insert("1.0", text, "emphasized")
        else:
            self.response_text.insert("1.0", text)
        self.response_text.configure(state="disabled")
        self._render_status()
    def _render_status(self):
        self.status_var.set(self.app_state.status)
        self.status_label.configure(bootstyle=self.app_state.status_style)
    def report_callback_exception(self, exc, val, tb):
        logging.error("Unhandled error in UI callback", exc_info=(exc, val, tb))
def main():
    logging.basicConfig(level=DEFAULT_SETTINGS["log_level"], format=LOG_FORMAT)
    app = HttpClientApp()
    app.mainloop()
if __name__ == "__main__":
    main()
