import json
import logging
import os
import threading
import webview

FRONTEND_INDEX = os.path.join(os.path.dirname(os.path.abspath(__file__)), "frontend", "index.html")


class Window:
    """
    A pywebview window acting as the View's surface.

    The page calls ``submit``/``click``/``ready`` through ``pywebview.api``;
    markup flows back through ``evaluate_js``. Markup rendered before the
    page has loaded is kept and handed over by ``ready()``. Every render
    carries a sequence number so the page can drop an older snapshot that
    arrives after a newer one.
    """

    def __init__(self, title, url=None, width=800, height=600, resizable=True,
                 min_size=(300, 200)):
        self.title = title
        self.url = url or FRONTEND_INDEX
        self.width = width
        self.height = height
        self.resizable = resizable
        self.min_size = min_size
        self.logger = logging.getLogger("TodoDesk.Window")

        self.view = None
        self._window = None
        self._loaded = False
        self._markup = ""
        self._seq = 0
        self._lock = threading.Lock()

    def attach(self, view):
        self.view = view
        return view

    # Surface

    def render_list(self, markup):
        with self._lock:
            self._seq += 1
            self._markup = markup
            seq = self._seq
        self._call_js("renderList", markup, seq)

    def clear_input(self):
        self._call_js("clearInput")

    def show_error(self, message):
        self._call_js("showError", message)

    def alert(self, message):
        if self._window:
            self._window.create_confirmation_dialog(self.title, message)
        else:
            self.logger.warning(f"Notice with no window: {message}")

    def _call_js(self, func, *args):
        if not (self._window and self._loaded):
            return
        payload = ", ".join(json.dumps(a) for a in args)
        try:
            self._window.evaluate_js(f"window.tododesk.{func}({payload})")
        except Exception as e:
            self.logger.error(f"Failed to call {func} in page: {e}")

    # Page -> Python

    def _build_api(self):
        window = self

        def submit(api_self, text):
            window.logger.debug(f"submit gesture: {text!r}")
            if window.view is not None:
                window.view.submit(text)

        def click(api_self, role, todo_id):
            window.logger.debug(f"click gesture: {role} {todo_id}")
            if window.view is not None:
                window.view.click(role, todo_id)

        def ready(api_self):
            with window._lock:
                window._loaded = True
                return {"markup": window._markup, "seq": window._seq}

        TodoApi = type("TodoApi", (object,), {"submit": submit, "click": click, "ready": ready})
        return TodoApi()

    def _on_loaded(self):
        self._loaded = True
        self.logger.debug("Page loaded")

    def create(self):
        self._window = webview.create_window(
            self.title,
            url=self.url,
            js_api=self._build_api(),
            width=self.width,
            height=self.height,
            resizable=self.resizable,
            min_size=self.min_size,
        )
        self._window.events.loaded += self._on_loaded
        return self._window

    def destroy(self):
        if self._window:
            try:
                self._window.destroy()
            except Exception as e:
                self.logger.debug(f"Error destroying window: {e}")
            self._window = None
            self._loaded = False
