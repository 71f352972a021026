import html
import logging
from .exceptions import ValidationError

EMPTY_TEXT_NOTICE = "You must write something!"
CLOSE_MARK = "×"

# Click targets reported by the frontend
ROLE_ITEM = "item"
ROLE_CLOSE = "close"


def validate_text(text):
    """Trim submitted text; empty or whitespace-only input is rejected."""
    text = (text or "").strip()
    if not text:
        raise ValidationError(EMPTY_TEXT_NOTICE)
    return text


def render_item(todo):
    classes = ' class="checked"' if todo.completed else ""
    return (
        f'<li data-id="{todo.id}"{classes}>{html.escape(todo.text)}'
        f'<span class="close">{CLOSE_MARK}</span></li>'
    )


class View:
    """
    Presentation only. Turns a snapshot of todos into markup for a surface and
    turns surface gestures into calls on the registered handlers.

    A surface provides ``render_list(html)``, ``alert(message)``,
    ``clear_input()`` and ``show_error(message)``.
    """

    def __init__(self, surface):
        self.surface = surface
        self.logger = logging.getLogger("TodoDesk.View")
        self._on_submit = None
        self._on_activate = None
        self._on_delete = None

    def render(self, items):
        markup = "".join(render_item(todo) for todo in items)
        self.surface.render_list(markup)

    def show_error(self, message):
        self.surface.show_error(message)

    def clear_input(self):
        self.surface.clear_input()

    def on_submit(self, handler):
        self._on_submit = handler
        return handler

    def on_activate(self, handler):
        self._on_activate = handler
        return handler

    def on_delete(self, handler):
        self._on_delete = handler
        return handler

    # Gestures forwarded by the surface

    def submit(self, text):
        try:
            text = validate_text(text)
        except ValidationError as e:
            self.surface.alert(str(e))
            return None
        if self._on_submit is None:
            return None
        return self._on_submit(text)

    def click(self, role, todo_id):
        """
        One click fires exactly one hook: a click on the close mark deletes,
        a click on the item body toggles.
        """
        try:
            todo_id = int(todo_id)
        except (TypeError, ValueError):
            self.logger.warning(f"Ignoring click with invalid id: {todo_id!r}")
            return None

        if role == ROLE_CLOSE:
            handler = self._on_delete
        elif role == ROLE_ITEM:
            handler = self._on_activate
        else:
            self.logger.warning(f"Ignoring click on unknown target: {role!r}")
            return None

        if handler is None:
            return None
        return handler(todo_id)
