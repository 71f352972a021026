"""Command line entry point for TodoDesk: run the app, scaffold settings,
and inspect or edit the list without opening a window.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .exceptions import TodoDeskError
from .store import SqliteTodoStore
from .view import validate_text


TEMPLATE_SETTINGS = '''{
    "title": "TodoDesk",
    "width": 800,
    "height": 600,
    "resizable": true,
    "debug": false,
    "store": "local",
    "data_file": "todos.json",
    "db_path": "todos.db"
}
'''


def _make_app(args):
    from .application import App

    return App(
        config_file=args.config,
        store=getattr(args, 'store', None),
        debug=True if getattr(args, 'debug', False) else None,
    )


def _open_store(app):
    # Headless commands talk to the database the host would own
    if app.is_remote:
        return SqliteTodoStore(app.resolve_data_path(app.config['db_path']))
    return app.build_store()


def format_todos(todos) -> str:
    if not todos:
        return '(no todos)'
    return '\n'.join(
        f"[{'x' if t.completed else ' '}] {t.id}: {t.text}" for t in todos
    )


def cmd_run(args) -> int:
    app = _make_app(args)
    app.run()
    return 0


def cmd_init(args) -> int:
    target = Path(args.directory) / 'settings.json'
    if target.exists() and not args.force:
        print(f'[TodoDesk] {target} already exists (use --force to overwrite)')
        return 1
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(TEMPLATE_SETTINGS)
    print(f'[TodoDesk] Wrote {target}')
    return 0


def cmd_store(args) -> int:
    app = _make_app(args)
    with _open_store(app) as store:
        if args.command == 'add':
            store.add(validate_text(args.text))
        elif args.command == 'toggle':
            store.toggle(args.id)
        elif args.command == 'remove':
            store.remove(args.id)
        print(format_todos(store.list()))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='tododesk', description='TodoDesk to-do list')
    parser.add_argument('--config', default='settings.json', help='Path to settings.json')
    parser.add_argument('--store', choices=['local', 'sqlite', 'remote'], help='Override the configured store')
    sub = parser.add_subparsers(dest='command', required=True)

    run_p = sub.add_parser('run', help='Open the to-do window')
    run_p.add_argument('--debug', action='store_true', help='Enable debug logging and devtools')
    run_p.set_defaults(func=cmd_run)

    init_p = sub.add_parser('init', help='Write a template settings.json')
    init_p.add_argument('directory', nargs='?', default='.')
    init_p.add_argument('--force', action='store_true')
    init_p.set_defaults(func=cmd_init)

    list_p = sub.add_parser('list', help='Print the to-do list')
    list_p.set_defaults(func=cmd_store)

    add_p = sub.add_parser('add', help='Add a to-do')
    add_p.add_argument('text')
    add_p.set_defaults(func=cmd_store)

    toggle_p = sub.add_parser('toggle', help='Flip a to-do between done and not done')
    toggle_p.add_argument('id', type=int)
    toggle_p.set_defaults(func=cmd_store)

    remove_p = sub.add_parser('remove', help='Delete a to-do')
    remove_p.add_argument('id', type=int)
    remove_p.set_defaults(func=cmd_store)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except TodoDeskError as exc:
        print(f'[TodoDesk] Error: {exc}', file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
