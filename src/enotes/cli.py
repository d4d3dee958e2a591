"""Command-line interface for enotes."""


import argparse
import json
import logging
import sys
from terminaltables import AsciiTable
from enotes.api import Enotes, Error
from enotes.models import Note
from enotes.stores.base import StoreError


def _print_note(note: Note) -> None:
    print(f'guid: {note.guid}')
    print(f'title: {note.title}')
    print(f'notebook: {note.notebook.name or note.notebook.guid if note.notebook else ""}')
    print(f'created: {note.created}')
    print(f'updated: {note.updated}')


def _read_text(value: str) -> str:
    if value == '-':
        return sys.stdin.read()
    return value


def _notebooks(args, en: Enotes) -> int:
    books = en.notebooks()
    if args.json:
        print(json.dumps([b.as_json() for b in books]))
    else:
        data = [('Stack', 'Name', 'GUID')]
        data += [(b.stack or '', f'{b.name} *' if b.default else b.name, b.guid) for b in books]
        print(AsciiTable(data).table)
    return 0


def _mknotebook(args, en: Enotes) -> int:
    book = en.create_notebook(args.name[0], stack=args.stack[0] if args.stack else None, default=args.default)
    if args.json:
        print(json.dumps(book.as_json()))
    else:
        print(f'Created notebook {book.guid}')
    return 0


def _rename(args, en: Enotes) -> int:
    if args.no_stack:
        book = en.rename_notebook(args.notebook[0], args.name[0], stack=None)
    elif args.stack:
        book = en.rename_notebook(args.notebook[0], args.name[0], stack=args.stack[0])
    else:
        book = en.rename_notebook(args.notebook[0], args.name[0])
    if args.json:
        print(json.dumps(book.as_json()))
    return 0


def _query(args, en: Enotes) -> int:
    notes = en.search(args.query or '', offset=args.offset, count=args.count)
    if args.json:
        print(json.dumps([n.as_json() for n in notes]))
    elif args.table:
        names = {b.guid: b.name for b in en.store.get_all_notebooks()}
        data = [('Title', 'Notebook', 'Updated', 'GUID')]
        for note in notes:
            book = note.notebook and names.get(note.notebook.guid, note.notebook.guid)
            data.append((note.title or '', book or '',
                         note.updated.strftime('%Y-%m-%d') if note.updated else '', note.guid))
        print(AsciiTable(data).table)
    else:
        for note in notes:
            print('--------------------')
            _print_note(note)
    return 0


def _show(args, en: Enotes) -> int:
    guid = args.guid[0]
    if args.raw:
        print(en.store.get_note_content(guid))
    else:
        print(en.text(guid))
    return 0


def _add(args, en: Enotes) -> int:
    note = en.add(args.title[0], _read_text(args.text), notebook=args.notebook[0] if args.notebook else None,
                  html=args.html)
    if args.json:
        print(json.dumps(note.as_json()))
    else:
        print(f'Created note {note.guid}')
    return 0


def _edit(args, en: Enotes) -> int:
    en.edit(args.guid[0], title=args.title[0] if args.title else None,
            text=_read_text(args.text) if args.text else None)
    return 0


def _rm(args, en: Enotes) -> int:
    for guid in args.guids:
        en.delete(guid)
    return 0


def _new(args, en: Enotes) -> int:
    note = en.new(args.template[0], title=args.title[0] if args.title else None,
                  notebook=args.notebook[0] if args.notebook else None)
    if args.json:
        print(json.dumps(note.as_json()))
    else:
        print(f'Created note {note.guid}')
    return 0


def argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser()
    parser.set_defaults(func=None)
    parser.add_argument('-v', '--verbose', action='store_true', help='Log requests made to the service.')

    subs = parser.add_subparsers(title='Commands')

    p_nbs = subs.add_parser('notebooks',
                            help='List notebooks, grouped by stack. The default notebook is marked with "*".')
    p_nbs.add_argument('-j', '--json', action='store_true', help='Output as JSON.')
    p_nbs.set_defaults(func=_notebooks)

    p_mk = subs.add_parser('mknotebook', help='Create a notebook. Prints the GUID of the new notebook.')
    p_mk.add_argument('name', nargs=1)
    p_mk.add_argument('-s', '--stack', nargs=1, help='Stack to put the notebook in.')
    p_mk.add_argument('-d', '--default', action='store_true', help='Make this the default notebook.')
    p_mk.add_argument('-j', '--json', action='store_true', help='Output the created notebook as JSON.')
    p_mk.set_defaults(func=_mknotebook)

    p_rename = subs.add_parser('rename', help='Rename a notebook, and optionally move it to another stack.')
    p_rename.add_argument('notebook', nargs=1, help='GUID or current name of the notebook.')
    p_rename.add_argument('name', nargs=1, help='New name.')
    p_rename_stack = p_rename.add_mutually_exclusive_group()
    p_rename_stack.add_argument('-s', '--stack', nargs=1, help='New stack. By default the stack is unchanged.')
    p_rename_stack.add_argument('--no-stack', action='store_true', help='Remove the notebook from its stack.')
    p_rename.add_argument('-j', '--json', action='store_true', help='Output the renamed notebook as JSON.')
    p_rename.set_defaults(func=_rename)

    p_q = subs.add_parser(
        'query',
        help='Search for notes. For full query syntax, see the documentation of '
             'enotes.models.NoteFilter.parse - an example query is "notebook:Journal coffee".')
    p_q.add_argument('query', nargs='?', help='Query string. If omitted, the query matches all notes.')
    p_q.add_argument('-o', '--offset', type=int, default=0, help='Number of matching notes to skip.')
    p_q.add_argument('-n', '--count', type=int,
                     help='Maximum number of notes to show. Defaults to page_size from your config.')
    p_q_formats = p_q.add_mutually_exclusive_group()
    p_q_formats.add_argument('-j', '--json', help='Output as JSON.', action='store_true')
    p_q_formats.add_argument('-t', '--table', help='Format output as a table.', action='store_true')
    p_q.set_defaults(func=_query)

    p_show = subs.add_parser('show', help='Print the content of a note as plain text.')
    p_show.add_argument('guid', nargs=1)
    p_show.add_argument('-r', '--raw', action='store_true', help='Print the ENML document instead of plain text.')
    p_show.set_defaults(func=_show)

    p_add = subs.add_parser('add', help='Create a note. Prints the GUID of the new note.')
    p_add.add_argument('title', nargs=1)
    p_add.add_argument('text', help='Content of the note, or "-" to read it from standard input.')
    p_add.add_argument('-b', '--notebook', nargs=1,
                       help='GUID or name of the notebook. Defaults to default_notebook from your config, '
                            'or else the account\'s default notebook.')
    p_add.add_argument('--html', action='store_true', help='Treat the content as an HTML fragment.')
    p_add.add_argument('-j', '--json', action='store_true', help='Output the created note as JSON.')
    p_add.set_defaults(func=_add)

    p_edit = subs.add_parser('edit', help='Change the title and/or content of a note.')
    p_edit.add_argument('guid', nargs=1)
    p_edit.add_argument('text', nargs='?',
                        help='New content of the note, or "-" to read it from standard input. '
                             'If omitted, the content is unchanged.')
    p_edit.add_argument('-t', '--title', nargs=1, help='New title. If omitted, the title is unchanged.')
    p_edit.set_defaults(func=_edit)

    p_rm = subs.add_parser('rm', help='Move notes to the trash.')
    p_rm.add_argument('guids', nargs='+')
    p_rm.set_defaults(func=_rm)

    p_new = subs.add_parser('new',
                            help='Create a note from a Mako template. You can either specify the path to the '
                                 'template, or just give its name without file extensions if it is matched by '
                                 'template_globs in your ~/.enotes.conf.py file. '
                                 'This command will print the GUID of the newly created note.')
    p_new.add_argument('template', nargs=1, help='Name or path of template.')
    p_new.add_argument('-t', '--title', nargs=1,
                       help='Suggested title. This may be overridden by the template. The template name is used '
                            'if neither gives a title.')
    p_new.add_argument('-b', '--notebook', nargs=1, help='GUID or name of the notebook.')
    p_new.add_argument('-j', '--json', action='store_true', help='Output the created note as JSON.')
    p_new.set_defaults(func=_new)

    return parser


def main(args=None) -> int:
    """Runs the tool and returns its exit code.

    args may be an array of string command-line arguments; if absent,
    the process's arguments are used.
    """
    parser = argparser()
    args = parser.parse_args(args)
    if not args.func:
        parser.print_help()
        return 1
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    with Enotes.for_user() as en:
        try:
            return args.func(args, en)
        except (Error, StoreError) as e:
            print(f'error: {e}', file=sys.stderr)
            return 1
