"""Provides the main entry point for using the library, :class:`Enotes`"""

from __future__ import annotations
from dataclasses import replace
from glob import glob
import logging
import os.path
from typing import Dict, List, Optional
from mako.template import Template
from enotes import enml
from enotes.conf import EnotesConf
from enotes.models import Note, Notebook, NoteFilter, NoteFilterIsh, TemplateDirectives

logger = logging.getLogger(__name__)

_UNCHANGED = object()


class Error(Exception):
    pass


class Enotes:
    """Main entry point for working programmatically with your notes.

    Generally, you should get an instance using the :meth:`Enotes.for_user` method. Call :meth:`close` when you're
    done with it, or else use it as a context manager.

    This class contains methods such as :meth:`Enotes.add` and :meth:`Enotes.search` that accept plain text and
    notebook names. The :attr:`store` attribute, which is an instance of :class:`enotes.stores.base.Store`,
    provides the lower-level operations, which work with ENML and GUIDs.

    .. attribute:: conf
       :type: enotes.conf.EnotesConf

       Typically loaded from the variable ``conf`` in the file ``~/.enotes.conf.py``

    .. attribute:: store
       :type: enotes.stores.base.Store

    Here's an example of how to use this class. This would print the text of every note in the "Journal" notebook
    that mentions coffee.

    .. code-block:: python

       from enotes.api import Enotes
       with Enotes.for_user() as en:
           for note in en.search('notebook:Journal coffee'):
               print(en.text(note.guid))
    """

    @staticmethod
    def for_user() -> Enotes:
        """Creates an instance using the user's ``~/.enotes.conf.py`` file.

        Raises :exc:`Exception` if it does not exist or does not define configuration.
        """
        return EnotesConf.for_user().instantiate()

    def __init__(self, conf: EnotesConf):
        self.conf = conf
        self.store = conf.store_conf.instantiate()

    def notebooks(self) -> List[Notebook]:
        """Returns all notebooks, sorted by stack and then name."""
        books = self.store.get_all_notebooks()
        return sorted(books, key=lambda b: ((b.stack or '').lower(), (b.name or '').lower()))

    def find_notebook(self, ref: str) -> Optional[Notebook]:
        """Returns the notebook whose GUID or name (case-insensitively) matches ref, or None if there is none.

        GUID matches take precedence over name matches.
        """
        books = self.store.get_all_notebooks()
        for book in books:
            if book.guid == ref:
                return book
        for book in books:
            if book.name and book.name.lower() == ref.lower():
                return book
        return None

    def _require_notebook(self, ref: str) -> Notebook:
        book = self.find_notebook(ref)
        if not book:
            raise Error(f'Notebook does not exist: {ref}')
        return book

    def create_notebook(self, name: str, stack: Optional[str] = None, default: bool = False) -> Notebook:
        """Creates a notebook and returns it. If default is True, it becomes the account's default notebook."""
        return self.store.create_notebook(Notebook(name=name, stack=stack), default)

    def rename_notebook(self, ref: str, name: str, stack=_UNCHANGED) -> Notebook:
        """Changes the name of the notebook identified by ref (a GUID or name).

        The notebook's stack is kept unless a new one is given; pass None to remove it from its stack.
        Raises :exc:`Error` if the notebook cannot be found. Returns the notebook with its new name.
        """
        book = self._require_notebook(ref)
        book = replace(book, name=name, stack=book.stack if stack is _UNCHANGED else stack)
        self.store.update_notebook(book)
        return book

    def _notebook_guid(self, ref: Optional[str]) -> Optional[str]:
        ref = ref or self.conf.default_notebook
        if not ref:
            return None
        return self._require_notebook(ref).guid

    def add(self, title: str, text: str, notebook: Optional[str] = None, html: bool = False) -> Note:
        """Creates a note from plain text, or from an HTML fragment if html is True.

        notebook may be a GUID or name; if omitted, :attr:`enotes.conf.EnotesConf.default_notebook` is used, or else
        the account's default notebook. Raises :exc:`Error` if the notebook cannot be found.
        """
        body = enml.from_html(text) if html else enml.from_text(text)
        guid = self._notebook_guid(notebook)
        return self.store.create_note(Note(title=title, body=body,
                                           notebook=Notebook(guid=guid) if guid else None))

    def search(self, query: NoteFilterIsh = '', offset: int = 0, count: Optional[int] = None) -> List[Note]:
        """Returns notes matching the query. See :meth:`enotes.models.NoteFilter.parse` for the query syntax.

        Unlike :meth:`enotes.stores.base.Store.find_notes`, the ``notebook:`` part of the query may be a notebook
        name. If no notebook matches, the value is assumed to be a GUID.

        count defaults to :attr:`enotes.conf.EnotesConf.page_size`.
        """
        query = NoteFilter.parse(query)
        if query.notebook_guid:
            book = self.find_notebook(query.notebook_guid)
            if book:
                query = replace(query, notebook_guid=book.guid)
        return self.store.find_notes(query, offset, count if count is not None else self.conf.page_size)

    def text(self, guid: str) -> str:
        """Returns the plain text of the note's body."""
        return enml.to_text(self.store.get_note_content(guid))

    def edit(self, guid: str, title: Optional[str] = None, text: Optional[str] = None) -> None:
        """Changes the title and/or the body of a note.

        If title is not given, the note keeps its current title. If text is not given (or is empty), the body is
        left unchanged.
        """
        if not title:
            title = self.store.get_note(guid).title
        body = enml.from_text(text) if text else None
        self.store.update_note(Note(guid=guid, title=title, body=body))

    def delete(self, guid: str) -> None:
        """Moves the note to the trash."""
        self.store.delete_note(guid)

    def templates_by_name(self) -> Dict[str, str]:
        """Returns paths of note templates that are known based on the config.

        The name is the part of the filename before any `.` character. If multiple templates
        have the same name, the one whose path is lexicographically first will appear in the dict.
        """
        paths = [p for g in self.conf.template_globs for p in glob(g, recursive=True) if os.path.isfile(p)]
        paths.sort(reverse=True)
        return {os.path.split(p)[1].split('.')[0].lower(): p for p in paths}

    def template_for_name(self, name: str) -> Optional[str]:
        """Returns the path to the template for the given name, if one is found.

        If treating the name as a relative or absolute path leads to a file, that file is used.
        Otherwise, the name is looked up from :meth:`Enotes.templates_by_name`, case-insensitively.
        Returns None if a matching template cannot be found.
        """
        if os.path.isfile(name):
            return name
        else:
            return self.templates_by_name().get(name.lower())

    def new(self, template_name: str, title: Optional[str] = None, notebook: Optional[str] = None) -> Note:
        """Creates a new note using the specified template.

        The template name will be looked up using :meth:`template_for_name`.

        Raises :exc:`FileNotFoundError` if the template cannot be found.

        The template should render an HTML fragment (or a complete ENML document, which is used as-is).

        The following names are defined in the template's namespace:

        * ``en``: this instance of :class:`Enotes`
        * ``directives``: an instance of :class:`enotes.models.TemplateDirectives`
        * ``template_path``: the path of the template being rendered

        Returns the created note.
        """
        template_path = self.template_for_name(template_name)
        if not (template_path and os.path.isfile(template_path)):
            raise FileNotFoundError(f'Template does not exist: {template_name}')
        template = Template(filename=os.path.abspath(template_path))
        td = TemplateDirectives(title=title, notebook=notebook)
        content = template.render(en=self, directives=td, template_path=template_path)
        if not td.title:
            td.title = os.path.split(template_path)[1].split('.')[0]
        body = content if enml.is_enml(content) else enml.from_html(content)
        guid = self._notebook_guid(td.notebook)
        logger.debug('rendered template %s for note %r', template_path, td.title)
        return self.store.create_note(Note(title=td.title, body=body,
                                           notebook=Notebook(guid=guid) if guid else None))

    def close(self):
        """Closes the associated store and releases any other resources."""
        self.store.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.store.close()
