"""Defines classes for representing notebooks, notes, and search criteria.

The most important classes are :class:`Notebook`, :class:`Note`, and :class:`NoteFilter`
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union
from urllib.parse import unquote_plus


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass
class Notebook:
    """A named collection of notes, optionally grouped into a stack."""

    guid: Optional[str] = None
    """Identifier assigned by the service. None for notebooks that have not been created yet."""

    name: Optional[str] = None

    stack: Optional[str] = None
    """Name of the stack the notebook is grouped into, if any."""

    default: bool = False
    """True if new notes without an explicit notebook are put into this one."""

    created: Optional[datetime] = None
    updated: Optional[datetime] = None

    def as_json(self) -> dict:
        """Returns a dict representing the instance, suitable for serializing as json."""
        return {
            'guid': self.guid,
            'name': self.name,
            'stack': self.stack,
            'default': self.default,
            'created': _isoformat(self.created),
            'updated': _isoformat(self.updated)
        }


@dataclass
class Note:
    """A titled content item belonging to exactly one notebook.

    Depending on how an instance was retrieved, not all fields are populated; for example, notes returned from
    :meth:`enotes.stores.base.Store.find_notes` never have a :attr:`body`.
    """

    guid: Optional[str] = None
    """Identifier assigned by the service. None for notes that have not been created yet."""

    title: Optional[str] = None

    body: Optional[str] = None
    """The note content, as an ENML document. See :mod:`enotes.enml` for conversions."""

    notebook: Optional[Notebook] = None
    """The notebook containing the note.

    When creating a note, only the notebook's :attr:`Notebook.guid` matters; if there is no notebook,
    the service puts the note in the user's default notebook.
    """

    created: Optional[datetime] = None
    updated: Optional[datetime] = None

    def as_json(self) -> dict:
        """Returns a dict representing the instance, suitable for serializing as json."""
        result = {
            'guid': self.guid,
            'title': self.title,
            'notebook': self.notebook.guid if self.notebook else None,
            'created': _isoformat(self.created),
            'updated': _isoformat(self.updated)
        }
        if self.body is not None:
            result['body'] = self.body
        return result


@dataclass
class NoteFilter:
    """Represents criteria for searching for notes.

    Some methods that take a NoteFilter parameter also accept strings as a convenience, which they
    pass to :meth:`parse`

    If both criteria are specified, the search only returns notes that satisfy both.
    """

    words: Optional[str] = None
    """Free-text search terms, in the service's search grammar (e.g. ``"coffee intitle:recipe"``)."""

    notebook_guid: Optional[str] = None
    """If set, only notes in this notebook are returned."""

    @classmethod
    def parse(cls, strquery: NoteFilterIsh) -> NoteFilter:
        """Converts the parameter to a NoteFilter, if it isn't one already.

        Query strings are split on spaces. A part of the form ``notebook:VALUE`` restricts the search to one
        notebook; the value is unquoted, so ``notebook:Travel+Plans`` refers to "Travel Plans". If more than one
        is given, the last one wins. All other parts are passed through as search words.

        Note that the value ends up in :attr:`notebook_guid` as given; :meth:`enotes.api.Enotes.search` resolves
        notebook names to GUIDs before querying.

        Examples:

        * ``"notebook:Journal coffee"`` - notes in the "Journal" notebook mentioning "coffee"
        """
        if isinstance(strquery, NoteFilter):
            return strquery
        query = cls()
        words = []
        for term in strquery.split():
            if term.lower().startswith('notebook:'):
                query.notebook_guid = unquote_plus(term[9:]) or None
            else:
                words.append(term)
        if words:
            query.words = ' '.join(words)
        return query


NoteFilterIsh = Union[str, NoteFilter]


@dataclass
class TemplateDirectives:
    """Passed by :meth:`enotes.api.Enotes.new` when it is rendering one of a user's templates.

    It is used for passing data in and out of the template.
    """

    title: Optional[str] = None
    """The title of the new note.

    If this is set before rendering the template, it is the title the user asked for. But the template can change it,
    and the template's value will take precedence. If it is still unset after rendering, the template's name is used.
    """

    notebook: Optional[str] = None
    """Name or GUID of the notebook the new note should go into. The template can change this too."""
