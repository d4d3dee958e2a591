"""Defines the API for accessing a user's notebooks and notes.

The most important class is :class:`Store`.
"""

from typing import List

from enotes.models import Note, Notebook, NoteFilter, NoteFilterIsh


class StoreError(Exception):
    """Base class for errors a :class:`Store` raises before sending anything to the service.

    Errors reported by the service itself are not wrapped in this class; they propagate as raised by the
    service's client library.
    """


class NoNotebookCachedError(StoreError):
    """Raised when an operation needs a previously seen notebook, but no notebooks have been seen yet."""


class NotebookNotFoundError(StoreError):
    """Raised when an operation needs a previously seen notebook, but the requested GUID has not been seen."""


class NoGUIDSetError(StoreError):
    """Raised when an operation on an existing note or notebook is given no GUID."""


class NoTitleSetError(StoreError):
    """Raised when a note update is requested without a title."""


class Store:
    """Base class for stores, which are responsible for reading, searching, and changing a user's notes.

    Stores translate between :mod:`enotes.models` and whatever the backing service uses.
    """
    def get_all_notebooks(self) -> List[Notebook]:
        """Returns every notebook in the account."""
        raise NotImplementedError()

    def get_notebook(self, guid: str) -> Notebook:
        """Looks up a single notebook by GUID."""
        raise NotImplementedError()

    def create_notebook(self, notebook: Notebook, default: bool = False) -> Notebook:
        """Creates a notebook with the name and stack of the given one.

        If default is True, the new notebook becomes the user's default notebook.
        Returns the notebook as created by the service, with its GUID populated.
        """
        raise NotImplementedError()

    def update_notebook(self, notebook: Notebook) -> None:
        """Changes the name and stack of an existing notebook, identified by its GUID.

        May raise :exc:`NoNotebookCachedError` or :exc:`NotebookNotFoundError` if the store needs to have seen the
        notebook before (for example via :meth:`get_all_notebooks`) and has not.
        """
        raise NotImplementedError()

    def create_note(self, note: Note) -> Note:
        """Creates a note with the title, body, and notebook of the given one.

        Returns the note as created by the service, with its GUID populated.
        """
        raise NotImplementedError()

    def get_note(self, guid: str, with_content: bool = False) -> Note:
        """Looks up a single note by GUID. The body is only populated if with_content is True."""
        raise NotImplementedError()

    def update_note(self, note: Note) -> None:
        """Changes the title, and the body if non-empty, of an existing note.

        Raises :exc:`NoGUIDSetError` or :exc:`NoTitleSetError` if the note lacks those fields.
        """
        raise NotImplementedError()

    def delete_note(self, guid: str) -> None:
        """Moves the note to the trash."""
        raise NotImplementedError()

    def find_notes(self, query: NoteFilterIsh = NoteFilter(), offset: int = 0, max_notes: int = 50) -> List[Note]:
        """Returns up to max_notes notes matching the filter, skipping the first offset matches.

        Only the GUID, title, notebook, and dates are populated.
        """
        raise NotImplementedError()

    def get_note_content(self, guid: str) -> str:
        """Returns the body of the note, as an ENML document."""
        raise NotImplementedError()

    def close(self) -> None:
        """Release any resources associated with the store. Should be called when you're done with an instance."""
        pass
