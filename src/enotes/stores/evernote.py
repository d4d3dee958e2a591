"""Provides the :class:`EvernoteStore` class."""

import copy
from datetime import datetime, timezone
import logging
from typing import List, Optional

from evernote.edam.notestore.ttypes import NoteFilter as RemoteNoteFilter, NotesMetadataResultSpec
from evernote.edam.type.ttypes import Note as RemoteNote, Notebook as RemoteNotebook

from enotes.cache import NotebookCache
from enotes.models import Note, Notebook, NoteFilter, NoteFilterIsh
from enotes.stores.base import Store, NoNotebookCachedError, NotebookNotFoundError, NoGUIDSetError,\
    NoTitleSetError

logger = logging.getLogger(__name__)


def _from_timestamp(millis: Optional[int]) -> Optional[datetime]:
    if millis is None:
        return None
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)


class EvernoteStore(Store):
    """Accesses notes through the Evernote NoteStore API.

    ``note_store`` is anything with the methods of ``evernote.edam.notestore.NoteStore.Client``; normally you get
    one from :meth:`enotes.conf.EvernoteStoreConf.note_store`. The token is passed explicitly to every call.

    Notebooks returned by the service are remembered in :attr:`cache`, which :meth:`update_notebook` relies on.
    Errors raised by ``note_store`` are not caught.

    .. attribute:: cache
       :type: enotes.cache.NotebookCache
    """

    def __init__(self, token: str, note_store):
        self.token = token
        self.note_store = note_store
        self.cache = NotebookCache()

    def _notebook(self, remote: RemoteNotebook) -> Notebook:
        return Notebook(
            guid=remote.guid,
            name=remote.name,
            stack=remote.stack,
            default=bool(remote.defaultNotebook),
            created=_from_timestamp(remote.serviceCreated),
            updated=_from_timestamp(remote.serviceUpdated))

    def _notebook_for_guid(self, guid: Optional[str]) -> Optional[Notebook]:
        if not guid:
            return None
        cached = self.cache.get(guid)
        return self._notebook(cached) if cached else Notebook(guid=guid)

    def _note(self, remote) -> Note:
        return Note(
            guid=remote.guid,
            title=remote.title,
            body=getattr(remote, 'content', None),
            notebook=self._notebook_for_guid(remote.notebookGuid),
            created=_from_timestamp(remote.created),
            updated=_from_timestamp(remote.updated))

    def get_all_notebooks(self) -> List[Notebook]:
        logger.debug('listing notebooks')
        remotes = self.note_store.listNotebooks(self.token)
        for remote in remotes:
            self.cache.add(remote)
        return [self._notebook(r) for r in remotes]

    def get_notebook(self, guid: str) -> Notebook:
        if not guid:
            raise NoGUIDSetError('Notebook GUID is required')
        logger.debug('fetching notebook %s', guid)
        remote = self.note_store.getNotebook(self.token, guid)
        self.cache.add(remote)
        return self._notebook(remote)

    def create_notebook(self, notebook: Notebook, default: bool = False) -> Notebook:
        remote = RemoteNotebook(name=notebook.name, stack=notebook.stack, defaultNotebook=default)
        created = self.note_store.createNotebook(self.token, remote)
        self.cache.add(created)
        logger.info('created notebook %s', created.guid)
        return self._notebook(created)

    def update_notebook(self, notebook: Notebook) -> None:
        if not len(self.cache):
            raise NoNotebookCachedError('No notebooks have been retrieved yet')
        cached = self.cache.get(notebook.guid)
        if not cached:
            raise NotebookNotFoundError(f'Notebook has not been retrieved: {notebook.guid}')
        remote = copy.copy(cached)
        remote.name = notebook.name
        remote.stack = notebook.stack
        logger.debug('updating notebook %s', notebook.guid)
        remote.updateSequenceNum = self.note_store.updateNotebook(self.token, remote)
        self.cache.add(remote)

    def create_note(self, note: Note) -> Note:
        remote = RemoteNote(title=note.title, content=note.body)
        if note.notebook and note.notebook.guid:
            remote.notebookGuid = note.notebook.guid
        created = self.note_store.createNote(self.token, remote)
        logger.info('created note %s', created.guid)
        return self._note(created)

    def get_note(self, guid: str, with_content: bool = False) -> Note:
        if not guid:
            raise NoGUIDSetError('Note GUID is required')
        logger.debug('fetching note %s', guid)
        return self._note(self.note_store.getNote(self.token, guid, with_content, False, False, False))

    def update_note(self, note: Note) -> None:
        if not note.guid:
            raise NoGUIDSetError('Note GUID is required')
        if not note.title:
            raise NoTitleSetError('Note title is required')
        remote = RemoteNote(guid=note.guid, title=note.title)
        if note.body:
            remote.content = note.body
        logger.debug('updating note %s', note.guid)
        self.note_store.updateNote(self.token, remote)

    def delete_note(self, guid: str) -> None:
        if not guid:
            raise NoGUIDSetError('Note GUID is required')
        self.note_store.deleteNote(self.token, guid)
        logger.info('deleted note %s', guid)

    def find_notes(self, query: NoteFilterIsh = NoteFilter(), offset: int = 0, max_notes: int = 50) -> List[Note]:
        query = NoteFilter.parse(query)
        remote_filter = RemoteNoteFilter()
        if query.words:
            remote_filter.words = query.words
        if query.notebook_guid:
            remote_filter.notebookGuid = query.notebook_guid
        spec = NotesMetadataResultSpec(includeTitle=True, includeNotebookGuid=True, includeCreated=True,
                                       includeUpdated=True)
        logger.debug('searching notes: %s (offset %d, max %d)', query, offset, max_notes)
        result = self.note_store.findNotesMetadata(self.token, remote_filter, offset, max_notes, spec)
        return [self._note(n) for n in (result.notes or [])]

    def get_note_content(self, guid: str) -> str:
        if not guid:
            raise NoGUIDSetError('Note GUID is required')
        logger.debug('fetching content of note %s', guid)
        return self.note_store.getNoteContent(self.token, guid)
