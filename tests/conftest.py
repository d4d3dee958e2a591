import copy

from evernote.edam.error.ttypes import EDAMNotFoundException
from evernote.edam.notestore.ttypes import NotesMetadataList, NoteMetadata
from evernote.edam.type.ttypes import Notebook as RemoteNotebook, Note as RemoteNote
import pytest

from enotes.conf import EvernoteStoreConf
from enotes.stores.evernote import EvernoteStore

TOKEN = 'token'
CREATED = 1577836800000  # 2020-01-01T00:00:00Z


class FakeNoteStore:
    """In-memory stand-in for ``NoteStore.Client`` that records every call.

    Set ``error`` to make every subsequent call raise it.
    """

    def __init__(self):
        self.notebooks = {}
        self.notes = {}
        self.calls = []
        self.error = None
        self._usn = 0

    def _next_usn(self):
        self._usn += 1
        return self._usn

    def _record(self, method, *args):
        self.calls.append((method,) + args)
        if self.error:
            raise self.error
        return self._next_usn()

    def _guid(self, prefix):
        return f'{prefix}-{self._usn}'

    def add_notebook(self, name, stack=None, guid=None, default=False):
        usn = self._next_usn()
        book = RemoteNotebook(guid=guid or self._guid('nb'), name=name, stack=stack, defaultNotebook=default,
                              serviceCreated=CREATED, serviceUpdated=CREATED, updateSequenceNum=usn)
        self.notebooks[book.guid] = book
        return book

    def add_note(self, title, content=None, notebook_guid=None, guid=None):
        usn = self._next_usn()
        note = RemoteNote(guid=guid or self._guid('note'), title=title, content=content,
                          notebookGuid=notebook_guid, created=CREATED, updated=CREATED, updateSequenceNum=usn)
        self.notes[note.guid] = note
        return note

    def listNotebooks(self, authenticationToken):
        self._record('listNotebooks', authenticationToken)
        return [copy.copy(b) for b in self.notebooks.values()]

    def getNotebook(self, authenticationToken, guid):
        self._record('getNotebook', authenticationToken, guid)
        if guid not in self.notebooks:
            raise EDAMNotFoundException(identifier='Notebook.guid', key=guid)
        return copy.copy(self.notebooks[guid])

    def createNotebook(self, authenticationToken, notebook):
        usn = self._record('createNotebook', authenticationToken, notebook)
        created = copy.copy(notebook)
        created.guid = self._guid('nb')
        created.updateSequenceNum = usn
        created.serviceCreated = created.serviceUpdated = CREATED
        self.notebooks[created.guid] = created
        return copy.copy(created)

    def updateNotebook(self, authenticationToken, notebook):
        usn = self._record('updateNotebook', authenticationToken, notebook)
        if notebook.guid not in self.notebooks:
            raise EDAMNotFoundException(identifier='Notebook.guid', key=notebook.guid)
        updated = copy.copy(notebook)
        updated.updateSequenceNum = usn
        self.notebooks[notebook.guid] = updated
        return usn

    def createNote(self, authenticationToken, note):
        usn = self._record('createNote', authenticationToken, note)
        created = copy.copy(note)
        created.guid = self._guid('note')
        if not created.notebookGuid:
            created.notebookGuid = next((b.guid for b in self.notebooks.values() if b.defaultNotebook), None)
        created.updateSequenceNum = usn
        created.created = created.updated = CREATED
        self.notes[created.guid] = created
        return copy.copy(created)

    def getNote(self, authenticationToken, guid, withContent, withResourcesData, withResourcesRecognition,
                withResourcesAlternateData):
        self._record('getNote', authenticationToken, guid, withContent, withResourcesData,
                     withResourcesRecognition, withResourcesAlternateData)
        if guid not in self.notes:
            raise EDAMNotFoundException(identifier='Note.guid', key=guid)
        note = copy.copy(self.notes[guid])
        if not withContent:
            note.content = None
        return note

    def updateNote(self, authenticationToken, note):
        usn = self._record('updateNote', authenticationToken, note)
        if note.guid not in self.notes:
            raise EDAMNotFoundException(identifier='Note.guid', key=note.guid)
        existing = self.notes[note.guid]
        existing.title = note.title
        if note.content is not None:
            existing.content = note.content
        existing.updateSequenceNum = usn
        return copy.copy(existing)

    def deleteNote(self, authenticationToken, guid):
        usn = self._record('deleteNote', authenticationToken, guid)
        if guid not in self.notes:
            raise EDAMNotFoundException(identifier='Note.guid', key=guid)
        del self.notes[guid]
        return usn

    def findNotesMetadata(self, authenticationToken, filter, offset, maxNotes, resultSpec):
        self._record('findNotesMetadata', authenticationToken, filter, offset, maxNotes, resultSpec)
        matches = []
        for note in self.notes.values():
            if filter.notebookGuid and not note.notebookGuid == filter.notebookGuid:
                continue
            if filter.words:
                haystack = f'{note.title} {note.content or ""}'.lower()
                if not all(w in haystack for w in filter.words.lower().split()):
                    continue
            matches.append(note)
        page = matches[offset:offset + maxNotes]
        return NotesMetadataList(
            startIndex=offset,
            totalNotes=len(matches),
            notes=[NoteMetadata(guid=n.guid, title=n.title, notebookGuid=n.notebookGuid, created=n.created,
                                updated=n.updated) for n in page])

    def getNoteContent(self, authenticationToken, guid):
        self._record('getNoteContent', authenticationToken, guid)
        if guid not in self.notes:
            raise EDAMNotFoundException(identifier='Note.guid', key=guid)
        return self.notes[guid].content


@pytest.fixture
def note_store():
    return FakeNoteStore()


@pytest.fixture
def store(note_store):
    return EvernoteStore(TOKEN, note_store)


@pytest.fixture
def connect(note_store, monkeypatch):
    """Makes EvernoteStoreConf hand out the fake note store instead of connecting to the service."""
    monkeypatch.setattr(EvernoteStoreConf, 'note_store', lambda self: note_store)
    return note_store
