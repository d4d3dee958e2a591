"""Provides the :class:`NotebookCache` class."""

import logging
from typing import Dict, Iterator, Optional

from evernote.edam.type.ttypes import Notebook as RemoteNotebook

logger = logging.getLogger(__name__)


class NotebookCache:
    """Remembers the notebook structures most recently received from the service, keyed by GUID.

    The cached structures are the service's own (``evernote.edam.type.ttypes.Notebook``) rather than
    :class:`enotes.models.Notebook`, so that updates can send back every field the service knows about,
    including ones the models do not represent.

    Entries are never refreshed automatically; they are replaced whenever a structure with the same GUID is added.
    """

    def __init__(self):
        self._notebooks: Dict[str, RemoteNotebook] = {}

    def add(self, notebook: RemoteNotebook) -> None:
        """Stores the notebook, replacing any entry with the same GUID. Notebooks without a GUID are ignored."""
        if not notebook.guid:
            return
        logger.debug('caching notebook %s', notebook.guid)
        self._notebooks[notebook.guid] = notebook

    def get(self, guid: str) -> Optional[RemoteNotebook]:
        return self._notebooks.get(guid)

    def remove(self, guid: str) -> None:
        self._notebooks.pop(guid, None)

    def clear(self) -> None:
        self._notebooks.clear()

    def __len__(self) -> int:
        return len(self._notebooks)

    def __contains__(self, guid) -> bool:
        return guid in self._notebooks

    def __iter__(self) -> Iterator[RemoteNotebook]:
        return iter(list(self._notebooks.values()))
