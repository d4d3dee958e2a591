"""Handles interaction with the service notes are stored in.

:class:`enotes.stores.base.Store` defines an API.
:class:`enotes.stores.evernote.EvernoteStore` implements it on top of the Evernote NoteStore API.
"""
