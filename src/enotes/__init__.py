"""Helps manage notes stored in Evernote.

If you installed via ``pip``, run ``enotes -h`` to get help.

To use the Python API, look at :class:`enotes.api.Enotes`
"""
