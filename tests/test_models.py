from datetime import datetime, timezone

from enotes.models import Note, Notebook, NoteFilter


def test_parse_query():
    assert NoteFilter.parse('notebook:Travel+Plans coffee  intitle:recipe') == \
        NoteFilter(words='coffee intitle:recipe', notebook_guid='Travel Plans')
    assert NoteFilter.parse('NOTEBOOK:abc-123') == NoteFilter(notebook_guid='abc-123')
    assert NoteFilter.parse('notebook:one notebook:two') == NoteFilter(notebook_guid='two')


def test_parse_empty_query():
    assert NoteFilter.parse('') == NoteFilter()
    assert NoteFilter.parse('notebook:') == NoteFilter()


def test_parse_passes_filters_through():
    query = NoteFilter(words='x')
    assert NoteFilter.parse(query) is query


def test_notebook_as_json():
    book = Notebook(guid='nb1', name='Journal', stack='Personal', default=True,
                    created=datetime(2020, 1, 1, tzinfo=timezone.utc))
    assert book.as_json() == {
        'guid': 'nb1',
        'name': 'Journal',
        'stack': 'Personal',
        'default': True,
        'created': '2020-01-01T00:00:00+00:00',
        'updated': None
    }


def test_note_as_json():
    note = Note(guid='n1', title='Hi', notebook=Notebook(guid='nb1'))
    assert note.as_json() == {'guid': 'n1', 'title': 'Hi', 'notebook': 'nb1', 'created': None, 'updated': None}
    assert Note(body='<en-note/>').as_json()['body'] == '<en-note/>'
    assert Note().as_json()['notebook'] is None
