import os.path

import pytest

from enotes.api import Enotes
from enotes.conf import EnotesConf, EvernoteStoreConf, StoreConf
from enotes.stores.evernote import EvernoteStore


def test_for_user_no_file(fs):
    with pytest.raises(Exception, match=r'You need to create the config file: .*\.enotes\.conf\.py'):
        EnotesConf.for_user()


def test_for_user_no_conf_variable(fs):
    fs.create_file(os.path.expanduser('~/.enotes.conf.py'), contents='config = 1')
    with pytest.raises(Exception, match=r'You need to assign an instance of EnotesConf'):
        EnotesConf.for_user()


def test_for_user(fs, connect):
    confpy = """from enotes.conf import *
conf = EnotesConf(store_conf=EvernoteStoreConf(token='secret', sandbox=True), default_notebook='Inbox')"""
    fs.create_file(os.path.expanduser('~/.enotes.conf.py'), contents=confpy)
    conf = EnotesConf.for_user()
    assert conf == EnotesConf(store_conf=EvernoteStoreConf(token='secret', sandbox=True), default_notebook='Inbox')
    en = Enotes.for_user()
    assert en.store.token == 'secret'
    assert en.store.note_store is connect


def test_service_host():
    assert EvernoteStoreConf(token='t').standardize().service_host == 'www.evernote.com'
    assert EvernoteStoreConf(token='t', sandbox=True).standardize().service_host == 'sandbox.evernote.com'
    assert EvernoteStoreConf(token='t', china=True).standardize().service_host == 'app.yinxiang.com'
    assert EvernoteStoreConf(token='t', sandbox=True, service_host='example.com').standardize().service_host == \
        'example.com'


def test_token_from_environment(monkeypatch):
    monkeypatch.setenv('EVERNOTE_TOKEN', 'from-env')
    assert EvernoteStoreConf().standardize().token == 'from-env'
    assert EvernoteStoreConf(token='explicit').standardize().token == 'explicit'


def test_instantiate_requires_token(monkeypatch, connect):
    monkeypatch.delenv('EVERNOTE_TOKEN', raising=False)
    with pytest.raises(ValueError, match='`token` must be set'):
        EvernoteStoreConf().instantiate()


def test_instantiate(connect):
    store = EvernoteStoreConf(token='t').instantiate()
    assert isinstance(store, EvernoteStore)
    assert store.token == 't'
    assert store.note_store is connect


def test_base_store_conf():
    with pytest.raises(NotImplementedError):
        StoreConf().instantiate()
