from __future__ import annotations
from dataclasses import dataclass, field, replace
import os
import os.path
from typing import Optional, Set

SANDBOX_HOST = 'sandbox.evernote.com'
CHINA_HOST = 'app.yinxiang.com'
PRODUCTION_HOST = 'www.evernote.com'


@dataclass
class StoreConf:
    """Base class for store config. Use a subclass such as :class:`EvernoteStoreConf`."""

    def instantiate(self):
        raise NotImplementedError("Please use a subclass like EvernoteStoreConf instead!")

    def standardize(self):
        return self


@dataclass
class EvernoteStoreConf(StoreConf):
    """Configures enotes to access notes via the Evernote API, through :class:`enotes.stores.evernote.EvernoteStore`."""

    token: Optional[str] = None
    """Required. A developer token or OAuth access token for the account.

    If not set here, the ``EVERNOTE_TOKEN`` environment variable is used. Keeping the token out of your config file
    is recommended.
    """

    sandbox: bool = False
    """If True, connect to the sandbox service used for development instead of production."""

    china: bool = False
    """If True, connect to the Yinxiang Biji service instead of the international one."""

    service_host: Optional[str] = None
    """Host name of the service. If not set, it is chosen based on :attr:`sandbox` and :attr:`china`."""

    note_store_url: Optional[str] = None
    """URL of the user's NoteStore. If not set, it is requested from the service's UserStore when connecting."""

    def standardize(self):
        host = self.service_host
        if not host:
            host = SANDBOX_HOST if self.sandbox else CHINA_HOST if self.china else PRODUCTION_HOST
        return replace(
            self,
            token=self.token or os.environ.get('EVERNOTE_TOKEN'),
            service_host=host
        )

    def note_store(self):
        """Returns a NoteStore client connected over HTTPS. Call this on a standardized instance."""
        from evernote.edam.notestore import NoteStore
        from evernote.edam.userstore import UserStore
        from thrift.protocol import TBinaryProtocol
        from thrift.transport import THttpClient

        url = self.note_store_url
        if not url:
            user_store = UserStore.Client(TBinaryProtocol.TBinaryProtocol(
                THttpClient.THttpClient(f'https://{self.service_host}/edam/user')))
            url = user_store.getNoteStoreUrl(self.token)
        return NoteStore.Client(TBinaryProtocol.TBinaryProtocol(THttpClient.THttpClient(url)))

    def instantiate(self):
        from enotes.stores.evernote import EvernoteStore
        conf = self.standardize()
        if not conf.token:
            raise ValueError('`token` must be set in EvernoteStoreConf or the EVERNOTE_TOKEN environment variable.')
        return EvernoteStore(conf.token, conf.note_store())


@dataclass
class EnotesConf:
    store_conf: StoreConf
    """Configures how to access your notes."""

    template_globs: Set[str] = field(default_factory=set)
    """A set of path globs such as ``{"/notes/templates/*.mako"}`` to search for templates.

    This is used for the CLI command ``new``, and template-related methods of :class:`enotes.api.Enotes`.
    """

    default_notebook: Optional[str] = None
    """Name or GUID of the notebook new notes go into when none is specified.

    If not set, the account's default notebook is used.
    """

    page_size: int = 50
    """Maximum number of notes returned by a search when no count is given."""

    @classmethod
    def for_user(cls) -> EnotesConf:
        path = os.path.expanduser(os.path.join('~', '.enotes.conf.py'))
        if not os.path.exists(path):
            raise Exception(f'You need to create the config file: {path}')
        with open(path, 'r') as file:
            conf_script = file.read()
        context = {}
        exec(conf_script, context)
        if 'conf' not in context or not isinstance(context['conf'], cls):
            raise Exception('You need to assign an instance of EnotesConf to the variable `conf` '
                            f'in your config file: {path}')
        return context['conf']

    def standardize(self):
        return replace(
            self,
            store_conf=self.store_conf.standardize()
        )

    def instantiate(self):
        from enotes.api import Enotes
        return Enotes(self.standardize())
