"""Account: the root context every top-level collection hangs off."""

from __future__ import annotations

from restcursor.client import Client, HttpClient
from restcursor.collection import PER_PAGE, Collection
from restcursor.core.config import Settings


class Account:
    """An API account bound to a client.

    Top-level collections are built on demand and reused::

        account = Account(client, account_id=12345)
        account.collection("Items").find(42)
    """

    def __init__(self, client: Client, account_id: int | str, *, per_page: int = PER_PAGE) -> None:
        self._client = client
        self.account_id = account_id
        self.per_page = per_page
        self._collections: dict[str, Collection] = {}

    @classmethod
    def from_settings(cls, settings: Settings, client: Client | None = None) -> Account:
        """Build an account from settings, creating an :class:`HttpClient` if needed.

        Raises ``ValueError`` if the settings carry no account id.
        """
        if not settings.account_id:
            raise ValueError("settings.account_id is required to build an Account")
        return cls(
            client or HttpClient.from_settings(settings),
            settings.account_id,
            per_page=settings.per_page,
        )

    @property
    def client(self) -> Client:
        return self._client

    @property
    def base_path(self) -> str:
        return f"/API/Account/{self.account_id}"

    def collection(self, name: str) -> Collection:
        if name not in self._collections:
            self._collections[name] = Collection(self, name, per_page=self.per_page)
        return self._collections[name]

    def __repr__(self) -> str:
        return f"<Account {self.account_id}>"
