"""Identity signal: the signed-in user id supplied by the auth provider."""

from collections.abc import Awaitable, Callable

from src.seo_center.core.logging import bind_user_context, get_logger

logger = get_logger(__name__)

IdentityListener = Callable[[str | None], Awaitable[None]]


class IdentitySignal:
    """Holds ``current_user_id`` and notifies listeners when it changes.

    Listeners are awaited in registration order. Setting the same value again
    does not notify.
    """

    def __init__(self, user_id: str | None = None):
        self._user_id = user_id or None
        self._listeners: list[IdentityListener] = []

    @property
    def current_user_id(self) -> str | None:
        return self._user_id

    def subscribe(self, listener: IdentityListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    async def set_user(self, user_id: str | None) -> None:
        user_id = user_id or None
        if user_id == self._user_id:
            return

        previous = self._user_id
        self._user_id = user_id
        bind_user_context(user_id)
        logger.info(
            "Identity changed",
            signed_in=user_id is not None,
            switched_account=previous is not None and user_id is not None,
        )
        for listener in list(self._listeners):
            await listener(user_id)

    async def sign_in(self, user_id: str) -> None:
        if not user_id:
            raise ValueError("user_id is required to sign in")
        await self.set_user(user_id)

    async def sign_out(self) -> None:
        await self.set_user(None)
