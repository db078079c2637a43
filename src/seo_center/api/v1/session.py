"""Session endpoints - bridge from the auth provider to the identity signal."""

from fastapi import APIRouter, status

from src.seo_center.api.dependencies import Identity, Store
from src.seo_center.schemas.api import SessionCreate, SessionRead

router = APIRouter(prefix="/session", tags=["session"])


def _session_state(store: Store) -> SessionRead:
    return SessionRead(mode=store.mode, user_id=store.user_id, loading=store.loading)


@router.get(
    "",
    response_model=SessionRead,
    summary="Current mode",
    description="Whether the store runs on local (guest) or cloud data.",
)
async def get_session_state(store: Store) -> SessionRead:
    return _session_state(store)


@router.post(
    "",
    response_model=SessionRead,
    status_code=status.HTTP_200_OK,
    summary="Sign in",
    description="Switch to the signed-in user's cloud data. Local data stays on disk untouched.",
)
async def sign_in(request: SessionCreate, identity: Identity, store: Store) -> SessionRead:
    await identity.sign_in(request.user_id)
    return _session_state(store)


@router.delete(
    "",
    response_model=SessionRead,
    summary="Sign out",
    description="Return to guest mode and reload local data.",
)
async def sign_out(identity: Identity, store: Store) -> SessionRead:
    await identity.sign_out()
    return _session_state(store)
