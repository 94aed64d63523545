"""
FastAPI application for the messaging demo.

'create_app' wires a 'MessagingController' into a new FastAPI instance. The
controller lives on 'app.state' and routes reach it through the
'get_controller' dependency, so each app owns exactly the store it was built
with.

Security setup: CORS is open to a single origin only, and no CSRF middleware
is installed, so the front-end can POST without a token.

Routes
------
GET  /api/get-user-messages    current user messages
GET  /api/get-sender-messages  current sender messages
POST /api/add-user-message     append one message, return all user messages
GET  /api/health               liveness check
"""

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from messaging_toolkit.api.config import ServerSettings
from messaging_toolkit.message_database.controller import MessagingController
from messaging_toolkit.message_database.data_models.message import Message

router = APIRouter(prefix="/api")


def get_controller(request: Request) -> MessagingController:
    return request.app.state.controller


@router.get("/get-user-messages", response_model=list[Message])
async def get_user_messages(controller: MessagingController = Depends(get_controller)) -> list[Message]:
    return await controller.get_user_messages()


@router.get("/get-sender-messages", response_model=list[Message])
async def get_sender_messages(controller: MessagingController = Depends(get_controller)) -> list[Message]:
    return await controller.get_sender_messages()


@router.post("/add-user-message", response_model=list[Message])
async def add_user_message(
    new_message: Message, controller: MessagingController = Depends(get_controller)
) -> list[Message]:
    """Append 'new_message' as-is and return the full updated user sequence."""
    return await controller.add_user_message(new_message)


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


def create_app(controller: MessagingController, settings: ServerSettings | None = None) -> FastAPI:
    settings = settings or ServerSettings()

    app = FastAPI(title="Messaging demo")
    app.state.controller = controller
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.allowed_origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)

    logger.info(f"Messaging app created (allowed origin: {settings.allowed_origin})")
    return app
