import inspect
import logging
from typing import Awaitable, Callable

from models.toast import ToastDTO

logger = logging.getLogger(__name__)

ToastSink = Callable[[ToastDTO], Awaitable[None] | None]


class NotificationService:
    """
    Fire-and-forget toasts.

    The storefront registers one or more sinks (websocket push, session
    flash, test collectors). Every toast is logged; a failing sink is logged
    and skipped, it never reaches the caller.
    """

    _sinks: list[ToastSink] = []

    @staticmethod
    def register_sink(sink: ToastSink) -> None:
        if sink not in NotificationService._sinks:
            NotificationService._sinks.append(sink)

    @staticmethod
    def unregister_sink(sink: ToastSink) -> None:
        if sink in NotificationService._sinks:
            NotificationService._sinks.remove(sink)

    @staticmethod
    def clear_sinks() -> None:
        NotificationService._sinks.clear()

    @staticmethod
    async def toast(user_id: str | None, title: str, description: str = "", success: bool = True) -> ToastDTO:
        toast = ToastDTO(user_id=user_id, title=title, description=description, success=success)
        if success:
            logger.info(f"[Toast] {user_id}: {title} - {description}")
        else:
            logger.warning(f"[Toast] {user_id}: {title} - {description}")

        for sink in list(NotificationService._sinks):
            try:
                result = sink(toast)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.error(f"[Toast] Sink {getattr(sink, '__name__', sink)!r} failed: {e}")
        return toast
