"""ModelListWorker QThread for the async model listing call."""

import asyncio
import logging

from PySide6.QtCore import QThread, Signal

from core.services.model_service import ModelService

logger = logging.getLogger(__name__)


class ModelListWorker(QThread):
    """Worker thread that fetches available models.

    The worker creates its own asyncio event loop and awaits
    ``ModelService.list_models``. It never touches settings state; the
    result is handed back through signals.

    Signals:
        models_fetched: Emitted with the model list, or None when the
            service had no answer
        failed: Emitted with an error message when the call raised
    """

    models_fetched = Signal(object)
    failed = Signal(str)

    def __init__(self, model_service: ModelService, api_keys: list[str], base_url: str):
        super().__init__()
        self._model_service = model_service
        self.api_keys = list(api_keys)
        self.base_url = base_url

    def run(self):
        loop = asyncio.new_event_loop()
        try:
            asyncio.set_event_loop(loop)
            models = loop.run_until_complete(
                self._model_service.list_models(self.api_keys, self.base_url)
            )
            self.models_fetched.emit(models)
        except Exception as e:
            logger.exception("Model listing failed: %s", e)
            self.failed.emit(str(e))
        finally:
            asyncio.set_event_loop(None)
            loop.close()
