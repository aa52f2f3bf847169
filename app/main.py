import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.v1.forms import router as forms_router
from app.api.web import router as web_router
from app.core.config import settings
from app.wiring.dependencies import close_classifier

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("session_id", "feature", "label", "missing", "status_code", "reason"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)


@asynccontextmanager
async def lifespan(_: FastAPI):
    yield
    close_classifier()


app = FastAPI(title="Mushroom Classifier", version="1.0.0", lifespan=lifespan)

app.include_router(forms_router, prefix="/api/v1", tags=["forms"])
app.include_router(web_router, tags=["web"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
