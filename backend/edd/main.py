import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from edd.api.routes import router as api_router
from edd.config import settings
from edd.logging import configure_logging, get_logger

app = FastAPI(title="EDD API")
logger = get_logger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type"],
)


@app.on_event("startup")
def on_startup() -> None:
    configure_logging(settings.log_level)
    logger.info(
        "startup: env=%s mot=%s geo_providers=%s ip_headers=%s",
        settings.env,
        settings.mot,
        ",".join(settings.geo_providers),
        ",".join(settings.client_ip_headers),
    )
    if not settings.origin_pin or not settings.delhivery_token:
        logger.warning("startup: ORIGIN_PIN or DELHIVERY_TOKEN not set; every /edd request will ask for a pincode")


app.include_router(api_router)


def run() -> None:
    uvicorn.run("edd.main:app", host="0.0.0.0", port=settings.port, proxy_headers=True)
