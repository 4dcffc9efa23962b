import logging

from fastapi import FastAPI
from .api import router
from .config import LOG_LEVEL

app = FastAPI(title="Insight Intake")


@app.on_event('startup')
def startup_event():
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


app.include_router(router, prefix='/api')


@app.get('/healthz')
def healthz():
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
