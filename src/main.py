import uvicorn
from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from roundrobin import config
from roundrobin.router import router as roundrobin_router

app = FastAPI(title="Badminton Round Robin")
app.include_router(roundrobin_router)


@app.get("/")
async def index():
    return RedirectResponse("/roundrobin/", status_code=303)


def run():
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
