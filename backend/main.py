"""
Family Tree Backend - FastAPI entry point.
Computes the family tree layout server side; the browser only renders nodes and edges.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import register_routes


def create_app() -> FastAPI:
    app = FastAPI(title="Family Tree Backend")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_routes(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=3001)
