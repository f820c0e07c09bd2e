from fastapi import FastAPI

from api.routers.public_router import router as public_router

# FastAPI Instance
app = FastAPI(title="Public Blog Search API", version="1.0.0")

# Anonymous, read-only access to published blogs
app.include_router(public_router, prefix="/public", tags=["public"])


@app.get("/health")
def health():
    return {"status": "healthy"}
