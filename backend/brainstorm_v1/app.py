from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging, uvicorn

from brainstorm_v1.routers.generate_and_upload import router as generate_and_upload_router

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ALLOWED_ORIGINS = [
    "https://brainstorm-resource-upload.onrender.com",
    "https://bstorm-upload.netlify.app",
    "http://localhost:3000"
]

PORT = 5000

# Initialize FastAPI app
app = FastAPI(title="Brainstorm - LLM Powered Unit Resource Generator")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

app.include_router(generate_and_upload_router)

@app.on_event("startup")
async def initialise():
    logger.info("Starting app...")

    # Clients stay None when their initialiser fails
    app.state.llm = None
    app.state.s3 = None
    app.state.postgresql_db = None

    logger.info("Initialising services...")
    from brainstorm_v1.initialisers.openai_client import initialiseOpenAI
    from brainstorm_v1.initialisers.s3 import initialiseS3
    from brainstorm_v1.initialisers.postgresql import initialisePostgreSQL

    for initialiser in [
        initialiseOpenAI,
        initialiseS3,
        initialisePostgreSQL
    ]:
        if not initialiser(app):
            logger.error("Failed to initialise a service, requests that need it will fail. Check logs for details.")

    logger.info("Startup complete.")

@app.on_event("shutdown")
async def shutdown():
    logger.info("Shutting down app...")

    from brainstorm_v1.shutdown.postgresql import shutdownPostgreSQL

    for shutdown in [
        shutdownPostgreSQL
    ]:
        if not shutdown(app):
            logger.error("Failed to shutdown all services, check logs for details.")

    logger.info("Shutdown complete.")

def run():
    logger.info(f"Server is running on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)

if __name__ == "__main__":
    run()
