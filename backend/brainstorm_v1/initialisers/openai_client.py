import logging, os, openai

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

AIML_API_URL = os.getenv("AIML_API_URL", "https://api.aimlapi.com/v1")
AIML_API_KEY = os.getenv("AIML_API_KEY")

def initialiseOpenAI(app):
    logger.info(f"Setting up OpenAI client for completions at {AIML_API_URL}...")
    try:
        app.state.llm = openai.OpenAI(
            base_url=AIML_API_URL,
            api_key=AIML_API_KEY
        )
    except Exception as e:
        logger.error(f"Failed to initialize OpenAI client: {e}")
        return False
    return True
