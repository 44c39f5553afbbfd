import logging

from brainstorm_v1.helpers.errors import CompletionError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

COMPLETION_MODEL = "gpt-4-turbo"
COMPLETION_TEMPERATURE = 0.7
COMPLETION_MAX_TOKENS = 500

SYSTEM_PROMPT = (
    "You are a university professor. Create a CAT out of 40 marks for this unit."
    "No multiple-choice questions or instructions or text styling"
)

def makeMessages(unit_code, unit_name):
    return [
        {
            "role": "system",
            "content": SYSTEM_PROMPT
        },
        {
            "role": "user",
            "content": f"Unit Code: {unit_code}, Unit Name: {unit_name}"
        }
    ]

def getCompletion(llm, unit_code, unit_name):
    logger.info(f"Requesting {COMPLETION_MODEL} completion for unit {unit_code}")
    try:
        response = llm.chat.completions.create(
            model=COMPLETION_MODEL,
            messages=makeMessages(unit_code, unit_name),
            temperature=COMPLETION_TEMPERATURE,
            max_tokens=COMPLETION_MAX_TOKENS
        )
        content = response.choices[0].message.content
    except Exception as e:
        raise CompletionError(f"Completion request failed for unit {unit_code}") from e

    if content is None:
        raise CompletionError(f"Completion for unit {unit_code} returned no content")

    logger.info(f"Received {len(content)} characters of completion for unit {unit_code}")
    return content
