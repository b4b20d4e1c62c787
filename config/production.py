DEBUG = False

LOG_LEVEL = "ERROR"

CURRENCY_SYMBOL = "$"

PROMPT_MAX_ATTEMPTS = None
