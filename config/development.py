DEBUG = True

LOG_LEVEL = "WARNING"

CURRENCY_SYMBOL = "$"

PROMPT_MAX_ATTEMPTS = None
