DEBUG = False
TESTING = True

LOG_LEVEL = "DEBUG"

CURRENCY_SYMBOL = "$"

# Scripted sessions must never hang on a bad answer.
PROMPT_MAX_ATTEMPTS = 5
