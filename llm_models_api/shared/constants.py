UPSTREAM_ERROR_MESSAGE = "Failed to fetch models from OpenRouter API"
INTERNAL_ERROR_MESSAGE = "Internal server error"
HEALTH_MESSAGE = "LLM Models API is running"

# Query parameter values that switch a boolean stage on.
TRUE_VALUE = "true"
FREE_VARIANT_MARKER = ":free"
PROVIDER_SEPARATOR = "/"
VARIANT_SEPARATOR = ":"
LIST_SEPARATOR = ","
