APP_NAME = "errortag"
ENV_PREFIX = "ERRORTAG_CONFIG"
ERROR_TAG_COMPONENT = "ErrorTag"
FEEDBACK_ATTRIBUTE = "phx-feedback-for"
