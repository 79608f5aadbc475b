"""All magic values live here — no inline literals anywhere else."""

# Models
WHISPER_1 = "whisper-1"

# Endpoint
DEFAULT_BASE_URL = "https://api.openai.com/v1"
AUDIO_PATH_TEMPLATE = "/audio/%s"
DEFAULT_REQUEST_TIMEOUT: float = 60.0

# Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_ORGANIZATION = "OpenAI-Organization"
HEADER_CONTENT_TYPE = "Content-Type"
BEARER_TEMPLATE = "Bearer %s"

# Multipart form fields, in wire order
FIELD_FILE = "file"
FIELD_MODEL = "model"
FIELD_PROMPT = "prompt"
FIELD_RESPONSE_FORMAT = "response_format"
FIELD_TEMPERATURE = "temperature"
FIELD_LANGUAGE = "language"

# Temperature is sent with exactly two decimal places
TEMPERATURE_FORMAT = "%.2f"

# JSON response shape
RESPONSE_TEXT_KEY = "text"

# Validation messages
MSG_ERR_NO_SOURCE = "either path or bytes should be specified"
MSG_ERR_NO_EXTENSION = "filename with correct extension is required while bytes are used: %r"
MSG_ERR_NO_MODEL = "model must be a non-empty string"
MSG_ERR_BAD_FORMAT = "unsupported response_format %r, expected one of json, srt, vtt"

# Resource / encoding messages
MSG_ERR_OPEN_FILE = "opening audio file %s: %s"
MSG_ERR_FORM_CLOSED = "form already finalized, cannot write field %r"
MSG_ERR_DUPLICATE_FILE = "file field %r already written"
MSG_ERR_FORM_ENCODE = "encoding multipart form: %s"

# Transport / decoding messages
MSG_ERR_TRANSPORT = "audio request to %s failed: %s"
MSG_ERR_STATUS = "audio API returned %d: %s"
MSG_ERR_DECODE = "decoding audio response: %s"
MSG_ERR_NOT_OBJECT = "expected a JSON object with a %r field"

# Log messages
MSG_SENDING = "→ POST %s (format=%s)"
MSG_RECEIVED = "✓ %s answered %d (%d bytes)"
MSG_FIELD_WRITTEN = "form field %s written"
MSG_FIELD_OMITTED = "form field %s omitted"
MSG_FILE_FIELD = "file field %s: %s (%d bytes)"
