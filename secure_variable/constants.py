# secure_variable/constants.py

# Cipher used when an instance carries no explicit algorithm identifier.
DEFAULT_ALGORITHM = "aes-256-cbc"

# Envelope layout: [flag: 1 byte][payload]
HEADER_SIZE = 1
PLAINTEXT_FLAG = 0
ENCRYPTED_FLAG = 1

DEFAULT_LOG_LEVEL = "INFO"
